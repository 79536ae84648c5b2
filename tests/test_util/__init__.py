__all__ = ["test_misc"]
