import pytest

from gammafn.constants import MAX_ITER
from gammafn.util import misc
from gammafn.util.misc import (
    get_max_iter,
    get_setting_from_environ,
    parse_settings,
)


def make_env_setting(d):
    return ",".join([f"{k}={v}" for k, v in d.items()])


@pytest.mark.filterwarnings("ignore::UserWarning")
def test_get_setting_from_environ(monkeypatch):
    """correctly recovers environment variables"""
    env_name = "DUMMY_SETTING"
    monkeypatch.delenv(env_name, raising=False)
    assert get_setting_from_environ(env_name, {"max_iter": int}) == {}

    setting = {"max_iter": 20, "num_seq": 4, "name": "blah"}
    single_setting = {"max_iter": 20}
    correct_names_types = {"max_iter": int, "num_seq": int, "name": str}
    incorrect_names_types = {"max_iter": int, "num_seq": int, "name": float}

    for stng in (setting, single_setting):
        monkeypatch.setenv(env_name, make_env_setting(stng))
        got = get_setting_from_environ(env_name, correct_names_types)
        assert got == stng

    monkeypatch.setenv(env_name, make_env_setting(setting))
    got = get_setting_from_environ(env_name, incorrect_names_types)
    assert "name" not in got
    for key in got:
        assert got[key] == setting[key]


def test_get_setting_from_environ_bad_cast_warns(monkeypatch):
    """values that cannot be cast are skipped with a warning"""
    monkeypatch.setenv("DUMMY_SETTING", "max_iter=lots")
    with pytest.warns(UserWarning, match="could not cast"):
        got = get_setting_from_environ("DUMMY_SETTING", {"max_iter": int})
    assert got == {}


def test_get_setting_from_environ_ignores_unknown(monkeypatch):
    monkeypatch.setenv("DUMMY_SETTING", "max_iter=3,colour=blue,malformed")
    got = get_setting_from_environ("DUMMY_SETTING", {"max_iter": int})
    assert got == {"max_iter": 3}


def test_get_max_iter_default():
    assert get_max_iter() == MAX_ITER


def test_get_max_iter_explicit(monkeypatch):
    """an explicit value is used over the environment"""
    monkeypatch.setenv("GAMMAFN_SETTINGS", "max_iter=7")
    assert get_max_iter() == 7
    assert get_max_iter(50) == 50


@pytest.mark.parametrize("value", [0, -3])
def test_get_max_iter_invalid(value):
    with pytest.raises(ValueError):
        get_max_iter(value)


def test_get_max_iter_parses_setting_once(monkeypatch):
    """repeated calls with the same GAMMAFN_SETTINGS value do not re-parse it"""
    calls = []

    def counting_parse(value, params_types):
        calls.append(value)
        return parse_settings(value, params_types)

    monkeypatch.setattr(misc, "parse_settings", counting_parse)
    misc._max_iter_from_setting.cache_clear()
    monkeypatch.setenv("GAMMAFN_SETTINGS", "max_iter=11")
    assert [get_max_iter() for _ in range(5)] == [11] * 5
    assert calls == ["max_iter=11"]
    # a changed value is picked up
    monkeypatch.setenv("GAMMAFN_SETTINGS", "max_iter=12")
    assert get_max_iter() == 12
    misc._max_iter_from_setting.cache_clear()


def test_parse_settings():
    assert parse_settings("max_iter=4,other=1", {"max_iter": int}) == {"max_iter": 4}
