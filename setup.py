import pathlib
import sys

from setuptools import find_packages, setup


__copyright__ = "Copyright 2024-date, The gammafn Project"
__license__ = "BSD-3"

# Check Python version, no point installing if unsupported version inplace
min_version = (3, 9)
if sys.version_info < min_version:
    py_version = ".".join(str(n) for n in sys.version_info)
    msg = (
        f"Python-{'.'.join(map(str, min_version))} or greater is required, "
        f"Python-{py_version} used."
    )
    raise RuntimeError(msg)


short_description = "Gamma, log-gamma, digamma and incomplete gamma functions"

readme_path = pathlib.Path(__file__).parent / "README.md"

long_description = readme_path.read_text()

version_path = pathlib.Path(__file__).parent / "src" / "gammafn" / "_version.py"
__version__ = version_path.read_text().split("=")[1].strip().strip('"')


PACKAGE_DIR = "src"

setup(
    name="gammafn",
    version=__version__,
    description=short_description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms=["any"],
    license=__license__,
    keywords=[
        "gamma function",
        "special functions",
        "statistics",
        "cephes",
    ],
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    packages=find_packages(where="src"),
    package_dir={"": PACKAGE_DIR},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "nox",
            "pytest",
            "pytest-cov",
            "scipy",
        ],
        "dev": [
            "black",
            "isort",
            "nox",
            "pytest",
            "pytest-cov",
            "scipy",
        ],
    },
)
