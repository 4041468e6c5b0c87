"""
Version information for the jeth SDK.
"""
import importlib.metadata
import pathlib

import tomli

PACKAGE_NAME = "jeth-sdk"

try:
    __version__ = importlib.metadata.version(PACKAGE_NAME)
except importlib.metadata.PackageNotFoundError:
    # Source checkout: read pyproject.toml next to the package
    try:
        pyproject = pathlib.Path(__file__).resolve().parent.parent / "pyproject.toml"
        with pyproject.open("rb") as f:
            __version__ = tomli.load(f)["project"]["version"]
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        __version__ = "0.1.0"
