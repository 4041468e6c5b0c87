"""
Tests for the version module.
"""
import importlib
import re
from importlib import metadata as importlib_metadata
from unittest.mock import mock_open, patch

from jeth_sdk import __version__


def _missing_metadata(name):
    raise importlib_metadata.PackageNotFoundError(name)


def test_version_format():
    """The version string follows semantic versioning"""
    assert re.match(r'^\d+\.\d+\.\d+$', __version__)


@patch('importlib.metadata.version')
def test_version_from_metadata(mock_metadata_version):
    mock_metadata_version.return_value = "2.3.4"
    import jeth_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == "2.3.4"
    mock_metadata_version.assert_called_with("jeth-sdk")


@patch('importlib.metadata.version', side_effect=_missing_metadata)
@patch('pathlib.Path.open', new_callable=mock_open, read_data=b'[project]\nversion = "1.2.3"\n')
def test_version_from_pyproject(mock_open_file, mock_metadata_version):
    import jeth_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == "1.2.3"


def test_version_pyproject_missing(monkeypatch):
    monkeypatch.setattr(importlib_metadata, 'version', _missing_metadata)
    monkeypatch.setattr(
        'pathlib.Path.open',
        lambda *args, **kwargs: (_ for _ in ()).throw(FileNotFoundError())
    )
    import jeth_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == "0.1.0"


def test_version_key_missing(monkeypatch):
    monkeypatch.setattr(importlib_metadata, 'version', _missing_metadata)
    monkeypatch.setattr('pathlib.Path.open', mock_open(read_data=b'[project]\nname = "jeth-sdk"\n'))
    import jeth_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == "0.1.0"


def test_version_toml_decode_error(monkeypatch):
    monkeypatch.setattr(importlib_metadata, 'version', _missing_metadata)
    monkeypatch.setattr('pathlib.Path.open', mock_open(read_data=b'not [valid toml'))
    import jeth_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == "0.1.0"
