from unittest.mock import patch

import pytest

from rocci.backend.base import Backend
from rocci.backend.loader import SERVER_API_VERSION, BackendLoader
from rocci.backend.registry import BackendRegistry
from rocci.exceptions import BackendApiVersionMismatchError, BackendApiVersionMissingError, BackendNotFoundError


class VersionOne(Backend):
    api_version = "1.0.0"


class NoVersion(Backend):
    pass


class GarbageVersion(Backend):
    api_version = "one point oh"


@pytest.fixture
def loader():
    registry = BackendRegistry()
    registry.register("one", VersionOne)
    registry.register("unversioned", NoVersion)
    return BackendLoader(registry=registry, server_api_version="1.0.0")


def test_resolve(loader):
    assert loader.resolve("one") is VersionOne
    assert loader.resolve("  ONE ") is VersionOne


def test_resolve_unknown_backend(loader):
    with pytest.raises(BackendNotFoundError) as exc_info:
        loader.resolve("unknown")
    assert exc_info.value.backend_name == "unknown"


def test_check_version_major_mismatch(loader):
    with pytest.raises(BackendApiVersionMismatchError) as exc_info:
        loader.check_version(VersionOne, "2.0.0")
    assert exc_info.value.backend_version == "1.0.0"
    assert exc_info.value.server_version == "2.0.0"


def test_check_version_minor_mismatch_only_warns(loader):
    with patch("rocci.backend.loader.log_warning") as mock_warning:
        assert loader.check_version(VersionOne, "1.5.0") is True
    mock_warning.assert_called_once()
    assert "1.5.0" in mock_warning.call_args[0][0]


def test_check_version_patch_difference_is_silent(loader):
    with patch("rocci.backend.loader.log_warning") as mock_warning:
        assert loader.check_version(VersionOne, "1.0.7") is True
    mock_warning.assert_not_called()


def test_check_version_uses_server_version_by_default(loader):
    assert loader.check_version(VersionOne) is True

    strict = BackendLoader(registry=loader.registry, server_api_version="3.1.0")
    with pytest.raises(BackendApiVersionMismatchError):
        strict.check_version(VersionOne)


def test_check_version_missing(loader):
    with pytest.raises(BackendApiVersionMissingError):
        loader.check_version(NoVersion)


def test_check_version_unparseable(loader):
    with pytest.raises(BackendApiVersionMismatchError):
        loader.check_version(GarbageVersion)


def test_load(loader):
    assert loader.load("one") is VersionOne
    with pytest.raises(BackendApiVersionMissingError):
        loader.load("unversioned")
    with pytest.raises(BackendNotFoundError):
        loader.load("unknown")


def test_default_loader_knows_builtin_backends():
    loader = BackendLoader()

    assert loader.server_api_version == SERVER_API_VERSION
    assert loader.load("dummy").__name__ == "DummyBackend"


def test_invalid_server_version_is_rejected(loader):
    with pytest.raises(ValueError, match="server api_version"):
        BackendLoader(registry=loader.registry, server_api_version="not-a-version")
    with pytest.raises(ValueError, match="server api_version"):
        loader.check_version(VersionOne, "one.point.oh")
