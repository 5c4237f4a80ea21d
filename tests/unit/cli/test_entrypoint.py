from unittest.mock import patch

import pytest
from rich.console import Console
from typer.testing import CliRunner

from rocci.backend.api import OPERATIONS
from rocci.backend.base import Backend
from rocci.backend.loader import BackendLoader
from rocci.backend.registry import BackendRegistry
from rocci.backends.dummy import DummyBackend
from rocci.cli.entrypoint import rocci_cli
from rocci.cli.operator import check_backend, format_operations, inspect_backend, list_backends

runner = CliRunner()


class UnversionedBackend(Backend):
    description = "No api version"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ROCCI_SERVER_CONFIG", raising=False)
    monkeypatch.delenv("ROCCI_SERVER_BACKEND_OPTIONS", raising=False)


@pytest.fixture
def loader():
    registry = BackendRegistry()
    registry.register("dummy", DummyBackend)
    registry.register("unversioned", UnversionedBackend)
    return BackendLoader(registry=registry)


def test_backends_command():
    result = runner.invoke(rocci_cli, ["backends"])

    assert result.exit_code == 0
    assert "dummy" in result.output


def test_check_command():
    assert runner.invoke(rocci_cli, ["check", "dummy"]).exit_code == 0
    assert runner.invoke(rocci_cli, ["check", "unknown"]).exit_code == 1


def test_inspect_command():
    result = runner.invoke(rocci_cli, ["inspect", "dummy"])

    assert result.exit_code == 0
    assert "compute" in result.output


def test_inspect_command_with_config_file(tmp_path):
    config_file = tmp_path / "rocci.yml"
    config_file.write_text("backends:\n  dummy:\n    fixtures:\n      volumes: []\n")

    result = runner.invoke(rocci_cli, ["inspect", "dummy", "-c", str(config_file)])

    assert result.exit_code == 1


def test_debug_flag_enables_debug_logging():
    with patch("rocci.cli.entrypoint.set_log_level_to_debug") as mock_debug:
        result = runner.invoke(rocci_cli, ["check", "dummy", "--debug"])

    assert result.exit_code == 0
    mock_debug.assert_called_once()


def test_operator_functions(loader):
    list_backends(loader=loader)

    assert check_backend("dummy", loader=loader) is True
    assert check_backend("unversioned", loader=loader) is False
    assert inspect_backend("dummy", loader=loader) is True
    assert inspect_backend("unversioned", loader=loader) is False


def test_inspect_missing_config_file(tmp_path):
    assert inspect_backend("dummy", config_file=str(tmp_path / "missing.yml")) is False


def test_inspect_table_fits_an_80_column_terminal(loader):
    narrow = Console(width=80, record=True)

    with patch("rocci.cli.operator.console", narrow):
        assert inspect_backend("dummy", loader=loader) is True

    output = narrow.export_text()
    assert all(len(line) <= 80 for line in output.splitlines())
    for kind in ("compute", "network", "storage", "os_tpl", "resource_tpl"):
        assert kind in output
    assert "list_ids, list, get" in output
    assert "restart, start, stop, suspend" in output


def test_format_operations():
    assert "all" in format_operations(list(OPERATIONS))
    assert "none" in format_operations([])
    assert format_operations(["get", "list_ids"]) == "list_ids, get"
