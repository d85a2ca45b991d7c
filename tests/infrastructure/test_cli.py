"""Tests for the click command line."""

import logging
import re

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli

_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_DATABASE_URL", f"sqlite:///{tmp_path / 'catalog.db'}")
    catalog_logger = logging.getLogger("catalog")
    level = catalog_logger.level
    yield CliRunner()
    catalog_logger.setLevel(level)


def _add(runner, name, price) -> str:
    result = runner.invoke(cli, ["product", "add", "--name", name, "--price", price])
    assert result.exit_code == 0, result.output
    return re.search(_UUID, result.output).group(0)


class TestProductCommands:

    def test_list_empty(self, runner):
        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_add_then_show(self, runner):
        product_id = _add(runner, "Widget", "15")

        result = runner.invoke(cli, ["product", "show", "--id", product_id])

        assert result.exit_code == 0
        assert "Widget" in result.output
        assert "$15.00" in result.output

    def test_add_then_list(self, runner):
        first = _add(runner, "Widget", "15")
        second = _add(runner, "Gadget", "25.50")

        result = runner.invoke(cli, ["product", "list"])

        assert result.exit_code == 0
        assert result.output.index(first) < result.output.index(second)
        assert "$25.50" in result.output

    def test_update(self, runner):
        product_id = _add(runner, "Widget", "15")

        result = runner.invoke(
            cli,
            ["product", "update", "--id", product_id, "--name", "Gizmo", "--price", "9.99"],
        )

        assert result.exit_code == 0
        assert "'Gizmo' at $9.99" in result.output

    def test_show_unknown_id_fails(self, runner):
        result = runner.invoke(cli, ["product", "show", "--id", "missing"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_price_fails(self, runner):
        result = runner.invoke(cli, ["product", "add", "--name", "Widget", "--price", "-1"])
        assert result.exit_code == 1
        assert "cannot be negative" in result.output


class TestVerboseFlag:

    def test_verbose_emits_debug_logs(self, runner, caplog):
        result = runner.invoke(
            cli, ["-v", "product", "add", "--name", "Widget", "--price", "15"]
        )

        assert result.exit_code == 0, result.output
        assert logging.getLogger("catalog").level == logging.DEBUG
        assert any("Inserting product" in r.getMessage() for r in caplog.records)

    def test_default_is_quiet(self, runner, caplog):
        result = runner.invoke(cli, ["product", "add", "--name", "Widget", "--price", "15"])

        assert result.exit_code == 0, result.output
        assert logging.getLogger("catalog").level == logging.WARNING
        assert not any(r.levelno < logging.WARNING for r in caplog.records)
