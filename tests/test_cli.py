"""Tests for the command line interface."""
import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from main import cli
from prestashop_connector.errors import OperationError


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Test commands without network access."""

    def test_fields(self, runner):
        result = runner.invoke(cli, ["fields", "specific_price"])

        assert result.exit_code == 0
        assert "id_product" in result.output
        assert "Id Product" in result.output

    @patch("main.OperationRunner")
    def test_run_prints_results(self, mock_runner, runner, tmp_path):
        items_file = tmp_path / "items.json"
        items_file.write_text(json.dumps([{"order_id": 3, "order_state_id": 4}]))
        mock_runner.return_value.run.return_value = [{"json": {"id": 3}, "item": 0}]

        result = runner.invoke(cli, ["run", "order", "changeStatus", "--items", str(items_file)])

        assert result.exit_code == 0
        assert '"item": 0' in result.output
        mock_runner.return_value.run.assert_called_once_with(
            "order", "changeStatus", [{"order_id": 3, "order_state_id": 4}], False
        )

    @patch("main.OperationRunner")
    def test_run_failure_exit_code(self, mock_runner, runner):
        mock_runner.return_value.run.side_effect = OperationError("The resource 'carts' is not supported")

        result = runner.invoke(cli, ["run", "carts", "getAll"])

        assert result.exit_code == 1

    def test_poll_rejects_unknown_event(self, runner):
        result = runner.invoke(cli, ["poll", "orders.updated"])

        assert result.exit_code != 0
