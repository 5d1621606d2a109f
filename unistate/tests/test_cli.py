"""
Tests for the unistate CLI.
"""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    monkeypatch.setenv("UNISTATE_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("UNISTATE_METRICS_ENABLED", "false")


def test_counter_json_output():
    result = runner.invoke(app, ["counter", "--json", "+5", "-2"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data == {
        "dispatched": 2,
        "final_state": {"counter": 3},
        "observed": [0, 5, 3],
    }


def test_counter_start_value():
    result = runner.invoke(app, ["counter", "--json", "--start", "10", "-3", "+1"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["observed"] == [10, 7, 8]


def test_counter_threaded_dispatch():
    result = runner.invoke(app, ["counter", "--json", "--threaded", "+1", "+1", "+1"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["observed"] == [0, 1, 2, 3]
    assert data["final_state"] == {"counter": 3}


def test_counter_rich_output():
    result = runner.invoke(app, ["counter", "+5", "-2"])

    assert result.exit_code == 0, result.output
    assert "Counter: 0" in result.stdout
    assert "Counter: 5" in result.stdout
    assert "Counter: 3" in result.stdout
    assert "Final counter" in result.stdout


def test_counter_without_operations():
    result = runner.invoke(app, ["counter", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["observed"] == [0]


def test_counter_invalid_operation():
    result = runner.invoke(app, ["counter", "--json", "+5", "+x"])

    assert result.exit_code == 2
    assert "Invalid operation" in json.loads(result.stdout)["error"]


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "unistate" in result.stdout
    assert "v0.1.0" in result.stdout
