"""Smoke tests for the Typer CLI."""
import json

import pytest
from typer.testing import CliRunner

from voxcalc.cli.main import app
from voxcalc.config import reset_settings
from voxcalc.utils.logging import configure_json_logger

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(monkeypatch):
    for name in ("VOXCALC_CONFIG_FILE", "VOXCALC_LOCALE", "VOXCALC_LOG_LEVEL", "VOXCALC_LOG_PATH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
    configure_json_logger(None)


def test_help_shows_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("calc", "examples", "config"):
        assert command in result.stdout


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "voxcalc" in result.stdout


def test_calc_prints_parsed_and_result() -> None:
    result = runner.invoke(app, ["calc", "Square", "root", "of", "144"])
    assert result.exit_code == 0
    assert "sqrt(144) = 12" in result.stdout


def test_calc_json_output() -> None:
    result = runner.invoke(app, ["calc", "--json", "5 miles to km"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["category"] == "conversion"
    assert payload["result"] == "8.04672 km"
    assert "error" not in payload


def test_calc_locale_option() -> None:
    result = runner.invoke(app, ["calc", "--locale", "it", "sqrt 2"])
    assert result.exit_code == 0
    assert "1,41421356" in result.stdout


def test_calc_unrecognised_phrase_exits_with_error() -> None:
    result = runner.invoke(app, ["calc", "gibberish", "xyz"])
    assert result.exit_code == 1
    assert "Could not understand" in result.output


def test_calc_rejects_unknown_locale() -> None:
    result = runner.invoke(app, ["calc", "--locale", "xx", "2 plus 2"])
    assert result.exit_code == 2


def test_calc_writes_log_events(tmp_path) -> None:
    log_file = tmp_path / "cli.jsonl"
    result = runner.invoke(app, ["calc", "--log-file", str(log_file), "2 plus 2"])
    assert result.exit_code == 0
    events = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    calc_events = [event for event in events if event["event"] == "cli.calc"]
    assert calc_events
    assert calc_events[0]["result"] == "4"


def test_examples_command() -> None:
    result = runner.invoke(app, ["examples"])
    assert result.exit_code == 0
    assert "Arithmetic:" in result.stdout
    assert "  - BMI 70 1.75" in result.stdout


def test_examples_json() -> None:
    result = runner.invoke(app, ["examples", "--json"])
    assert result.exit_code == 0
    groups = json.loads(result.stdout)
    assert [group["category"] for group in groups] == ["Arithmetic", "Scientific", "Conversions", "Measurements"]


def test_config_show_with_file(tmp_path) -> None:
    config = tmp_path / "voxcalc.toml"
    config.write_text('[voxcalc]\nlocale = "de"\n', encoding="utf-8")
    result = runner.invoke(app, ["config", "show", "--config-file", str(config)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["settings"]["locale"] == "de"
    assert payload["config_source"] == str(config)


def test_config_locales() -> None:
    result = runner.invoke(app, ["config", "locales"])
    assert result.exit_code == 0
    assert "it: 1.234.567,891" in result.stdout
    assert "en: 1,234,567.891" in result.stdout
