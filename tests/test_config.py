from pathlib import Path

import pytest

from voxcalc.config import Settings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for name in ("VOXCALC_CONFIG_FILE", "VOXCALC_LOCALE", "VOXCALC_LOG_LEVEL", "VOXCALC_LOG_PATH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_defaults() -> None:
    settings = get_settings()
    assert settings == Settings()
    assert settings.locale == "en"
    assert settings.log_path is None
    assert settings.level == 20


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
    first = get_settings()
    assert get_settings(refresh=True) is not first


def test_toml_file_with_section(tmp_path: Path) -> None:
    config = tmp_path / "voxcalc.toml"
    config.write_text(
        '[voxcalc]\nlocale = "DE"\nlog_level = "debug"\nlog_path = "logs/calc.jsonl"\n',
        encoding="utf-8",
    )

    settings = get_settings(config_file=config)

    assert settings.locale == "de"
    assert settings.log_level == "DEBUG"
    assert settings.level == 10
    assert settings.log_path == (tmp_path / "logs" / "calc.jsonl").resolve()
    assert settings.as_dict()["log_path"] == str(settings.log_path)


def test_top_level_keys_are_accepted(tmp_path: Path) -> None:
    config = tmp_path / "voxcalc.toml"
    config.write_text('locale = "fr"\n', encoding="utf-8")
    assert get_settings(config_file=config).locale == "fr"


def test_config_file_from_environment(tmp_path: Path, monkeypatch) -> None:
    config = tmp_path / "voxcalc.toml"
    config.write_text('[voxcalc]\nlocale = "ch"\n', encoding="utf-8")
    monkeypatch.setenv("VOXCALC_CONFIG_FILE", str(config))

    assert get_settings().locale == "ch"


def test_environment_overrides_file(tmp_path: Path, monkeypatch) -> None:
    config = tmp_path / "voxcalc.toml"
    config.write_text('[voxcalc]\nlocale = "de"\nlog_level = "INFO"\n', encoding="utf-8")
    monkeypatch.setenv("VOXCALC_LOCALE", "it")
    monkeypatch.setenv("VOXCALC_LOG_LEVEL", "warning")

    settings = get_settings(config_file=config)

    assert settings.locale == "it"
    assert settings.log_level == "WARNING"


def test_yaml_file(tmp_path: Path) -> None:
    pytest.importorskip("yaml")
    config = tmp_path / "voxcalc.yaml"
    config.write_text("voxcalc:\n  locale: it\n", encoding="utf-8")
    assert get_settings(config_file=config).locale == "it"


def test_invalid_locale_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("VOXCALC_LOCALE", "klingon")
    with pytest.raises(ValueError, match="klingon"):
        get_settings(refresh=True)


def test_invalid_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("VOXCALC_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        get_settings(refresh=True)


def test_unsupported_file_format(tmp_path: Path) -> None:
    config = tmp_path / "voxcalc.ini"
    config.write_text("[voxcalc]\n", encoding="utf-8")
    with pytest.raises(ValueError):
        get_settings(config_file=config)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        get_settings(config_file=tmp_path / "absent.toml")
