"""Centralized runtime settings for voxcalc.

This module exposes :func:`get_settings` returning the formatting locale and
logging destination used by the command line and the HTTP service. Values can
be customized via environment variables or by pointing ``VOXCALC_CONFIG_FILE``
to a TOML/YAML document.
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

try:  # Optional dependency
    import yaml  # type: ignore[import-not-found]
except Exception:  # pragma: no cover - PyYAML is optional at runtime
    yaml = None  # type: ignore[assignment]

from .interpreter.formatting import DEFAULT_LOCALE, SUPPORTED_LOCALES

__all__ = ["Settings", "get_settings", "reset_settings"]

_CONFIG_CACHE: Optional["Settings"] = None
_CONFIG_SOURCE: Optional[Path] = None


@dataclass(frozen=True)
class Settings:
    """Resolved runtime options."""

    locale: str = DEFAULT_LOCALE
    log_path: Optional[Path] = None
    log_level: str = "INFO"

    @property
    def level(self) -> int:
        """Numeric logging level matching :attr:`log_level`."""

        return logging.getLevelName(self.log_level)

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as plain values (useful for logging)."""

        return {
            "locale": self.locale,
            "log_path": str(self.log_path) if self.log_path else None,
            "log_level": self.log_level,
        }


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute():
        candidate = (base or Path.cwd()) / candidate
    return candidate.resolve()


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("YAML configuration requires the 'PyYAML' package")
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _validate_locale(value: str) -> str:
    locale = value.strip().lower()
    if locale not in SUPPORTED_LOCALES:
        supported = ", ".join(sorted(SUPPORTED_LOCALES))
        raise ValueError(f"Unsupported locale '{value}' (expected one of: {supported})")
    return locale


def _validate_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level '{value}'")
    return level


def _build_settings(config_file: Optional[Path]) -> Settings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = _normalize_path(config_file, base=Path.cwd())
        if config_file is not None:
            config_data = _load_config_file(config_file)
            config_dir = config_file.parent

    # Either a dedicated [voxcalc] table or top-level keys.
    section = _coalesce_mapping(config_data.get("voxcalc")) or _coalesce_mapping(config_data)

    env = os.environ

    locale = _validate_locale(str(env.get("VOXCALC_LOCALE") or section.get("locale") or DEFAULT_LOCALE))
    log_level = _validate_level(str(env.get("VOXCALC_LOG_LEVEL") or section.get("log_level") or "INFO"))
    log_path = _normalize_path(
        env.get("VOXCALC_LOG_PATH") or section.get("log_path"),
        base=config_dir,
    )

    return Settings(locale=locale, log_path=log_path, log_level=log_level)


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> Settings:
    """Return the cached :class:`Settings` configuration.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    explicit_path = Path(config_file).expanduser() if config_file is not None else None

    if explicit_path is not None:
        return _build_settings(explicit_path)

    env_path = os.getenv("VOXCALC_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
