"""Utility commands to inspect the resolved voxcalc settings."""
from __future__ import annotations

from pathlib import Path
import json

import typer

from ..config import get_settings
from ..interpreter.formatting import SUPPORTED_LOCALES, format_number

__all__ = ["app"]

app = typer.Typer(
    help="Diagnostics for the voxcalc configuration.",
    add_completion=False,
)


@app.command("show")
def show_settings(
    config_file: Path = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Alternative TOML/YAML configuration to use instead of environment variables.",
    ),
    refresh: bool = typer.Option(
        False,
        "--refresh",
        help="Ignore the cache and rebuild settings from environment variables or file.",
    ),
) -> None:
    """Print the resolved settings as JSON."""

    try:
        settings = get_settings(refresh=refresh, config_file=config_file)
    except (RuntimeError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config-file") from exc

    payload = {
        "config_source": str(config_file) if config_file else "environment",
        "settings": settings.as_dict(),
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command("locales")
def list_locales() -> None:
    """List the supported number formatting locales with a sample."""

    for name in SUPPORTED_LOCALES:
        typer.echo(f"{name}: {format_number(1234567.891, locale=name)}")
