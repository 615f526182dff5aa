from pathlib import Path
from typing import List, Optional

import json
import typer

from .._version import __version__
from ..config import get_settings
from ..interpreter import get_example_commands, process_voice_input
from ..utils.logging import configure_json_logger, flush_handlers, log_event
from .config import app as config_app


__all__ = ["app", "run"]


app = typer.Typer(help="Natural-language calculator: arithmetic, science, units and geometry", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show voxcalc version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"voxcalc {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.add_typer(config_app, name="config")


@app.command("calc")
def calc_command(
    text: List[str] = typer.Argument(..., help="Phrase to interpret, e.g. 'convert 5 miles to km'"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Number formatting locale (en, it, de, fr, ch)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="Optional JSONL log path"),
) -> None:
    """Interpret a phrase and print the parsed form and the result."""

    settings = get_settings()
    logger = configure_json_logger(log_file or settings.log_path, level=settings.level)
    phrase = " ".join(text)

    try:
        outcome = process_voice_input(phrase, locale=locale)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--locale") from exc

    log_event(
        logger,
        "cli.calc",
        category=outcome.category.value,
        parsed=outcome.parsed,
        result=outcome.result,
        error=outcome.error,
    )
    flush_handlers(logger)

    if as_json:
        typer.echo(json.dumps(outcome.as_dict(), indent=2, ensure_ascii=False))
    elif outcome.ok:
        typer.echo(f"{outcome.parsed} = {outcome.result}")
    else:
        typer.echo(outcome.error, err=True)

    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command("examples")
def examples_command(
    as_json: bool = typer.Option(False, "--json", help="Print the catalog as JSON"),
) -> None:
    """List example phrasings grouped by category."""

    groups = get_example_commands()
    if as_json:
        typer.echo(json.dumps([group.as_dict() for group in groups], indent=2, ensure_ascii=False))
        return
    for group in groups:
        typer.echo(f"{group.category}:")
        for example in group.examples:
            typer.echo(f"  - {example}")


def run() -> None:
    """Entry point compatible with ``python -m voxcalc.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":
    run()
