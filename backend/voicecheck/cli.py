from pathlib import Path
from typing import Optional

import structlog
import typer

from voicecheck.config import get_settings
from voicecheck.loader import ConfigLoadError, load_config
from voicecheck.logs import configure_logging
from voicecheck.reporting import render_report, render_summary
from voicecheck.validators import ValidationEngine

logger = structlog.get_logger()

app = typer.Typer(add_completion=False)


@app.command()
def main(
    config_file: Path = typer.Argument(..., help="Path to the agent configuration JSON file"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    color: Optional[bool] = typer.Option(
        None, "--color/--no-color", help="Colour the text report (defaults to VOICECHECK_COLOR)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Print only the final result"),
):
    """Validate a voice agent configuration file. Exits 0 when valid, 1 otherwise."""
    settings = get_settings()
    configure_logging(settings)

    try:
        config = load_config(config_file)
    except ConfigLoadError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    report = ValidationEngine().validate(config)
    logger.debug("cli_report_ready", path=str(config_file), verdict=report.verdict)

    use_color = settings.COLOR if color is None else color
    if json_output:
        typer.echo(report.model_dump_json(indent=2))
    elif quiet:
        typer.echo("\n".join(render_summary(report, use_color, settings.DEBUG_GUIDE)))
    else:
        typer.echo(render_report(report, use_color, settings.DEBUG_GUIDE))

    raise typer.Exit(code=0 if report.valid else 1)


if __name__ == "__main__":
    app()
