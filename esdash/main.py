"""Command-line entry point for esdash."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from esdash import __version__
from esdash.constants.defaults import BASE_URL_ENV_VAR
from esdash.models.state.app_settings import AppSettings, ConfigError

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = Path.home() / ".config" / "esdash" / "esdash.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(add_completion=False, help="Terminal dashboard for a search cluster.")


def configure_logging(log_file: Path, verbose: bool = False) -> None:
    """Send log records to a file; the terminal belongs to the TUI."""
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as err:
        typer.echo(f"Warning: could not open log file {log_file}: {err}", err=True)
        handler = logging.NullHandler()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"esdash version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    url: Optional[str] = typer.Option(
        None, "--url", "-u", envvar=BASE_URL_ENV_VAR, help="Cluster base URL"
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", "-i", help="Seconds between automatic refreshes"
    ),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", "-n", help="Documents shown per page"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Per-request timeout in seconds"
    ),
    auto_load: Optional[bool] = typer.Option(
        None,
        "--auto-load/--no-auto-load",
        help="Load documents as soon as an index is selected",
    ),
    log_file: Path = typer.Option(
        DEFAULT_LOG_FILE, "--log-file", help="Where to write the log"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Watch cluster health, browse indices and page through documents."""
    configure_logging(log_file, verbose)

    try:
        settings = AppSettings.load(
            base_url=url,
            refresh_interval=interval,
            page_size=page_size,
            request_timeout=timeout,
            auto_load_on_select=auto_load,
        )
    except ConfigError as err:
        logger.error("Invalid configuration: %s", err)
        typer.echo(f"esdash: invalid configuration: {err}", err=True)
        raise typer.Exit(1) from err

    # Imported late so --help and --version stay fast
    from esdash.app import DashboardApp

    dashboard = DashboardApp(settings)
    try:
        dashboard.run()
    except Exception as err:
        logger.exception("esdash failed")
        typer.echo(f"esdash: {err}", err=True)
        raise typer.Exit(1) from err
    if dashboard.return_code:
        raise typer.Exit(dashboard.return_code)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
