"""
CLI entry point — pick a URL from text on stdin and open it.
"""
from __future__ import annotations

import logging
import sys
import webbrowser
from pathlib import Path
from typing import Optional

import typer

from .config import APP_NAME, VERSION, Config
from .focus import QUIT, select
from .scanner import scan
from .terminal import ProcessScreen

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help="Pick a URL from text on stdin and open it in the browser.",
    add_completion=False,
)


_log_handler: logging.Handler | None = None


def configure_logging(config: Config) -> None:
    """
    Log to a file when one is configured; the terminal belongs to the picker.
    Replaces the handler installed by a previous call. Raises OSError when the
    log file cannot be opened.
    """
    global _log_handler
    root = logging.getLogger(APP_NAME)
    if config.log_file:
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    else:
        handler = logging.NullHandler()
    if _log_handler is not None:
        root.removeHandler(_log_handler)
        _log_handler.close()
    root.setLevel(config.log_level.upper())
    root.addHandler(handler)
    _log_handler = handler


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


@app.command()
def pick(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read text from a file instead of stdin"),
    print_only: bool = typer.Option(False, "--print", "-p", help="Print the chosen URL instead of opening it"),
    debounce_ms: Optional[int] = typer.Option(None, "--debounce-ms", help="Quiet time before an ambiguous index is taken"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write debug logs to this file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG/INFO/WARNING/ERROR"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show version"),
) -> None:
    """Scan text for URLs and choose one."""
    try:
        config = Config.from_env().replace(
            debounce_ms=debounce_ms,
            log_file=log_file,
            log_level=log_level.upper() if log_level else None,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    try:
        configure_logging(config)
    except OSError as e:
        typer.echo(f"Error: cannot open log file: {e}", err=True)
        raise typer.Exit(1)

    try:
        if file is not None:
            urls = scan(file.read_text(encoding="utf-8", errors="replace"))
        else:
            urls = scan(sys.stdin)
    except OSError as e:
        typer.echo(f"Error reading: {e}", err=True)
        raise typer.Exit(1)

    if not urls:
        typer.echo("No URLs found.", err=True)
        raise typer.Exit(1)
    logger.info("found %d urls", len(urls))

    screen = ProcessScreen()
    try:
        screen.init()
    except OSError as e:
        typer.echo(f"Error initializing screen: {e}", err=True)
        raise typer.Exit(1)
    try:
        action = select(screen, urls, config)
    except OSError as e:
        screen.fini()
        typer.echo(f"Error: terminal failed: {e}", err=True)
        raise typer.Exit(1)
    finally:
        screen.fini()

    if action == QUIT or action in config.cancel_values:
        return
    if print_only:
        typer.echo(action)
        return
    logger.info("opening %s", action)
    if not webbrowser.open(action):
        typer.echo(f"Could not open a browser for {action}", err=True)
        raise typer.Exit(1)


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
