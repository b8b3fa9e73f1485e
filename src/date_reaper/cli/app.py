"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import typer

from date_reaper.config.logging_config import setup_logging
from date_reaper.config.settings import settings

app = typer.Typer(
    name="date-reaper",
    help="A utility for looking up EOL dates for software.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    setup_logging("DEBUG" if verbose else settings.log_level)


def _register_commands() -> None:
    from date_reaper.cli.commands.check_cmd import check
    from date_reaper.cli.commands.chunk_cmd import check_chunk

    app.command("check", help="Check if a software version is EOL")(check)
    app.command("check-chunk", help="Check a chunk file's variants for those which are EOL")(check_chunk)


_register_commands()


def main() -> None:
    app()
