"""date-reaper check-chunk - Check every variant listed in a chunk file."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from date_reaper.cli.options import OutputOption, validate_output
from date_reaper.core.batch import evaluate_chunk
from date_reaper.core.chunk_loader import load_chunk
from date_reaper.exceptions import ChunkLoadError
from date_reaper.output.formatters import output_chunk_reports, output_error

console = Console(stderr=True)


def check_chunk(
    path: Path = typer.Argument(..., help="Path to the chunk YAML file"),
    tool: str = typer.Option(..., "--tool", "-t", help="Tool to check versions for"),
    output: str = OutputOption,
) -> None:
    """Check a chunk file's variants for those which are EOL."""
    fmt = validate_output(output)
    if not tool:
        raise typer.BadParameter("must not be empty", param_hint="--tool")

    try:
        chunk = load_chunk(path)
    except ChunkLoadError as e:
        output_error(str(e))
        raise typer.Exit(code=e.exit_code)

    if not chunk.variants:
        console.print("[dim]No variants found.[/dim]")
        return

    with console.status("[bold cyan]Checking variants…") as status:

        def on_progress(i: int, total: int, version: str) -> None:
            status.update(f"[bold cyan]Checking {tool}… [dim]({i}/{total})[/dim] {version}")

        reports = evaluate_chunk(tool, chunk.variants, on_progress=on_progress)

    output_chunk_reports(tool, reports, fmt)
