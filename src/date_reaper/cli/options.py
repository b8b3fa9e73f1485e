"""Shared CLI options."""

from __future__ import annotations

import typer

from date_reaper.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")

OUTPUT_FORMATS = ("table", "json", "yaml")


def validate_output(fmt: str) -> str:
    if fmt not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"must be one of: {', '.join(OUTPUT_FORMATS)}", param_hint="--output")
    return fmt
