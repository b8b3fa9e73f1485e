"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json

import yaml
from rich.console import Console
from rich.markup import escape

from date_reaper.models.chunk import VariantReport
from date_reaper.models.release import EvaluationResult
from date_reaper.utils.text import capitalize

console = Console()
err_console = Console(stderr=True)


def _print_yaml(data) -> None:
    console.print(
        yaml.dump(data, default_flow_style=False, sort_keys=False),
        soft_wrap=True,
        markup=False,
        highlight=False,
    )


def check_sentence(result: EvaluationResult) -> str:
    name = capitalize(result.name)
    if result.is_eol:
        return f"{name} {result.cycle} is EOL since {result.eol}. Support ended on: {result.support_display}"
    return (
        f"{name} {result.cycle} is not EOL yet. It will be EOL on {result.eol}. "
        f"Support ends on {result.support_display}"
    )


def output_check_result(result: EvaluationResult, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(result.to_dict(), indent=2))
    elif fmt == "yaml":
        _print_yaml(result.to_dict())
    else:
        color = "red" if result.is_eol else "green"
        console.print(f"[{color}]{escape(check_sentence(result))}[/{color}]", soft_wrap=True)


def output_chunk_reports(tool: str, reports: list[VariantReport], fmt: str) -> None:
    if fmt == "json":
        data = {"tool": tool, "variants": [r.to_dict() for r in reports]}
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = {"tool": tool, "variants": [r.to_dict() for r in reports]}
        _print_yaml(data)
    else:
        from date_reaper.output.tables import chunk_report_table
        console.print(chunk_report_table(tool, reports))

        errors = sum(1 for r in reports if not r.ok)
        eol = sum(1 for r in reports if r.ok and r.result.is_eol)
        parts = []
        if eol:
            parts.append(f"[red]{eol} EOL[/red]")
        if errors:
            parts.append(f"[yellow]{errors} error(s)[/yellow]")
        summary = ", ".join(parts) if parts else "[green]nothing EOL[/green]"
        console.print(f"\nChecked {len(reports)} variant(s): {summary}")


def output_error(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
