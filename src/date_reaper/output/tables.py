"""Rich table builders."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from date_reaper.models.chunk import VariantReport
from date_reaper.output.themes import styled_error, styled_status


def chunk_report_table(tool: str, reports: list[VariantReport]) -> Table:
    table = Table(title=f"EOL status: {tool}", expand=True)
    table.add_column("Version", style="bold white", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("EOL", style="magenta", no_wrap=True)
    table.add_column("Support", style="cyan")
    table.add_column("Detail", style="dim", max_width=60)

    for r in reports:
        if r.ok:
            table.add_row(
                escape(r.variant.name),
                styled_status(r.result.status),
                r.result.eol,
                escape(r.result.support_display),
                escape(r.message),
            )
        else:
            table.add_row(escape(r.variant.name), styled_error(), "-", "-", escape(str(r.error)))
    return table
