"""Status color maps."""

from date_reaper.models import EolStatus

STATUS_COLORS: dict[EolStatus, str] = {
    EolStatus.EOL: "red bold",
    EolStatus.NOT_EOL: "green",
}

STATUS_LABELS: dict[EolStatus, str] = {
    EolStatus.EOL: "EOL",
    EolStatus.NOT_EOL: "not EOL",
}


def styled_status(status: EolStatus) -> str:
    color = STATUS_COLORS.get(status, "white")
    return f"[{color}]{STATUS_LABELS.get(status, status.value)}[/{color}]"


def styled_error(text: str = "error") -> str:
    return f"[red]{text}[/red]"
