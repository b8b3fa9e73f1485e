"""date-reaper check - Check a single software version."""

from __future__ import annotations

import typer

from date_reaper.cli.options import OutputOption, validate_output
from date_reaper.core.policy import CheckPolicy, run_check
from date_reaper.exceptions import DateReaperError, EOLDetected
from date_reaper.output.formatters import output_check_result, output_error


def check(
    name: str = typer.Argument(..., help="Product name as known to endoflife.date, e.g. nodejs"),
    version: str = typer.Argument(..., help="Release cycle to check, e.g. 20"),
    fail_on_missing: bool = typer.Option(
        False, "--fail-on-missing", "-m", help="Fail if the version is not found in the database"
    ),
    fail_on_unsupported: bool = typer.Option(
        False, "--fail-on-unsupported", "-u", help="Fail if the version is not supported by regular updates anymore"
    ),
    output: str = OutputOption,
) -> None:
    """Check if a software version is EOL."""
    fmt = validate_output(output)
    policy = CheckPolicy(fail_on_missing=fail_on_missing, fail_on_unsupported=fail_on_unsupported)

    try:
        result = run_check(name, version, policy)
    except EOLDetected as e:
        output_check_result(e.result, fmt)
        raise typer.Exit(code=e.exit_code)
    except DateReaperError as e:
        output_error(f"Error: {e}")
        raise typer.Exit(code=e.exit_code)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if result is None:
        output_error(f"Version {version} of {name} was not found; pass --fail-on-missing to fail instead")
        return
    output_check_result(result, fmt)
