"""One-shot task commands.

Compute a task's weighted completion from the command line and check
single field values, without an interactive session.
"""

from typing import Optional

import typer

from taskmeter.domain.task import (
    InputError,
    breakdown_for_projects,
    field_reset_value,
    validate_numeric_field,
    validate_task,
)
from taskmeter.interfaces.cli.common import (
    format_project_grid,
    format_ratio,
    has_over_completion,
    parse_project_option,
    print_error,
    print_header,
    print_separator,
    print_success,
    print_warning,
    resolve_field,
)

app = typer.Typer(help="Task calculation commands")


# =============================================================================
# Commands
# =============================================================================


@app.command("ratio")
def ratio(
    project: list[str] = typer.Option(
        ...,
        "--project",
        "-P",
        help="Project row as name,planned,unit,completed (repeatable)",
    ),
    name: str = typer.Option("Task", "--name", "-n", help="Task name"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Print only the percentage"),
) -> None:
    """Show the weighted completion of a task."""
    projects = [parse_project_option(p) for p in project]

    error = validate_task(name, projects)
    if error is not None:
        print_error(error.message)
        raise typer.Exit(1)

    breakdown = breakdown_for_projects(projects)

    if quiet:
        typer.echo(format_ratio(breakdown.ratio))
        return

    print_header(f"TASK: {name}")
    typer.echo(format_project_grid(projects))
    print_separator("-")
    typer.echo(f"Remaining time: {breakdown.remaining_time} of {breakdown.total_time}")
    typer.echo(f"Weighted completion: {format_ratio(breakdown.ratio)}")

    if has_over_completion(projects):
        print_warning("some projects report more completed units than planned")


@app.command("check-field")
def check_field(
    value: str = typer.Argument(..., help="Value typed into a numeric field"),
    field: Optional[str] = typer.Option(
        None, "--field", "-f", help="Field name, to show the reset value"
    ),
) -> None:
    """Check a numeric field value the way the editor does on each keystroke."""
    if validate_numeric_field(value):
        print_success("OK")
        return

    print_error(InputError.MALFORMED_NUMERIC_FIELD.message)
    if field is not None:
        resolved = resolve_field(field)
        if resolved is None:
            print_warning(f"unknown field {field!r}")
        else:
            typer.echo(f"Field would be reset to {field_reset_value(resolved)!r}")
    raise typer.Exit(1)
