"""CLI interface for taskmeter using Typer.

Usage:
    taskmeter ratio -P design,10,2,5 -P review,5,4,5   # 75.00%
    taskmeter check-field 12                           # live field check
    taskmeter session run                              # interactive session

The CLI is structured as:
- app: Main Typer application
- commands/: Command groups (task, session)
- common.py: Shared output and parsing helpers
- main.py: Entry point that runs the app
"""

import logging
from typing import Optional

import typer

from taskmeter import __version__
from taskmeter.config import load_settings
from taskmeter.interfaces.cli.commands import session, task
from taskmeter.interfaces.cli.common import setup_logging

# Create the main Typer application
app = typer.Typer(
    name="taskmeter",
    help="Time-weighted progress for multi-project tasks",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"taskmeter version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
) -> None:
    """taskmeter - track how much time-weighted work a task has left.

    A task is a list of projects, each with a planned unit count, a time
    cost per unit and a completed unit count.
    """
    settings = load_settings()
    setup_logging(logging.DEBUG if verbose else settings.log_level)
    ctx.obj = settings


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(task.app, name="task")
app.add_typer(session.app, name="session")


# =============================================================================
# Top-Level Shortcuts for Common Commands
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
    """Show weighted completion (shortcut for 'task ratio')."""
    task.ratio(project=project, name=name, quiet=quiet)


@app.command("check-field")
def check_field(
    value: str = typer.Argument(..., help="Value typed into a numeric field"),
    field: Optional[str] = typer.Option(
        None, "--field", "-f", help="Field name, to show the reset value"
    ),
) -> None:
    """Check a numeric field value (shortcut for 'task check-field')."""
    task.check_field(value=value, field=field)


__all__ = ["app"]
