"""CLI command groups for taskmeter.

Command groups:
- task: one-shot calculations (ratio, check-field)
- session: interactive in-memory session

Each command group is a Typer app registered with the main app using
app.add_typer().
"""

from taskmeter.interfaces.cli.commands import session, task

__all__ = ["task", "session"]
