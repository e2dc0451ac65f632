"""Shared utilities for taskmeter CLI commands.

- Formatted output helpers (error, success, info, warning)
- Ratio and project-grid formatting
- Parsing of ``-P name,planned,unit,completed`` options
- Logging setup
"""

import logging
import sys

import typer

from taskmeter.domain.task import PROJECT_FIELDS, ProjectEntry, ProjectField

FIELD_ALIASES: dict[str, ProjectField] = {
    "name": "name",
    "planned": "planned_count",
    "unit": "unit_time",
    "completed": "completed_count",
    "done": "completed_count",
}


LOG_HANDLER_NAME = "taskmeter-stderr"


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Send log records to stderr at the given level.

    Replaces the handler installed by an earlier call; handlers added by
    anything else are left alone.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger()
    for h in list(root.handlers):
        if h.get_name() == LOG_HANDLER_NAME:
            root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    root.setLevel(level)


def print_error(msg: str) -> None:
    """Print a formatted error message."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_separator(char: str = "=", width: int = 60) -> None:
    typer.echo(char * width)


def print_header(title: str, width: int = 60) -> None:
    """Print a title between two separator lines."""
    print_separator("=", width)
    typer.echo(title)
    print_separator("=", width)


def format_ratio(ratio: float) -> str:
    """Format a completion ratio as a percentage with two decimals.

    Example:
        format_ratio(0.8765) -> "87.65%"
    """
    return f"{ratio * 100:.2f}%"


def parse_project_option(value: str) -> ProjectEntry:
    """Parse ``name,planned,unit,completed`` into a project row.

    Missing trailing parts are left blank so that validation reports
    them; surrounding spaces are dropped.
    """
    parts = [p.strip() for p in value.split(",", len(PROJECT_FIELDS) - 1)]
    parts += [""] * (len(PROJECT_FIELDS) - len(parts))
    return ProjectEntry(**dict(zip(PROJECT_FIELDS, parts)))


def resolve_field(alias: str) -> ProjectField | None:
    """Map a user-typed field name to a project field."""
    key = alias.strip().lower()
    if key in PROJECT_FIELDS:
        return key  # type: ignore[return-value]
    return FIELD_ALIASES.get(key)


def format_project_grid(projects: list[ProjectEntry]) -> str:
    """Render project rows as a fixed-width table."""
    header = f"{'#':>3}  {'Project':<20} {'Planned':>8} {'Unit time':>10} {'Completed':>10}"
    lines = [header, "-" * len(header)]
    for i, p in enumerate(projects, start=1):
        lines.append(
            f"{i:>3}  {p.name:<20} {p.planned_count:>8} {p.unit_time:>10} {p.completed_count:>10}"
        )
    return "\n".join(lines)


def has_over_completion(projects: list[ProjectEntry]) -> bool:
    """True if any row reports more completed units than planned."""
    return any(p.completed > p.planned for p in projects)


__all__ = [
    "LOG_HANDLER_NAME",
    "setup_logging",
    "print_error",
    "print_success",
    "print_info",
    "print_warning",
    "print_separator",
    "print_header",
    "format_ratio",
    "parse_project_option",
    "resolve_field",
    "format_project_grid",
    "has_over_completion",
    "FIELD_ALIASES",
]
