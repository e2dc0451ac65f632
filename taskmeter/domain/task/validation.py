"""Input validation for task forms.

Save-time validation checks that fields are present, not that they are
well-formed numbers: a malformed count simply counts as 0 in the
completion engine. The per-keystroke check in ``validate_numeric_field``
keeps malformed text out of the draft in the first place.
"""

from collections.abc import Sequence
from enum import Enum

from .models import NUMERIC_FIELDS, ProjectEntry, ProjectField
from .parsing import is_integer_text


class InputError(str, Enum):
    """Validation failures surfaced to the user."""

    EMPTY_TASK_NAME = "empty_task_name"
    EMPTY_PROJECT_FIELD = "empty_project_field"
    MALFORMED_NUMERIC_FIELD = "malformed_numeric_field"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    InputError.EMPTY_TASK_NAME: "Task name cannot be empty",
    InputError.EMPTY_PROJECT_FIELD: (
        "Project name, planned count, unit time and completed count are all required"
    ),
    InputError.MALFORMED_NUMERIC_FIELD: "Please enter a whole number",
}


def validate(
    task_name: str,
    project_names: Sequence[str],
    planned_counts: Sequence[str],
    unit_times: Sequence[str],
    completed_counts: Sequence[str],
) -> InputError | None:
    """Check a task form for missing values.

    Rows are checked up to the shortest of the four columns; a length
    mismatch is not itself an error.

    Args:
        task_name: Task name as typed.
        project_names: Project name column.
        planned_counts: Planned count column.
        unit_times: Unit time column.
        completed_counts: Completed count column.

    Returns:
        The first failure found, or None if the form is complete.
    """
    if not task_name.strip():
        return InputError.EMPTY_TASK_NAME

    for name, planned, unit, completed in zip(
        project_names, planned_counts, unit_times, completed_counts
    ):
        if not name.strip() or planned == "" or unit == "" or completed == "":
            return InputError.EMPTY_PROJECT_FIELD

    return None


def validate_task(task_name: str, projects: Sequence[ProjectEntry]) -> InputError | None:
    """Check a task name and its project rows for missing values."""
    return validate(
        task_name,
        [p.name for p in projects],
        [p.planned_count for p in projects],
        [p.unit_time for p in projects],
        [p.completed_count for p in projects],
    )


def validate_numeric_field(value: str) -> bool:
    """Live check for a numeric field: empty or an integer literal."""
    return value == "" or is_integer_text(value)


def field_reset_value(field: ProjectField) -> str:
    """Value a field is reset to after a rejected edit."""
    return "0" if field == "completed_count" else ""


def is_numeric_field(field: ProjectField) -> bool:
    return field in NUMERIC_FIELDS
