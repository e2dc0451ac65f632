"""Task domain - projects, tasks and their weighted completion.

All exports are pure (no I/O, no side effects).

Key Types:
    ProjectEntry - One project row (raw form strings + parsed views)
    Task - Named list of projects with a cached completion ratio
    CompletionBreakdown - Remaining/total time behind a ratio
    InputError - Validation failures

Completion Functions:
    parse_count - Silent-zero integer parse of a raw field
    compute_weighted_completion_ratio - Ratio from parallel columns
    ratio_for_projects - Ratio from project rows
    breakdown_for_projects - Remaining/total time for project rows

Validation Functions:
    validate - Presence check over parallel columns
    validate_task - Presence check over project rows
    validate_numeric_field - Live per-keystroke check
    field_reset_value - Reset value after a rejected edit

Editing Functions:
    blank_projects - Initial rows of a new task
    add_project_row - Append a blank row
    remove_project_row - Drop the last row (never the only one)
    set_project_field - Replace one cell

Domain Events:
    TaskCreated - Task saved for the first time
    TaskUpdated - Task saved again
    TaskDeleted - Task removed
"""

from .completion import (
    CompletionBreakdown,
    breakdown_for_projects,
    compute_weighted_completion_ratio,
    ratio_for_projects,
)
from .editing import (
    DEFAULT_COMPLETED_COUNT,
    add_project_row,
    blank_projects,
    remove_project_row,
    set_project_field,
)
from .events import TaskCreated, TaskDeleted, TaskUpdated
from .models import (
    NUMERIC_FIELDS,
    PROJECT_FIELDS,
    ProjectEntry,
    ProjectField,
    Task,
    new_task_id,
)
from .parsing import is_integer_text, parse_count
from .validation import (
    InputError,
    field_reset_value,
    is_numeric_field,
    validate,
    validate_numeric_field,
    validate_task,
)

__all__ = [
    # Models
    "ProjectEntry",
    "ProjectField",
    "Task",
    "PROJECT_FIELDS",
    "NUMERIC_FIELDS",
    "new_task_id",
    # Parsing
    "parse_count",
    "is_integer_text",
    # Completion
    "CompletionBreakdown",
    "compute_weighted_completion_ratio",
    "ratio_for_projects",
    "breakdown_for_projects",
    # Validation
    "InputError",
    "validate",
    "validate_task",
    "validate_numeric_field",
    "field_reset_value",
    "is_numeric_field",
    # Editing
    "DEFAULT_COMPLETED_COUNT",
    "blank_projects",
    "add_project_row",
    "remove_project_row",
    "set_project_field",
    # Events
    "TaskCreated",
    "TaskUpdated",
    "TaskDeleted",
]
