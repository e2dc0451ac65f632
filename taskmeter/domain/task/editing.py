"""Project-row editing.

Pure list operations behind the form's add-row / remove-row buttons and
its per-cell edits. Each returns a new list and leaves its input alone.
"""

from .models import PROJECT_FIELDS, ProjectEntry, ProjectField

DEFAULT_COMPLETED_COUNT = "0"


def blank_project(completed_default: str = DEFAULT_COMPLETED_COUNT) -> ProjectEntry:
    """Create an empty project row."""
    return ProjectEntry(completed_count=completed_default)


def blank_projects(completed_default: str = DEFAULT_COMPLETED_COUNT) -> list[ProjectEntry]:
    """Initial rows of a new task: a single blank row."""
    return [blank_project(completed_default)]


def add_project_row(
    projects: list[ProjectEntry],
    completed_default: str = DEFAULT_COMPLETED_COUNT,
) -> list[ProjectEntry]:
    """Append one blank row.

    Args:
        projects: Current rows.
        completed_default: Initial completed count of the new row.

    Returns:
        New list with the blank row at the end.
    """
    return [*projects, blank_project(completed_default)]


def remove_project_row(projects: list[ProjectEntry]) -> list[ProjectEntry]:
    """Drop the last row, unless it is the only one left."""
    if len(projects) > 1:
        return projects[:-1]
    return list(projects)


def set_project_field(
    projects: list[ProjectEntry],
    index: int,
    field: ProjectField,
    value: str,
) -> list[ProjectEntry]:
    """Replace one cell of the project grid.

    Raises:
        IndexError: If index is not an existing row.
        ValueError: If field is not a project field.
    """
    if field not in PROJECT_FIELDS:
        raise ValueError(f"Unknown project field: {field}")
    if not 0 <= index < len(projects):
        raise IndexError(f"No project row {index} (have {len(projects)})")

    updated = list(projects)
    updated[index] = projects[index].model_copy(update={field: value})
    return updated
