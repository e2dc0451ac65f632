"""Task application service.

Orchestrates saving and deleting tasks: optional name defaulting,
validation, ratio recomputation and the store mutation, in that order.
A failed validation returns before the store is touched.
"""

import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime

from pydantic import BaseModel

from taskmeter.domain.shared import Err, Ok, Result
from taskmeter.domain.task import (
    InputError,
    ProjectEntry,
    Task,
    TaskCreated,
    TaskDeleted,
    TaskUpdated,
    ratio_for_projects,
    validate_task,
)
from taskmeter.infrastructure.storage import TaskStore

logger = logging.getLogger(__name__)

DEFAULT_NAME_FORMAT = "%Y年%m月%d日"


class TaskSummary(BaseModel):
    """One row of the task list."""

    id: str
    name: str
    project_count: int
    weighted_completion_ratio: float


def default_task_name(
    name: str,
    today: date | None = None,
    fmt: str = DEFAULT_NAME_FORMAT,
) -> str:
    """Replace a blank task name with the date.

    Args:
        name: Name as typed.
        today: Date to use (default: the current local date).
        fmt: strftime format, zero-padded month and day by default.

    Returns:
        name unchanged if it has any non-space character, else the date.
    """
    if name.strip():
        return name
    return (today or date.today()).strftime(fmt)


def create_task(
    store: TaskStore,
    name: str,
    projects: Sequence[ProjectEntry],
    *,
    default_name: bool = False,
    today: date | None = None,
    name_format: str = DEFAULT_NAME_FORMAT,
) -> Result[tuple[Task, TaskCreated], InputError]:
    """Save a new task.

    Args:
        store: Store to add the task to.
        name: Task name as typed.
        projects: Project rows.
        default_name: Replace a blank name with the date before
            validating, as the exit prompt does.
        today: Date used if the name has to be defaulted.
        name_format: strftime format for a defaulted name.

    Returns:
        Ok((stored task, TaskCreated)), or Err(InputError) with the
        store untouched.
    """
    if default_name:
        name = default_task_name(name, today, name_format)

    error = validate_task(name, projects)
    if error is not None:
        logger.info(f"New task rejected: {error.value}")
        return Err(error)

    task = Task(
        name=name,
        projects=list(projects),
        weighted_completion_ratio=ratio_for_projects(projects),
    )
    stored = store.add(task)

    event = TaskCreated(
        task_id=stored.id,
        task_name=stored.name,
        weighted_completion_ratio=stored.weighted_completion_ratio,
    )
    return Ok((stored, event))


def update_task(
    store: TaskStore,
    task_id: str,
    name: str,
    projects: Sequence[ProjectEntry],
    *,
    default_name: bool = False,
    today: date | None = None,
    name_format: str = DEFAULT_NAME_FORMAT,
) -> Result[tuple[Task, TaskUpdated], InputError | str]:
    """Save new values for an existing task.

    The task keeps its id and its position in the store; the ratio is
    recomputed from the new rows. Arguments match create_task.

    Returns:
        Ok((stored task, TaskUpdated)), Err(InputError) on validation
        failure, or Err(str) if the task is not in the store.
    """
    existing = store.get(task_id)
    if existing is None:
        return Err(f"Task not found: {task_id}")

    if default_name:
        name = default_task_name(name, today, name_format)

    error = validate_task(name, projects)
    if error is not None:
        logger.info(f"Edit of task {task_id} rejected: {error.value}")
        return Err(error)

    updated = existing.model_copy(
        update={
            "name": name,
            "projects": list(projects),
            "weighted_completion_ratio": ratio_for_projects(projects),
            "updated_at": datetime.now(UTC),
        }
    )
    result = store.update(task_id, updated)
    if isinstance(result, Err):
        return result

    stored = result.value
    event = TaskUpdated(
        task_id=task_id,
        task_name=stored.name,
        previous_ratio=existing.weighted_completion_ratio,
        weighted_completion_ratio=stored.weighted_completion_ratio,
    )
    return Ok((stored, event))


def delete_task(store: TaskStore, task_id: str) -> Result[tuple[Task, TaskDeleted], str]:
    """Remove a task from the store.

    Returns:
        Ok((removed task, TaskDeleted)), or Err(str) if it was not there.
    """
    result = store.remove(task_id)
    if isinstance(result, Err):
        return result

    removed = result.value
    return Ok((removed, TaskDeleted(task_id=removed.id, task_name=removed.name)))


def summarize(task: Task) -> TaskSummary:
    return TaskSummary(
        id=task.id,
        name=task.name,
        project_count=len(task.projects),
        weighted_completion_ratio=task.weighted_completion_ratio,
    )


def list_summaries(store: TaskStore) -> list[TaskSummary]:
    """Summaries of all tasks, in store order."""
    return [summarize(t) for t in store.list_all()]
