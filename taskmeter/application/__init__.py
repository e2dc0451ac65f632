"""Application service layer for taskmeter.

Services orchestrate domain operations against the task store.

Services:
    task_service - Create/update/delete tasks (validation, name
        defaulting, ratio recomputation)
    editor - Draft editing sessions with the save-or-discard exit decision

Example usage:
    >>> from taskmeter.application import TaskEditor, ExitDecision
    >>> from taskmeter.infrastructure.storage import TaskStore
    >>>
    >>> editor = TaskEditor.for_new(TaskStore())
    >>> editor.has_unsaved_changes()
    False
"""

from taskmeter.application.editor import ExitDecision, TaskEditor
from taskmeter.application.task_service import (
    DEFAULT_NAME_FORMAT,
    TaskSummary,
    create_task,
    default_task_name,
    delete_task,
    list_summaries,
    summarize,
    update_task,
)

__all__ = [
    # Task service
    "create_task",
    "update_task",
    "delete_task",
    "default_task_name",
    "summarize",
    "list_summaries",
    "TaskSummary",
    "DEFAULT_NAME_FORMAT",
    # Editor
    "TaskEditor",
    "ExitDecision",
]
