"""Task editing sessions.

A ``TaskEditor`` holds the draft behind a new-task or edit-task screen.
Edits change the draft only; the store sees them when the draft is
saved. Leaving the screen goes through ``commit_or_discard`` so the UI
can ask "save or discard?" and the answer is applied before the draft
is treated as final or abandoned.
"""

import logging
from datetime import date
from enum import Enum

from taskmeter.application.task_service import (
    create_task,
    delete_task,
    update_task,
)
from taskmeter.config import Settings
from taskmeter.domain.shared import Err, Ok, Result, map_result
from taskmeter.domain.task import (
    InputError,
    ProjectEntry,
    ProjectField,
    Task,
    add_project_row,
    blank_projects,
    field_reset_value,
    is_numeric_field,
    remove_project_row,
    set_project_field,
    validate_numeric_field,
)
from taskmeter.infrastructure.storage import TaskStore

logger = logging.getLogger(__name__)


class ExitDecision(str, Enum):
    """Answer to the "save before leaving?" prompt."""

    SAVE = "save"
    DISCARD = "discard"


class TaskEditor:
    """Draft state for one task form.

    Example:
        editor = TaskEditor.for_new(store)
        editor.set_name("Thesis")
        editor.set_field(0, "name", "Chapters")
        ...
        if editor.has_unsaved_changes():
            result = editor.commit_or_discard(ExitDecision.SAVE)
    """

    def __init__(
        self,
        store: TaskStore,
        *,
        task_id: str | None = None,
        name: str = "",
        projects: list[ProjectEntry] | None = None,
        settings: Settings | None = None,
        today: date | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or Settings()
        self._today = today
        self._task_id = task_id
        self._name = name
        if projects is None:
            projects = blank_projects(self._settings.new_row_completed_default)
        self._projects = list(projects)
        self._baseline = self._snapshot()
        self._closed = False

    @classmethod
    def for_new(
        cls,
        store: TaskStore,
        settings: Settings | None = None,
        today: date | None = None,
    ) -> "TaskEditor":
        """Open an editor for a task that does not exist yet."""
        return cls(store, settings=settings, today=today)

    @classmethod
    def for_existing(
        cls,
        store: TaskStore,
        task_id: str,
        settings: Settings | None = None,
        today: date | None = None,
    ) -> Result["TaskEditor", str]:
        """Open an editor on a copy of a stored task."""
        task = store.get(task_id)
        if task is None:
            return Err(f"Task not found: {task_id}")
        editor = cls(
            store,
            task_id=task.id,
            name=task.name,
            projects=list(task.projects),
            settings=settings,
            today=today,
        )
        return Ok(editor)

    # ---- state ----

    @property
    def task_id(self) -> str | None:
        return self._task_id

    @property
    def is_new(self) -> bool:
        return self._task_id is None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def name(self) -> str:
        return self._name

    @property
    def projects(self) -> list[ProjectEntry]:
        return list(self._projects)

    def _snapshot(self) -> tuple[str, list[ProjectEntry]]:
        return self._name, list(self._projects)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Editor is closed")

    def has_unsaved_changes(self) -> bool:
        """True if the draft differs from what was loaded or last saved."""
        return self._snapshot() != self._baseline

    # ---- edits ----

    def set_name(self, name: str) -> None:
        self._ensure_open()
        self._name = name

    def set_field(self, index: int, field: ProjectField, value: str) -> InputError | None:
        """Edit one cell of the project grid.

        A numeric field that is neither blank nor an integer is reset to
        its default instead of being stored.

        Returns:
            MALFORMED_NUMERIC_FIELD if the value was rejected, else None.
        """
        self._ensure_open()
        error = None
        if is_numeric_field(field) and not validate_numeric_field(value):
            logger.info(f"Rejected {field}={value!r} in row {index}")
            value = field_reset_value(field)
            error = InputError.MALFORMED_NUMERIC_FIELD
        self._projects = set_project_field(self._projects, index, field, value)
        return error

    def add_project_row(self) -> None:
        self._ensure_open()
        self._projects = add_project_row(
            self._projects, self._settings.new_row_completed_default
        )

    def remove_project_row(self) -> None:
        self._ensure_open()
        self._projects = remove_project_row(self._projects)

    # ---- commit ----

    def save(self, *, default_name: bool = False) -> Result[Task, InputError | str]:
        """Validate the draft and write it to the store.

        A new-task editor becomes bound to the created task, so later
        saves update that task instead of adding another.

        Args:
            default_name: Replace a blank name with the date before
                validating.

        Returns:
            Ok(stored task), or Err with the store untouched.
        """
        self._ensure_open()
        fmt = self._settings.task_name_date_format
        if self._task_id is None:
            result = create_task(
                self._store,
                self._name,
                self._projects,
                default_name=default_name,
                today=self._today,
                name_format=fmt,
            )
        else:
            result = update_task(
                self._store,
                self._task_id,
                self._name,
                self._projects,
                default_name=default_name,
                today=self._today,
                name_format=fmt,
            )
        if isinstance(result, Err):
            return result

        task, event = result.value
        logger.debug(f"{type(event).__name__} id={task.id} ratio={task.weighted_completion_ratio}")
        self._task_id = task.id
        self._name = task.name
        self._projects = list(task.projects)
        self._baseline = self._snapshot()
        return map_result(result, lambda pair: pair[0])

    def commit_or_discard(self, decision: ExitDecision) -> Result[Task | None, InputError | str]:
        """Resolve the exit prompt and close the editor.

        SAVE persists the draft, naming it after the date if the name is
        blank. DISCARD drops the draft. With no unsaved changes there is
        nothing to decide and the editor just closes.

        Returns:
            Ok(stored task) after a save, Ok(None) if nothing was saved,
            or Err if the save failed; the editor then stays open.
        """
        self._ensure_open()
        if not self.has_unsaved_changes():
            self._closed = True
            return Ok(None)

        if decision is ExitDecision.DISCARD:
            self._name, projects = self._baseline
            self._projects = list(projects)
            self._closed = True
            logger.debug(f"Draft discarded task_id={self._task_id}")
            return Ok(None)

        result = self.save(default_name=True)
        if isinstance(result, Ok):
            self._closed = True
        return result

    def delete(self) -> Result[Task, str]:
        """Delete the task being edited and close the editor."""
        self._ensure_open()
        if self._task_id is None:
            return Err("Task has not been saved")

        result = delete_task(self._store, self._task_id)
        if isinstance(result, Err):
            return result

        self._closed = True
        return map_result(result, lambda pair: pair[0])
