"""In-memory task store.

Holds every task of the session in insertion order. Nothing is written
to disk; the store lives as long as the process.
"""

import logging

from taskmeter.domain.shared.result import Err, Ok, Result
from taskmeter.domain.task.models import Task, new_task_id

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered collection owning all Task records.

    Records are matched by id equality. ``add`` assigns the id, ``update``
    keeps both the id and the position of the record it replaces. Tasks
    go in and come out as deep copies, so a record only changes through
    ``update``.

    Example:
        store = TaskStore()
        saved = store.add(Task(name="Release", projects=rows))
        result = store.update(saved.id, saved.model_copy(update={"name": "v2"}))
        if isinstance(result, Err):
            print(result.error)
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def add(self, task: Task) -> Task:
        """Append a task under a freshly generated id.

        Args:
            task: Task data to store. Its own id is ignored.

        Returns:
            The stored task, carrying its new id.
        """
        stored = task.model_copy(update={"id": new_task_id()}, deep=True)
        self._tasks.append(stored)
        logger.debug(f"Task added id={stored.id} name={stored.name!r} total={len(self._tasks)}")
        return stored.model_copy(deep=True)

    def update(self, task_id: str, task: Task) -> Result[Task, str]:
        """Replace the task with the given id, keeping its position.

        Args:
            task_id: Id of the record to replace.
            task: New data. Its own id is ignored; the record keeps task_id.

        Returns:
            Ok(stored task), or Err(str) if no task has that id.
        """
        index = self._index_of(task_id)
        if index is None:
            return Err(f"Task not found: {task_id}")

        stored = task.model_copy(update={"id": task_id}, deep=True)
        self._tasks[index] = stored
        logger.debug(f"Task updated id={task_id} position={index}")
        return Ok(stored.model_copy(deep=True))

    def remove(self, task_id: str) -> Result[Task, str]:
        """Delete the first task with the given id.

        Returns:
            Ok(removed task), or Err(str) if no task has that id.
        """
        index = self._index_of(task_id)
        if index is None:
            return Err(f"Task not found: {task_id}")

        removed = self._tasks.pop(index)
        logger.debug(f"Task removed id={task_id} total={len(self._tasks)}")
        return Ok(removed)

    def get(self, task_id: str) -> Task | None:
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index].model_copy(deep=True)

    def list_all(self) -> list[Task]:
        """Return all tasks in insertion order."""
        return [t.model_copy(deep=True) for t in self._tasks]
