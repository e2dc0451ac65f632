"""Task domain events.

Immutable records of changes to the task store, returned by the task
service next to the record they describe.
"""

from taskmeter.domain.shared.events import DomainEvent


class TaskCreated(DomainEvent):
    """Event raised when a new task is saved for the first time."""

    task_id: str
    task_name: str
    weighted_completion_ratio: float


class TaskUpdated(DomainEvent):
    """Event raised when an existing task is saved again.

    Carries the ratio before and after the save so a list view can
    tell whether progress moved.
    """

    task_id: str
    task_name: str
    previous_ratio: float
    weighted_completion_ratio: float


class TaskDeleted(DomainEvent):
    """Event raised when a task is removed from the store."""

    task_id: str
    task_name: str
