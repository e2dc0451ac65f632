"""Storage infrastructure for taskmeter.

Tasks live in memory for the session; see ``TaskStore``.
"""

from taskmeter.infrastructure.storage.memory_store import TaskStore

__all__ = [
    "TaskStore",
]
