"""Task domain models.

A task is a named list of project rows. Each row keeps the raw strings the
form edits (so they go back to the UI exactly as typed) and exposes parsed
integer views for the completion engine.
"""

from datetime import UTC, datetime
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field

from .parsing import parse_count

ProjectField = Literal["name", "planned_count", "unit_time", "completed_count"]

PROJECT_FIELDS: tuple[ProjectField, ...] = (
    "name",
    "planned_count",
    "unit_time",
    "completed_count",
)
NUMERIC_FIELDS: tuple[ProjectField, ...] = ("planned_count", "unit_time", "completed_count")


def new_task_id() -> str:
    """Generate a unique task identity."""
    return uuid4().hex


class ProjectEntry(BaseModel):
    """One project row of a task.

    Attributes:
        name: Display label.
        planned_count: Total units of work, as typed.
        unit_time: Time cost per unit, as typed.
        completed_count: Units already finished, as typed. Not capped at
            planned_count.
    """

    name: str = ""
    planned_count: str = ""
    unit_time: str = ""
    completed_count: str = ""

    model_config = {"coerce_numbers_to_str": True}

    @property
    def planned(self) -> int:
        return parse_count(self.planned_count)

    @property
    def unit(self) -> int:
        return parse_count(self.unit_time)

    @property
    def completed(self) -> int:
        return parse_count(self.completed_count)


class Task(BaseModel):
    """A named unit of work made of one or more projects.

    The id is assigned once and never changes; the store and services
    locate tasks by comparing ids. ``weighted_completion_ratio`` is a
    cached value, recomputed on every save and kept at full precision.
    """

    id: str = Field(default_factory=new_task_id, frozen=True)
    name: str
    projects: list[ProjectEntry] = Field(default_factory=list)
    weighted_completion_ratio: float = 0.0
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def columns(self) -> tuple[list[str], list[str], list[str], list[str]]:
        """Return the projects as four parallel columns.

        Order: names, planned counts, unit times, completed counts.
        """
        return (
            [p.name for p in self.projects],
            [p.planned_count for p in self.projects],
            [p.unit_time for p in self.projects],
            [p.completed_count for p in self.projects],
        )
