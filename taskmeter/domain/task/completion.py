"""Weighted completion ratio.

Pure functions for measuring task progress by time remaining rather than
by item count. All functions are pure - no I/O, no side effects.

For each project i:

    remaining_i = (planned_i - completed_i) * unit_i
    total_i     = planned_i * unit_i

and the ratio is ``1 - sum(remaining) / sum(total)``, or ``0.0`` when the
total time is zero (including a task with no projects). Completed counts
are not capped, so finishing more units than planned pushes the ratio
above 1.0.
"""

from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from .models import ProjectEntry
from .parsing import parse_count

RawCount = str | int


# =============================================================================
# Value Objects
# =============================================================================


class CompletionBreakdown(BaseModel):
    """Time totals behind a completion ratio.

    Attributes:
        remaining_time: Time-weighted work still to do. Negative when a
            project is over-completed.
        total_time: Time-weighted work planned.
        ratio: 1 - remaining_time / total_time, or 0.0 if total_time is 0.
    """

    remaining_time: int
    total_time: int
    ratio: float

    @property
    def percent(self) -> float:
        """Ratio as a percentage, unrounded."""
        return self.ratio * 100


# =============================================================================
# Computation
# =============================================================================


def _breakdown(rows: Iterable[tuple[int, int, int]]) -> CompletionBreakdown:
    remaining = 0
    total = 0
    for planned, unit, completed in rows:
        remaining += (planned - completed) * unit
        total += planned * unit

    ratio = 1.0 - remaining / total if total > 0 else 0.0
    return CompletionBreakdown(remaining_time=remaining, total_time=total, ratio=ratio)


def compute_weighted_completion_ratio(
    planned_counts: Sequence[RawCount],
    unit_times: Sequence[RawCount],
    completed_counts: Sequence[RawCount],
) -> float:
    """Compute the weighted completion ratio from parallel columns.

    Values may be raw form strings or ints; blank or unparsable strings
    count as 0. Columns are read up to the shortest one.

    Args:
        planned_counts: Planned unit count per project.
        unit_times: Time cost per unit per project.
        completed_counts: Completed unit count per project.

    Returns:
        The completion ratio, 0.0 when total time is zero.
    """
    rows = (
        (parse_count(p), parse_count(u), parse_count(c))
        for p, u, c in zip(planned_counts, unit_times, completed_counts)
    )
    return _breakdown(rows).ratio


def breakdown_for_projects(projects: Iterable[ProjectEntry]) -> CompletionBreakdown:
    """Compute remaining time, total time and ratio for project rows."""
    return _breakdown((p.planned, p.unit, p.completed) for p in projects)


def ratio_for_projects(projects: Iterable[ProjectEntry]) -> float:
    """Compute the weighted completion ratio for project rows."""
    return breakdown_for_projects(projects).ratio
