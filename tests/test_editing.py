# tests/test_editing.py

from __future__ import annotations

import pytest

from taskmeter.domain.task import (
    Task,
    add_project_row,
    blank_projects,
    remove_project_row,
    set_project_field,
)


def test_blank_projects_is_one_row() -> None:
    rows = blank_projects()
    assert len(rows) == 1
    assert rows[0].name == ""
    assert rows[0].planned_count == ""
    assert rows[0].unit_time == ""
    assert rows[0].completed_count == "0"


def test_add_row_appends_blank_row(two_rows) -> None:
    rows = add_project_row(two_rows)
    assert len(rows) == 3
    assert rows[:2] == two_rows
    assert rows[2].name == ""
    assert rows[2].completed_count == "0"
    assert len(two_rows) == 2


def test_add_row_with_configured_default(two_rows) -> None:
    rows = add_project_row(two_rows, completed_default="")
    assert rows[-1].completed_count == ""


def test_add_then_remove_round_trips(two_rows) -> None:
    assert remove_project_row(add_project_row(two_rows)) == two_rows


def test_remove_never_drops_last_row(make_rows) -> None:
    rows = make_rows(("only", 1, 1, 0))
    assert remove_project_row(rows) == rows
    assert len(remove_project_row(rows)) == 1


def test_add_then_remove_from_single_row(make_rows) -> None:
    rows = make_rows(("only", 1, 1, 0))
    after = remove_project_row(add_project_row(rows))
    assert after == rows


def test_remove_from_single_row_twice_keeps_one(make_rows) -> None:
    rows = make_rows(("only", 1, 1, 0))
    assert len(remove_project_row(remove_project_row(rows))) == 1


def test_columns_stay_equal_length(two_rows) -> None:
    rows = add_project_row(add_project_row(two_rows))
    rows = remove_project_row(rows)
    task = Task(name="t", projects=rows)
    names, planned, unit, completed = task.columns()
    assert len(names) == len(planned) == len(unit) == len(completed) == 3


def test_set_project_field_replaces_one_cell(two_rows) -> None:
    rows = set_project_field(two_rows, 1, "completed_count", "3")
    assert rows[1].completed_count == "3"
    assert rows[1].name == "review"
    assert two_rows[1].completed_count == "5"


def test_set_project_field_bad_index(two_rows) -> None:
    with pytest.raises(IndexError):
        set_project_field(two_rows, 2, "name", "x")


def test_set_project_field_bad_field(two_rows) -> None:
    with pytest.raises(ValueError):
        set_project_field(two_rows, 0, "colour", "x")  # type: ignore[arg-type]
