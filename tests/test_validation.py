# tests/test_validation.py

from __future__ import annotations

import pytest

from taskmeter.domain.task import (
    InputError,
    field_reset_value,
    validate,
    validate_numeric_field,
    validate_task,
)


def _cols(*rows: tuple[str, str, str, str]) -> tuple[list[str], ...]:
    return tuple(list(col) for col in zip(*rows)) if rows else ([], [], [], [])


def test_complete_form_passes() -> None:
    names, planned, unit, completed = _cols(("design", "10", "2", "5"), ("review", "5", "4", "0"))
    assert validate("Release", names, planned, unit, completed) is None


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_blank_task_name(name: str) -> None:
    names, planned, unit, completed = _cols(("design", "10", "2", "5"))
    assert validate(name, names, planned, unit, completed) is InputError.EMPTY_TASK_NAME


def test_task_name_is_checked_before_rows() -> None:
    assert validate(" ", [""], [""], [""], [""]) is InputError.EMPTY_TASK_NAME


@pytest.mark.parametrize("blank_index", [0, 1, 2, 3])
@pytest.mark.parametrize("row", [0, 1])
def test_any_single_empty_field_fails(blank_index: int, row: int) -> None:
    rows = [["design", "10", "2", "5"], ["review", "5", "4", "0"]]
    rows[row][blank_index] = ""
    names, planned, unit, completed = _cols(*map(tuple, rows))
    assert validate("Release", names, planned, unit, completed) is InputError.EMPTY_PROJECT_FIELD


def test_whitespace_project_name_fails() -> None:
    assert validate("Release", ["  "], ["1"], ["1"], ["0"]) is InputError.EMPTY_PROJECT_FIELD


def test_numeric_fields_are_not_trimmed() -> None:
    # Presence only: a space is "present" and malformed text is tolerated.
    assert validate("Release", ["design"], [" "], ["abc"], ["-1"]) is None


def test_mismatched_lengths_check_common_prefix_only() -> None:
    # The second project name is empty, but the other columns have one row.
    assert validate("Release", ["design", ""], ["10"], ["2"], ["5"]) is None


def test_no_projects_passes() -> None:
    assert validate("Release", [], [], [], []) is None


def test_validate_task_uses_rows(make_rows) -> None:
    rows = make_rows(("design", 10, 2, 5), ("review", "", 4, 0))
    assert validate_task("Release", rows) is InputError.EMPTY_PROJECT_FIELD
    assert validate_task("Release", rows[:1]) is None


@pytest.mark.parametrize("value", ["", "0", "12", "-4", "+4"])
def test_numeric_field_accepts(value: str) -> None:
    assert validate_numeric_field(value)


@pytest.mark.parametrize("value", ["a", "1.5", " 1", "1 ", "1e3", "--1", "+"])
def test_numeric_field_rejects(value: str) -> None:
    assert not validate_numeric_field(value)


def test_field_reset_values() -> None:
    assert field_reset_value("name") == ""
    assert field_reset_value("planned_count") == ""
    assert field_reset_value("unit_time") == ""
    assert field_reset_value("completed_count") == "0"


def test_error_messages_are_distinct() -> None:
    messages = {e.message for e in InputError}
    assert len(messages) == len(InputError)
