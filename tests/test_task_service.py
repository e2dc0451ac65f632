# tests/test_task_service.py

from __future__ import annotations

from datetime import date

from taskmeter.application import (
    create_task,
    default_task_name,
    delete_task,
    list_summaries,
    update_task,
)
from taskmeter.domain.shared import Err, Ok
from taskmeter.domain.task import InputError, TaskCreated, TaskDeleted, TaskUpdated


def test_default_task_name_uses_zero_padded_date() -> None:
    assert default_task_name("", today=date(2024, 3, 5)) == "2024年03月05日"
    assert default_task_name("   ", today=date(2024, 11, 28)) == "2024年11月28日"


def test_default_task_name_keeps_real_names(fixed_day) -> None:
    assert default_task_name("Release", today=fixed_day) == "Release"
    assert default_task_name(" padded ", today=fixed_day) == " padded "


def test_default_task_name_custom_format() -> None:
    assert default_task_name("", today=date(2024, 3, 5), fmt="%Y-%m-%d") == "2024-03-05"


def test_create_task_computes_ratio_and_stores(store, two_rows) -> None:
    result = create_task(store, "Release", two_rows)

    assert isinstance(result, Ok)
    task, event = result.value
    assert task.weighted_completion_ratio == 0.75
    assert store.list_all() == [task]
    assert isinstance(event, TaskCreated)
    assert event.task_id == task.id
    assert event.weighted_completion_ratio == 0.75


def test_create_task_validation_failure_leaves_store_alone(store, make_rows) -> None:
    rows = make_rows(("design", 10, "", 5))

    assert create_task(store, "Release", rows) == Err(InputError.EMPTY_PROJECT_FIELD)
    assert create_task(store, "  ", make_rows(("d", 1, 1, 0))) == Err(InputError.EMPTY_TASK_NAME)
    assert len(store) == 0


def test_update_task_keeps_identity_and_recomputes(store, two_rows, make_rows) -> None:
    first = create_task(store, "A", two_rows).value[0]
    other = create_task(store, "B", two_rows).value[0]

    rows = make_rows(("design", 10, 2, 10), ("review", 5, 4, 5))
    result = update_task(store, first.id, "A v2", rows)

    assert isinstance(result, Ok)
    task, event = result.value
    assert task.id == first.id
    assert task.name == "A v2"
    assert task.weighted_completion_ratio == 1.0
    assert task.created_at == first.created_at
    assert [t.id for t in store.list_all()] == [first.id, other.id]
    assert isinstance(event, TaskUpdated)
    assert event.previous_ratio == 0.75
    assert event.weighted_completion_ratio == 1.0


def test_update_task_validation_failure_keeps_record(store, two_rows, make_rows) -> None:
    task = create_task(store, "A", two_rows).value[0]

    result = update_task(store, task.id, "A", make_rows(("", 1, 1, 1)))

    assert result == Err(InputError.EMPTY_PROJECT_FIELD)
    assert store.get(task.id) == task


def test_update_task_missing_id(store, two_rows) -> None:
    result = update_task(store, "missing", "A", two_rows)
    assert isinstance(result, Err)
    assert "missing" in result.error


def test_delete_task(store, two_rows) -> None:
    task = create_task(store, "A", two_rows).value[0]

    result = delete_task(store, task.id)

    assert isinstance(result, Ok)
    removed, event = result.value
    assert removed.id == task.id
    assert isinstance(event, TaskDeleted)
    assert len(store) == 0
    assert isinstance(delete_task(store, task.id), Err)


def test_list_summaries(store, two_rows, make_rows) -> None:
    create_task(store, "A", two_rows)
    create_task(store, "B", make_rows(("x", 5, 2, 8)))

    summaries = list_summaries(store)

    assert [s.name for s in summaries] == ["A", "B"]
    assert summaries[0].project_count == 2
    assert summaries[0].weighted_completion_ratio == 0.75
    assert summaries[1].weighted_completion_ratio > 1.0


def test_saved_ratio_only_changes_through_update(store, two_rows) -> None:
    task = create_task(store, "Release", two_rows).value[0]
    task.weighted_completion_ratio = 0.0
    task.projects.clear()

    assert store.get(task.id).weighted_completion_ratio == 0.75
    assert len(store.get(task.id).projects) == 2


def test_create_task_default_name_replaces_blank(store, two_rows, fixed_day) -> None:
    result = create_task(store, "  ", two_rows, default_name=True, today=fixed_day)

    assert isinstance(result, Ok)
    task, event = result.value
    assert task.name == "2024年08月28日"
    assert event.task_name == "2024年08月28日"


def test_create_task_without_default_name_rejects_blank(store, two_rows, fixed_day) -> None:
    assert create_task(store, "", two_rows, today=fixed_day) == Err(InputError.EMPTY_TASK_NAME)
    assert len(store) == 0


def test_update_task_default_name(store, two_rows, fixed_day) -> None:
    task = create_task(store, "Release", two_rows).value[0]

    result = update_task(
        store, task.id, "", two_rows, default_name=True, today=fixed_day, name_format="%Y-%m-%d"
    )

    assert isinstance(result, Ok)
    assert store.get(task.id).name == "2024-08-28"


def test_default_name_does_not_bypass_project_checks(store, make_rows, fixed_day) -> None:
    rows = make_rows(("design", 10, "", 5))
    result = create_task(store, "", rows, default_name=True, today=fixed_day)

    assert result == Err(InputError.EMPTY_PROJECT_FIELD)
    assert len(store) == 0
