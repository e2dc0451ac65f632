"""Interactive session.

A line-oriented front end over one in-memory TaskStore: list tasks with
their completion, open new or existing tasks in an editor, delete them.
Tasks are gone when the session ends.
"""

import typer

from taskmeter.application import ExitDecision, TaskEditor, delete_task, list_summaries
from taskmeter.config import Settings, load_settings
from taskmeter.domain.shared import Err
from taskmeter.domain.task import InputError
from taskmeter.infrastructure.storage import TaskStore
from taskmeter.interfaces.cli.common import (
    format_project_grid,
    format_ratio,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
    resolve_field,
)

app = typer.Typer(help="Interactive session")

LIST_HELP = "Commands: list | new | edit N | delete N | quit"
EDITOR_HELP = (
    "Commands: name TEXT | set ROW FIELD VALUE | add | remove | show | save | delete | back\n"
    "Fields: name, planned, unit, completed"
)


def _error_text(error: InputError | str) -> str:
    return error.message if isinstance(error, InputError) else error


def _prompt(label: str) -> str | None:
    """Read one line; None at end of input."""
    try:
        return typer.prompt(label, default="", show_default=False).strip()
    except typer.Abort:
        return None


# =============================================================================
# Task list
# =============================================================================


def show_tasks(store: TaskStore) -> None:
    summaries = list_summaries(store)
    if not summaries:
        print_info("No tasks yet. Use 'new' to create one.")
        return
    print_header("TASKS")
    for i, s in enumerate(summaries, start=1):
        typer.echo(f"{i:>3}. {s.name:<30} {format_ratio(s.weighted_completion_ratio):>9}")


def _task_id_at(store: TaskStore, arg: str) -> str | None:
    tasks = store.list_all()
    if not arg.isdigit() or not 1 <= int(arg) <= len(tasks):
        print_error(f"No task number {arg!r}")
        return None
    return tasks[int(arg) - 1].id


def run_session(store: TaskStore, settings: Settings) -> None:
    """Run the task list loop until quit or end of input."""
    print_info(LIST_HELP)
    show_tasks(store)

    while True:
        line = _prompt("tasks")
        if line is None:
            break
        cmd, _, arg = line.partition(" ")
        cmd = cmd.lower()

        if not cmd:
            continue
        if cmd in ("quit", "exit", "q"):
            break
        if cmd in ("list", "ls"):
            show_tasks(store)
        elif cmd == "new":
            edit_loop(TaskEditor.for_new(store, settings=settings))
            show_tasks(store)
        elif cmd == "edit":
            task_id = _task_id_at(store, arg.strip())
            if task_id is None:
                continue
            result = TaskEditor.for_existing(store, task_id, settings=settings)
            if isinstance(result, Err):
                print_error(result.error)
                continue
            edit_loop(result.value)
            show_tasks(store)
        elif cmd == "delete":
            task_id = _task_id_at(store, arg.strip())
            if task_id is None:
                continue
            task = store.get(task_id)
            if task and typer.confirm(f"Delete '{task.name}'? This cannot be undone."):
                deleted = delete_task(store, task_id)
                if isinstance(deleted, Err):
                    print_error(deleted.error)
                else:
                    print_success(f"Deleted '{task.name}'")
            show_tasks(store)
        else:
            print_error(f"Unknown command: {cmd}")
            print_info(LIST_HELP)


# =============================================================================
# Editor
# =============================================================================


def show_editor(editor: TaskEditor) -> None:
    title = editor.name or ("New task" if editor.is_new else "Edit task")
    print_header(title)
    typer.echo(format_project_grid(editor.projects))


def _set_cell(editor: TaskEditor, arg: str) -> None:
    parts = arg.split(" ", 2)
    if len(parts) < 2 or not parts[0].isdigit():
        print_error("Usage: set ROW FIELD VALUE")
        return
    field = resolve_field(parts[1])
    if field is None:
        print_error(f"Unknown field: {parts[1]}")
        return
    value = parts[2] if len(parts) == 3 else ""

    try:
        error = editor.set_field(int(parts[0]) - 1, field, value)
    except IndexError:
        print_error(f"No row {parts[0]}")
        return
    if error is not None:
        print_warning(f"{error.message}; field reset")


def _leave(editor: TaskEditor) -> None:
    if not editor.has_unsaved_changes():
        editor.commit_or_discard(ExitDecision.DISCARD)
        return

    save = typer.confirm("You have unsaved changes. Save before leaving?", default=True)
    result = editor.commit_or_discard(ExitDecision.SAVE if save else ExitDecision.DISCARD)
    if isinstance(result, Err):
        print_error(_error_text(result.error))
    elif result.value is not None:
        print_success(f"Saved '{result.value.name}'")


def edit_loop(editor: TaskEditor) -> None:
    """Edit one task until it is saved, deleted or left."""
    print_info(EDITOR_HELP)
    show_editor(editor)

    while not editor.closed:
        line = _prompt("edit")
        if line is None:
            if editor.has_unsaved_changes():
                print_warning("end of input, unsaved changes discarded")
            editor.commit_or_discard(ExitDecision.DISCARD)
            break
        cmd, _, arg = line.partition(" ")
        cmd = cmd.lower()

        if not cmd:
            continue
        if cmd == "name":
            editor.set_name(arg)
        elif cmd == "set":
            _set_cell(editor, arg)
        elif cmd == "add":
            editor.add_project_row()
            show_editor(editor)
        elif cmd == "remove":
            editor.remove_project_row()
            show_editor(editor)
        elif cmd == "show":
            show_editor(editor)
        elif cmd == "save":
            result = editor.save()
            if isinstance(result, Err):
                print_error(_error_text(result.error))
                continue
            print_success(
                f"Saved '{result.value.name}' "
                f"({format_ratio(result.value.weighted_completion_ratio)})"
            )
            editor.commit_or_discard(ExitDecision.SAVE)
        elif cmd == "delete":
            if editor.is_new:
                print_error("This task has not been saved yet")
            elif typer.confirm("Delete this task? This cannot be undone."):
                result = editor.delete()
                if isinstance(result, Err):
                    print_error(result.error)
                else:
                    print_success(f"Deleted '{result.value.name}'")
        elif cmd in ("back", "quit", "exit", "q"):
            _leave(editor)
        else:
            print_error(f"Unknown command: {cmd}")
            print_info(EDITOR_HELP)


# =============================================================================
# Commands
# =============================================================================


@app.command("run")
def run(ctx: typer.Context) -> None:
    """Start an interactive session (tasks are kept in memory only)."""
    settings = ctx.obj if isinstance(ctx.obj, Settings) else load_settings()
    run_session(TaskStore(), settings)
