# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from clientdesk import log
from clientdesk.id_map import renumbers_ids
from clientdesk.model.client import Client
from clientdesk.model.entity_id import EntityId
from clientdesk.model.task import Task, TaskPriority, TaskStatus
from clientdesk.repository.id_map import ID_MAP_REPO
from clientdesk.repository.task import TASK_REPO
from clientdesk.service.task import build_task_graph
from clientdesk.service.task_graph import (
    CycleError,
    dependents,
    index_tasks,
    is_blocked,
)
from clientdesk.terminal.completion import (
    complete_task_priority,
    complete_task_status,
)
from clientdesk.terminal.custom_typer import ClientAwareTyperGroup
from clientdesk.terminal.errors import report_errors, require_active_client
from clientdesk.terminal.parse import parse_date
from clientdesk.terminal.validate import (
    validate_task_priority,
    validate_task_status,
)
from clientdesk.version.version import checkpoint
from clientdesk.view.view.views import task as task_report

app = typer.Typer(cls=ClientAwareTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def _real_task_id(active_client: Client, task_id: int) -> EntityId:
    """Resolve a synthetic id and make sure the task belongs to the active client."""
    real_id = ID_MAP_REPO.get_real_id("tasks", task_id)
    task = TASK_REPO.get_task(real_id)
    if task["client_id"] != active_client["id"]:
        raise ValueError(f"Task {task_id} belongs to a different client")
    return real_id


def _show_task(active_client: Client, task_id: EntityId) -> None:
    task_report.single_task_view(
        cast(str, active_client["name"]),
        TASK_REPO.get_task(task_id),
        TASK_REPO.get_all_tasks(),
    )


def _describe_cycle(error: CycleError) -> str:
    by_id = index_tasks(TASK_REPO.get_all_tasks())
    return " -> ".join(
        f"'{by_id[task_id]['description']}'" if task_id in by_id else task_id
        for task_id in error.cycle
    )


@app.command("add, a", no_args_is_help=True)
def add(
    description: str,
    due: Annotated[
        Optional[pendulum.Date],
        typer.Option("--due", "-u", parser=parse_date, help=DATE_HELP),
    ] = None,
    priority: Annotated[
        Optional[str],
        typer.Option(
            "--priority",
            "-pr",
            callback=validate_task_priority,
            autocompletion=complete_task_priority,
            help="valid input: Low, Medium, High",
        ),
    ] = None,
) -> None:
    """Add a Pending task with no dependencies for the active client."""
    active_client = require_active_client()
    graph = build_task_graph()

    with report_errors():
        task = graph.create_task(
            cast(EntityId, active_client["id"]),
            description,
            due_date=due,
            priority=cast(TaskPriority, priority or "Medium"),
        )

    task_id = cast(EntityId, task["id"])
    checkpoint(f"add task: {task_id}: {description}")
    _show_task(active_client, task_id)


@app.command("list, ls")
@renumbers_ids
def list_tasks(
    status: Annotated[
        Optional[str],
        typer.Option(
            "--status",
            "-s",
            callback=validate_task_status,
            autocompletion=complete_task_status,
        ),
    ] = None,
    blocked: Annotated[
        bool, typer.Option("--blocked", "-b", help="Only show blocked tasks")
    ] = False,
) -> None:
    active_client = require_active_client()

    all_tasks = TASK_REPO.get_all_tasks()
    tasks = TASK_REPO.get_tasks_for_client(cast(EntityId, active_client["id"]))
    if status is not None:
        tasks = [task for task in tasks if task["status"] == status]
    if blocked:
        tasks = [task for task in tasks if is_blocked(task, all_tasks)]

    tasks.sort(key=lambda task: (task["due_date"] is None, task["due_date"] or 0))

    task_report.tasks_view(cast(str, active_client["name"]), "tasks", tasks, all_tasks)


@app.command("show, sh", no_args_is_help=True)
def show(task_id: int) -> None:
    active_client = require_active_client()
    with report_errors():
        real_id = _real_task_id(active_client, task_id)
    _show_task(active_client, real_id)


@app.command("modify, m", no_args_is_help=True)
def modify(
    task_id: int,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    due: Annotated[
        Optional[pendulum.Date],
        typer.Option("--due", "-u", parser=parse_date, help=DATE_HELP),
    ] = None,
    remove_due: Annotated[bool, typer.Option("--remove-due", "-ru")] = False,
    priority: Annotated[
        Optional[str],
        typer.Option(
            "--priority",
            "-pr",
            callback=validate_task_priority,
            autocompletion=complete_task_priority,
            help="valid input: Low, Medium, High",
        ),
    ] = None,
) -> None:
    active_client = require_active_client()
    graph = build_task_graph()

    with report_errors():
        real_id = _real_task_id(active_client, task_id)
        if description is not None:
            graph.update_description(real_id, description)
        if due is not None:
            graph.update_due_date(real_id, due)
        if remove_due:
            graph.update_due_date(real_id, None)
        if priority is not None:
            graph.update_priority(real_id, cast(TaskPriority, priority))

    checkpoint(f"modify task: {real_id}")
    _show_task(active_client, real_id)


def _change_status(task_id: int, status: TaskStatus) -> None:
    active_client = require_active_client()
    graph = build_task_graph()

    with report_errors():
        real_id = _real_task_id(active_client, task_id)
        blocking = graph.blocking_dependencies(real_id)
        task = graph.update_status(real_id, status)

    if len(blocking) > 0 and status in ("In Progress", "Completed"):
        log.warn(
            f"'{task['description']}' is still waiting on "
            + ", ".join(f"'{dependency['description']}'" for dependency in blocking)
        )

    checkpoint(f"task status: {real_id}: {status}")
    _show_task(active_client, real_id)


@app.command("status, st", no_args_is_help=True)
def status(
    task_id: int,
    new_status: Annotated[
        str,
        typer.Argument(
            callback=validate_task_status,
            autocompletion=complete_task_status,
            help="valid input: Pending, 'In Progress', Completed, 'On Hold'",
        ),
    ],
) -> None:
    """Move a task to another status."""
    _change_status(task_id, cast(TaskStatus, new_status))


@app.command("start", no_args_is_help=True)
def start(task_id: int) -> None:
    _change_status(task_id, "In Progress")


@app.command("complete, c", no_args_is_help=True)
def complete(task_id: int) -> None:
    _change_status(task_id, "Completed")


@app.command("hold", no_args_is_help=True)
def hold(task_id: int) -> None:
    _change_status(task_id, "On Hold")


@app.command("depend, dep", no_args_is_help=True)
def depend(task_id: int, dependency_id: int) -> None:
    """Make TASK_ID depend on DEPENDENCY_ID."""
    active_client = require_active_client()
    graph = build_task_graph()

    with report_errors():
        real_id = _real_task_id(active_client, task_id)
        real_dependency_id = _real_task_id(active_client, dependency_id)
        try:
            graph.add_dependency(real_id, real_dependency_id)
        except CycleError as e:
            log.error(f"{e}: {_describe_cycle(e)}")
            raise typer.Exit(1)

    checkpoint(f"add dependency: {real_id} -> {real_dependency_id}")
    _show_task(active_client, real_id)


@app.command("undepend, udep", no_args_is_help=True)
def undepend(
    task_id: int,
    dependency_id: Annotated[Optional[int], typer.Argument()] = None,
    dangling: Annotated[
        bool,
        typer.Option(
            "--dangling", help="Remove dependencies on tasks that were deleted"
        ),
    ] = False,
) -> None:
    """Remove DEPENDENCY_ID, or with --dangling every deleted task, from the dependencies of TASK_ID."""
    if dependency_id is None and not dangling:
        raise typer.BadParameter("give a DEPENDENCY_ID or --dangling")

    active_client = require_active_client()
    graph = build_task_graph()

    with report_errors():
        real_id = _real_task_id(active_client, task_id)
        if dependency_id is not None:
            real_dependency_id = ID_MAP_REPO.get_real_id("tasks", dependency_id)
            graph.remove_dependency(real_id, real_dependency_id)
            checkpoint(f"remove dependency: {real_id} -> {real_dependency_id}")
        if dangling:
            removed = graph.remove_dangling_dependencies(real_id)
            log.info(f"Removed {len(removed)} dependencies on deleted tasks")
            checkpoint(f"remove dangling dependencies: {real_id}")

    _show_task(active_client, real_id)


@app.command("delete, d", no_args_is_help=True)
def delete(task_id: int) -> None:
    active_client = require_active_client()
    graph = build_task_graph()

    with report_errors():
        real_id = _real_task_id(active_client, task_id)
        deleted_task: Task = graph.delete_task(real_id)

    waiting = dependents(real_id, TASK_REPO.get_all_tasks())
    if len(waiting) > 0:
        log.info(
            f"{len(waiting)} task(s) still list '{deleted_task['description']}' "
            "as a dependency; it no longer blocks them"
        )

    checkpoint(f"delete task: {real_id}: {deleted_task['description']}")
    log.success(f"Deleted task '{deleted_task['description']}'")
