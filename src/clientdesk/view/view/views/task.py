# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.table import Table

from clientdesk.color import BLOCKED_COLOR, DANGLING_REFERENCE_COLOR
from clientdesk.model.entity_id import EntityId
from clientdesk.model.task import Task
from clientdesk.repository.id_map import ID_MAP_REPO
from clientdesk.service.task_graph import (
    blocking_dependencies,
    dangling_dependencies,
    resolvable_dependencies,
)
from clientdesk.time import (
    date_to_display_str_optional,
    datetime_to_display_local_datetime_str_optional,
)
from clientdesk.view.view.util import (
    colorize,
    dim_if_completed,
    render_task_priority,
    render_task_status,
)
from clientdesk.view.view.views.header import header


def synthetic_task_id(task: Task) -> str:
    return str(ID_MAP_REPO.associate_id("tasks", cast(EntityId, task["id"])))


def tasks_view(
    active_client: str,
    report_name: str,
    tasks: list[Task],
    all_tasks: list[Task],
) -> None:
    header(active_client, report_name)

    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("id")
    tasks_table.add_column("status")
    tasks_table.add_column("priority")
    tasks_table.add_column("due")
    tasks_table.add_column("blocked")
    tasks_table.add_column("depends on")
    tasks_table.add_column("description")

    for task in tasks:
        # Number the row before its dependencies so ids follow row order
        task_id = synthetic_task_id(task)
        blocked = len(blocking_dependencies(task, all_tasks)) > 0
        depends_on = ", ".join(
            synthetic_task_id(dependency)
            for dependency in resolvable_dependencies(task, all_tasks)
        )
        tasks_table.add_row(
            task_id,
            render_task_status(task["status"]),
            render_task_priority(task["priority"]),
            date_to_display_str_optional(task["due_date"]) or "",
            colorize("blocked", BLOCKED_COLOR) if blocked else "",
            depends_on,
            dim_if_completed(task, task["description"]),
        )

    console = Console()
    console.print(tasks_table)


def single_task_view(active_client: str, task: Task, all_tasks: list[Task]) -> None:
    header(active_client, "task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    blocking = blocking_dependencies(task, all_tasks)

    task_table.add_row("id", synthetic_task_id(task))
    task_table.add_row("description", task["description"])
    task_table.add_row("status", render_task_status(task["status"]))
    task_table.add_row("priority", render_task_priority(task["priority"]))
    task_table.add_row("due", date_to_display_str_optional(task["due_date"]) or "")
    task_table.add_row(
        "blocked",
        colorize("yes", BLOCKED_COLOR) if len(blocking) > 0 else "no",
    )
    dangling = dangling_dependencies(task, all_tasks)
    if len(dangling) > 0:
        task_table.add_row(
            "deleted dependencies",
            colorize(str(len(dangling)), DANGLING_REFERENCE_COLOR),
        )
    task_table.add_row(
        "created", datetime_to_display_local_datetime_str_optional(task["created"])
    )
    task_table.add_row(
        "updated", datetime_to_display_local_datetime_str_optional(task["updated"])
    )

    console = Console()
    console.print(task_table)

    dependencies = resolvable_dependencies(task, all_tasks)
    if len(dependencies) == 0:
        return

    dependencies_table = Table(box=box.SIMPLE, title="depends on")
    dependencies_table.add_column("id")
    dependencies_table.add_column("status")
    dependencies_table.add_column("description")
    for dependency in dependencies:
        dependencies_table.add_row(
            synthetic_task_id(dependency),
            render_task_status(dependency["status"]),
            dim_if_completed(dependency, dependency["description"]),
        )
    console.print(dependencies_table)
