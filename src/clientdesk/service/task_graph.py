# SPDX-License-Identifier: MIT

"""
Task dependency graph.

Tasks form a directed graph whose edges are the ids listed in each task's
``dependencies`` ("depends on"). Edges are resolved by id lookup at traversal
time, so a dependency on a deleted task is simply a dangling id: it is skipped
when walking the graph and never counts as blocking.

The module-level functions are pure and work over any task collection. The
``TaskGraph`` class binds them to a persistence collaborator and runs every
mutation as load -> modify -> save over the whole collection.
"""

from collections import deque
from typing import Callable, Iterable, Optional, Protocol, cast

import pendulum

from clientdesk import log
from clientdesk.model.entity_id import EntityId, generate_entity_id
from clientdesk.model.task import (
    COMPLETED,
    IN_PROGRESS,
    TASK_PRIORITIES,
    TASK_STATUSES,
    Task,
    TaskPriority,
    TaskStatus,
)
from clientdesk.template.task import get_task_template
from clientdesk.time import now_utc

# Statuses a blocked task may not move into when blocking is enforced
GATED_STATUSES: tuple[TaskStatus, ...] = (IN_PROGRESS, COMPLETED)


class TaskGraphError(ValueError):
    pass


class TaskNotFoundError(TaskGraphError):
    def __init__(self, task_id: EntityId) -> None:
        super().__init__(f"task {task_id} does not exist")
        self.task_id = task_id


class UnknownDependencyError(TaskGraphError):
    def __init__(self, task_id: EntityId, dependency_id: EntityId) -> None:
        super().__init__(
            f"cannot depend on {dependency_id}: no such task exists"
        )
        self.task_id = task_id
        self.dependency_id = dependency_id


class CrossClientDependencyError(TaskGraphError):
    def __init__(self, task_id: EntityId, dependency_id: EntityId) -> None:
        super().__init__(
            f"cannot depend on {dependency_id}: it belongs to a different client"
        )
        self.task_id = task_id
        self.dependency_id = dependency_id


class CycleError(TaskGraphError):
    """
    Adding ``task_id -> dependency_id`` would close a loop.

    ``cycle`` lists the ids around the loop, starting and ending with
    ``task_id``.
    """

    def __init__(
        self, task_id: EntityId, dependency_id: EntityId, cycle: list[EntityId]
    ) -> None:
        if task_id == dependency_id:
            message = "a task cannot depend on itself"
        else:
            message = "dependency would create a cycle"
        super().__init__(message)
        self.task_id = task_id
        self.dependency_id = dependency_id
        self.cycle = cycle


class BlockedTaskError(TaskGraphError):
    def __init__(
        self, task_id: EntityId, status: TaskStatus, blocking_ids: list[EntityId]
    ) -> None:
        noun = "dependency is" if len(blocking_ids) == 1 else "dependencies are"
        super().__init__(
            f"cannot move task to '{status}' while {len(blocking_ids)} {noun} incomplete"
        )
        self.task_id = task_id
        self.status = status
        self.blocking_ids = blocking_ids


class TaskStore(Protocol):
    def load_tasks(self) -> list[Task]: ...

    def save_tasks(self, tasks: list[Task]) -> None: ...


class Notifier(Protocol):
    def record(
        self, client_id: EntityId, message: str, timestamp: pendulum.DateTime
    ) -> None: ...


def index_tasks(tasks: Iterable[Task]) -> dict[EntityId, Task]:
    return {task["id"]: task for task in tasks if task["id"] is not None}


def resolvable_dependencies(task: Task, tasks: list[Task]) -> list[Task]:
    """Dependencies of ``task`` that still exist, in stored order, without duplicates."""
    by_id = index_tasks(tasks)
    resolved: list[Task] = []
    for dependency_id in dict.fromkeys(task["dependencies"]):
        dependency = by_id.get(dependency_id)
        if dependency is not None:
            resolved.append(dependency)
    return resolved


def dangling_dependencies(task: Task, tasks: list[Task]) -> list[EntityId]:
    """Dependency ids that no longer resolve to a task, without duplicates."""
    by_id = index_tasks(tasks)
    return [
        dependency_id
        for dependency_id in dict.fromkeys(task["dependencies"])
        if dependency_id not in by_id
    ]


def blocking_dependencies(task: Task, tasks: list[Task]) -> list[Task]:
    """Direct dependencies that are not yet Completed. Dangling ids are ignored."""
    return [
        dependency
        for dependency in resolvable_dependencies(task, tasks)
        if dependency["status"] != COMPLETED
    ]


def is_blocked(task: Task, tasks: list[Task]) -> bool:
    return len(blocking_dependencies(task, tasks)) > 0


def dependents(task_id: EntityId, tasks: list[Task]) -> list[Task]:
    """Tasks that list ``task_id`` as a direct dependency."""
    return [task for task in tasks if task_id in task["dependencies"]]


def find_path(
    tasks: list[Task], start_id: EntityId, target_id: EntityId
) -> Optional[list[EntityId]]:
    """
    Breadth-first search along dependency edges from ``start_id``.

    Returns the ids on a shortest path from ``start_id`` to ``target_id``
    (both included), or None when ``target_id`` is unreachable. Dangling
    ids are skipped and every task is expanded at most once.
    """
    if start_id == target_id:
        return [start_id]

    by_id = index_tasks(tasks)
    parents: dict[EntityId, EntityId] = {}
    visited = {start_id}
    queue = deque([start_id])

    while queue:
        current_id = queue.popleft()
        current = by_id.get(current_id)
        if current is None:
            continue
        for next_id in current["dependencies"]:
            if next_id in visited:
                continue
            visited.add(next_id)
            parents[next_id] = current_id
            if next_id == target_id:
                path = [next_id]
                while path[-1] != start_id:
                    path.append(parents[path[-1]])
                path.reverse()
                return path
            queue.append(next_id)

    return None


def can_reach(tasks: list[Task], start_id: EntityId, target_id: EntityId) -> bool:
    return find_path(tasks, start_id, target_id) is not None


def would_create_cycle(
    tasks: list[Task], task_id: EntityId, dependency_id: EntityId
) -> bool:
    """True if adding the edge ``task_id -> dependency_id`` closes a loop."""
    return can_reach(tasks, dependency_id, task_id)


class TaskGraph:
    """
    Dependency-aware operations over one task collection.

    Every mutation loads the full collection from ``store``, changes it in
    memory and saves the full collection back. A rejected mutation saves
    nothing.
    """

    def __init__(
        self,
        store: TaskStore,
        notifier: Optional[Notifier] = None,
        enforce_blocking: bool = False,
        clock: Callable[[], pendulum.DateTime] = now_utc,
        id_factory: Callable[[], EntityId] = generate_entity_id,
    ) -> None:
        self.store = store
        self.notifier = notifier
        self.enforce_blocking = enforce_blocking
        self.clock = clock
        self.id_factory = id_factory

    def __find(self, tasks: list[Task], task_id: EntityId) -> Task:
        for task in tasks:
            if task["id"] == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def __notify(self, task: Task, message: str) -> None:
        if self.notifier is not None:
            self.notifier.record(task["client_id"], message, self.clock())

    def get_task(self, task_id: EntityId) -> Task:
        return self.__find(self.store.load_tasks(), task_id)

    def is_blocked(self, task_id: EntityId) -> bool:
        tasks = self.store.load_tasks()
        return is_blocked(self.__find(tasks, task_id), tasks)

    def blocking_dependencies(self, task_id: EntityId) -> list[Task]:
        tasks = self.store.load_tasks()
        return blocking_dependencies(self.__find(tasks, task_id), tasks)

    def create_task(
        self,
        client_id: EntityId,
        description: str,
        due_date: Optional[pendulum.Date] = None,
        priority: TaskPriority = "Medium",
    ) -> Task:
        if priority not in TASK_PRIORITIES:
            raise ValueError(f"unknown priority '{priority}'")

        tasks = self.store.load_tasks()

        task = get_task_template(client_id)
        now = self.clock()
        task["id"] = self.id_factory()
        task["description"] = description
        task["due_date"] = due_date
        task["priority"] = priority
        task["created"] = now
        task["updated"] = now

        tasks.append(task)
        self.store.save_tasks(tasks)
        log.debug(f"Task {task['id']}: created for client {client_id}")
        return task

    def update_description(self, task_id: EntityId, description: str) -> Task:
        tasks = self.store.load_tasks()
        task = self.__find(tasks, task_id)
        previous = task["description"]
        if previous == description:
            return task

        task["description"] = description
        task["updated"] = self.clock()
        self.store.save_tasks(tasks)
        self.__notify(task, f"Task '{previous}' renamed to '{description}'")
        return task

    def update_due_date(
        self, task_id: EntityId, due_date: Optional[pendulum.Date]
    ) -> Task:
        tasks = self.store.load_tasks()
        task = self.__find(tasks, task_id)
        task["due_date"] = due_date
        task["updated"] = self.clock()
        self.store.save_tasks(tasks)
        return task

    def update_priority(self, task_id: EntityId, priority: TaskPriority) -> Task:
        if priority not in TASK_PRIORITIES:
            raise ValueError(f"unknown priority '{priority}'")

        tasks = self.store.load_tasks()
        task = self.__find(tasks, task_id)
        task["priority"] = priority
        task["updated"] = self.clock()
        self.store.save_tasks(tasks)
        return task

    def update_status(self, task_id: EntityId, status: TaskStatus) -> Task:
        """
        Move a task to ``status``.

        Any transition is allowed, including reopening a Completed task.
        Blocking is advisory unless ``enforce_blocking`` is set, in which
        case a blocked task cannot enter In Progress or Completed.
        """
        if status not in TASK_STATUSES:
            raise ValueError(f"unknown status '{status}'")

        tasks = self.store.load_tasks()
        task = self.__find(tasks, task_id)

        if self.enforce_blocking and status in GATED_STATUSES:
            blocking = blocking_dependencies(task, tasks)
            if len(blocking) > 0:
                raise BlockedTaskError(
                    task_id,
                    status,
                    [cast(EntityId, dependency["id"]) for dependency in blocking],
                )

        previous = task["status"]
        if previous == status:
            return task

        task["status"] = status
        task["updated"] = self.clock()
        self.store.save_tasks(tasks)
        log.debug(f"Task {task_id}: {previous} -> {status}")
        self.__notify(
            task, f"Task '{task['description']}' moved from {previous} to {status}"
        )
        return task

    def add_dependency(self, task_id: EntityId, dependency_id: EntityId) -> Task:
        """
        Make ``task_id`` depend on ``dependency_id``.

        Raises CycleError for a self dependency or when ``dependency_id`` can
        already reach ``task_id``. Adding an existing dependency is a no-op.
        """
        tasks = self.store.load_tasks()
        task = self.__find(tasks, task_id)

        if task_id == dependency_id:
            raise CycleError(task_id, dependency_id, [task_id, task_id])

        by_id = index_tasks(tasks)
        dependency = by_id.get(dependency_id)
        if dependency is None:
            raise UnknownDependencyError(task_id, dependency_id)
        if dependency["client_id"] != task["client_id"]:
            raise CrossClientDependencyError(task_id, dependency_id)

        path = find_path(tasks, dependency_id, task_id)
        if path is not None:
            raise CycleError(task_id, dependency_id, [task_id] + path)

        if dependency_id in task["dependencies"]:
            return task

        task["dependencies"].append(dependency_id)
        task["updated"] = self.clock()
        self.store.save_tasks(tasks)
        log.debug(f"Task {task_id}: now depends on {dependency_id}")
        return task

    def remove_dependency(self, task_id: EntityId, dependency_id: EntityId) -> Task:
        tasks = self.store.load_tasks()
        task = self.__find(tasks, task_id)
        if dependency_id not in task["dependencies"]:
            return task

        task["dependencies"] = [
            existing_id
            for existing_id in task["dependencies"]
            if existing_id != dependency_id
        ]
        task["updated"] = self.clock()
        self.store.save_tasks(tasks)
        log.debug(f"Task {task_id}: no longer depends on {dependency_id}")
        return task

    def remove_dangling_dependencies(self, task_id: EntityId) -> list[EntityId]:
        """Drop dependency ids left behind by deleted tasks and return them."""
        tasks = self.store.load_tasks()
        task = self.__find(tasks, task_id)
        dangling = dangling_dependencies(task, tasks)
        if len(dangling) == 0:
            return []

        task["dependencies"] = [
            existing_id
            for existing_id in task["dependencies"]
            if existing_id not in dangling
        ]
        task["updated"] = self.clock()
        self.store.save_tasks(tasks)
        log.debug(f"Task {task_id}: dropped {len(dangling)} dangling dependencies")
        return dangling

    def delete_task(self, task_id: EntityId) -> Task:
        """
        Remove a task from the collection.

        Tasks that depended on it keep the now dangling id.
        """
        tasks = self.store.load_tasks()
        task = self.__find(tasks, task_id)
        remaining = [other for other in tasks if other["id"] != task_id]
        self.store.save_tasks(remaining)
        log.debug(
            f"Task {task_id}: deleted, {len(dependents(task_id, remaining))} "
            "dependent(s) keep a dangling reference"
        )
        return task
