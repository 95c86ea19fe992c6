"""In-memory collaborators and record factories for service tests."""

from __future__ import annotations

from copy import deepcopy

import pendulum

from clientdesk.model.task import Task
from clientdesk.template.task import get_task_template


class InMemoryTaskStore:
    """Task store double with whole-collection replace semantics."""

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks: list[Task] = deepcopy(tasks or [])
        self.save_count = 0

    def load_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def save_tasks(self, tasks: list[Task]) -> None:
        self.tasks = deepcopy(tasks)
        self.save_count += 1

    def get(self, task_id: str) -> Task:
        return [task for task in self.tasks if task["id"] == task_id][0]


class RecordingNotifier:
    def __init__(self) -> None:
        self.events: list[tuple[str, str, pendulum.DateTime]] = []

    def record(self, client_id: str, message: str, timestamp: pendulum.DateTime) -> None:
        self.events.append((client_id, message, timestamp))


def make_task(
    id: str,
    client_id: str = "client-1",
    description: str = "",
    status: str = "Pending",
    dependencies: list[str] | None = None,
) -> Task:
    task = get_task_template(client_id)
    task["id"] = id
    task["description"] = description or f"Task {id}"
    task["status"] = status  # type: ignore[typeddict-item]
    task["dependencies"] = list(dependencies or [])
    return task
