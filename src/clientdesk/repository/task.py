# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from clientdesk import configuration, time
from clientdesk.model.entity_id import EntityId
from clientdesk.model.task import Task
from clientdesk.repository.persistence import read_document, write_document


class TaskRepository:
    """
    The whole task collection (every client) backed by a single YAML file.

    Reads hand out deep copies. Writes replace the entire collection and are
    written through to disk immediately, so callers follow a
    load -> modify -> save cycle.
    """

    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        if not configuration.DATA_TASKS_PATH.is_file():
            return
        document = read_document(configuration.DATA_TASKS_PATH)
        if document is None:
            return
        for raw_task in document.get("tasks") or []:
            self._tasks.append(self.__convert_task_for_deserialization(raw_task))

    def __save_data(self) -> None:
        serializable_tasks = [
            self.__convert_task_for_serialization(deepcopy(task)) for task in self.tasks
        ]
        write_document(configuration.DATA_TASKS_PATH, {"tasks": serializable_tasks})

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["due_date"] = time.date_to_str_optional(
            serializable_task["due_date"]
        )
        serializable_task["dependencies"] = list(serializable_task["dependencies"])
        serializable_task["created"] = time.datetime_to_iso_str(
            serializable_task["created"]
        )
        serializable_task["updated"] = time.datetime_to_iso_str(
            serializable_task["updated"]
        )
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["due_date"] = time.date_from_str_optional(
            deserializable_task.get("due_date")
        )
        # Older files may lack the key or hold null
        deserializable_task["dependencies"] = list(
            deserializable_task.get("dependencies") or []
        )
        deserializable_task["created"] = time.datetime_from_str(
            deserializable_task["created"]
        )
        deserializable_task["updated"] = time.datetime_from_str(
            deserializable_task["updated"]
        )
        return cast(Task, deserializable_task)

    def load_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def save_tasks(self, tasks: list[Task]) -> None:
        """
        Replace the whole collection and write it to disk.

        The in-memory collection is replaced before the write, so a
        PersistenceError leaves this repository holding the new state.
        """
        self._tasks = deepcopy(tasks)
        self.is_dirty = True
        self.flush()

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_tasks_for_client(self, client_id: EntityId) -> list[Task]:
        return deepcopy([task for task in self.tasks if task["client_id"] == client_id])

    def get_task(self, id: EntityId) -> Task:
        matches = [task for task in self.tasks if task["id"] == id]
        if len(matches) == 0:
            raise ValueError(f"task {id} does not exist")
        return deepcopy(matches[0])


TASK_REPO = TaskRepository()
