# SPDX-License-Identifier: MIT

from clientdesk.model.entity_id import EntityId
from clientdesk.model.entity_type import EntityType
from clientdesk.model.task import Task
from clientdesk.time import now_utc


def get_task_template(client_id: EntityId) -> Task:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.TASK,
        "client_id": client_id,
        "description": "",
        "due_date": None,
        "status": "Pending",
        "priority": "Medium",
        "dependencies": [],
        "created": now,
        "updated": now,
    }
