# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

import pendulum

from clientdesk.model.entity_id import EntityId

TaskStatus = Literal["Pending", "In Progress", "Completed", "On Hold"]
TaskPriority = Literal["Low", "Medium", "High"]

TASK_STATUSES: tuple[TaskStatus, ...] = get_args(TaskStatus)
TASK_PRIORITIES: tuple[TaskPriority, ...] = get_args(TaskPriority)

PENDING: TaskStatus = "Pending"
IN_PROGRESS: TaskStatus = "In Progress"
COMPLETED: TaskStatus = "Completed"
ON_HOLD: TaskStatus = "On Hold"


class Task(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    client_id: EntityId
    description: str
    due_date: Optional[pendulum.Date]
    status: TaskStatus
    priority: TaskPriority
    # Set semantics; order carries no meaning and may contain dangling ids
    dependencies: list[EntityId]
    created: pendulum.DateTime
    updated: pendulum.DateTime
