# SPDX-License-Identifier: MIT

from clientdesk.model.payment import PaymentStatus
from clientdesk.model.task import TaskPriority, TaskStatus

# Color constant for completed tasks
COMPLETED_TASK_COLOR = "bright_black"

BLOCKED_COLOR = "red"
DANGLING_REFERENCE_COLOR = "bright_black"

TASK_STATUS_COLORS: dict[TaskStatus, str] = {
    "Pending": "yellow",
    "In Progress": "cyan",
    "Completed": "green",
    "On Hold": "magenta",
}

TASK_PRIORITY_COLORS: dict[TaskPriority, str] = {
    "Low": "bright_black",
    "Medium": "yellow",
    "High": "bright_red",
}

PAYMENT_STATUS_COLORS: dict[PaymentStatus, str] = {
    "Paid": "green",
    "Unpaid": "red",
    "Pending": "yellow",
}
