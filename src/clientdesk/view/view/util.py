# SPDX-License-Identifier: MIT

from typing import Optional

from clientdesk.color import (
    COMPLETED_TASK_COLOR,
    PAYMENT_STATUS_COLORS,
    TASK_PRIORITY_COLORS,
    TASK_STATUS_COLORS,
)
from clientdesk.model.payment import PaymentStatus
from clientdesk.model.task import Task, TaskPriority, TaskStatus


def colorize(value: str, color: Optional[str]) -> str:
    if color is None or color == "" or value == "":
        return value
    return f"[{color}]{value}[/{color}]"


def render_task_status(status: TaskStatus) -> str:
    return colorize(status, TASK_STATUS_COLORS.get(status))


def render_task_priority(priority: TaskPriority) -> str:
    return colorize(priority, TASK_PRIORITY_COLORS.get(priority))


def render_payment_status(status: PaymentStatus) -> str:
    return colorize(status, PAYMENT_STATUS_COLORS.get(status))


def render_amount(amount: float, currency_symbol: str) -> str:
    return f"{currency_symbol}{amount:,.2f}"


def is_task_completed(task: Task) -> bool:
    return task["status"] == "Completed"


def dim_if_completed(task: Task, value: str) -> str:
    if is_task_completed(task):
        return colorize(value, COMPLETED_TASK_COLOR)
    return value
