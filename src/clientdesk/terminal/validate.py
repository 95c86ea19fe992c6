# SPDX-License-Identifier: MIT

import re
from typing import Optional

import typer

from clientdesk.model.payment import PAYMENT_STATUSES, PaymentStatus
from clientdesk.model.task import (
    TASK_PRIORITIES,
    TASK_STATUSES,
    TaskPriority,
    TaskStatus,
)


def _normalize(value: str) -> str:
    return re.sub(r"[\s_-]+", "", value).lower()


def validate_task_status(status: Optional[str]) -> Optional[TaskStatus]:
    """Accept any spelling such as 'in-progress' or 'InProgress' and return the canonical status."""
    if status is None:
        return None
    for known in TASK_STATUSES:
        if _normalize(known) == _normalize(status):
            return known
    raise typer.BadParameter(
        f"Status must be one of: {', '.join(TASK_STATUSES)}"
    )


def validate_task_priority(priority: Optional[str]) -> Optional[TaskPriority]:
    if priority is None:
        return None
    for known in TASK_PRIORITIES:
        if _normalize(known) == _normalize(priority):
            return known
    raise typer.BadParameter(
        f"Priority must be one of: {', '.join(TASK_PRIORITIES)}"
    )


def validate_payment_status(status: Optional[str]) -> Optional[PaymentStatus]:
    if status is None:
        return None
    for known in PAYMENT_STATUSES:
        if _normalize(known) == _normalize(status):
            return known
    raise typer.BadParameter(
        f"Status must be one of: {', '.join(PAYMENT_STATUSES)}"
    )


def validate_amount(amount: Optional[float]) -> Optional[float]:
    if amount is None:
        return None
    if amount < 0:
        raise typer.BadParameter("Amount cannot be negative")
    return amount
