# SPDX-License-Identifier: MIT

from typing import TypedDict

from clientdesk.model.payment import Payment
from clientdesk.model.task import IN_PROGRESS, PENDING, TASK_STATUSES, Task, TaskStatus
from clientdesk.service.task_graph import is_blocked

RECENT_PAYMENT_COUNT = 6


class DashboardSummary(TypedDict):
    task_count: int
    tasks_by_status: dict[TaskStatus, int]
    open_task_count: int
    blocked_task_count: int
    total_paid: float
    total_outstanding: float
    recent_payments: list[Payment]


def summarize_client(
    tasks: list[Task], payments: list[Payment], all_tasks: list[Task]
) -> DashboardSummary:
    """
    Derive the dashboard figures for one client.

    Args:
        tasks: The client's tasks
        payments: The client's payments, newest first
        all_tasks: The full task collection, used to resolve dependencies

    Returns:
        Counts and totals for the dashboard view
    """
    tasks_by_status: dict[TaskStatus, int] = {status: 0 for status in TASK_STATUSES}
    for task in tasks:
        tasks_by_status[task["status"]] += 1

    open_task_count = tasks_by_status[PENDING] + tasks_by_status[IN_PROGRESS]
    blocked_task_count = len([task for task in tasks if is_blocked(task, all_tasks)])

    total_paid = sum(
        (payment["amount"] for payment in payments if payment["status"] == "Paid"),
        0.0,
    )
    total_outstanding = sum(
        (payment["amount"] for payment in payments if payment["status"] != "Paid"),
        0.0,
    )

    recent_payments = sorted(payments, key=lambda payment: payment["date"])[
        -RECENT_PAYMENT_COUNT:
    ]

    return {
        "task_count": len(tasks),
        "tasks_by_status": tasks_by_status,
        "open_task_count": open_task_count,
        "blocked_task_count": blocked_task_count,
        "total_paid": total_paid,
        "total_outstanding": total_outstanding,
        "recent_payments": recent_payments,
    }
