# SPDX-License-Identifier: MIT

from clientdesk.model.payment import PAYMENT_STATUSES
from clientdesk.model.task import TASK_PRIORITIES, TASK_STATUSES
from clientdesk.repository.client import CLIENT_REPO


def complete_client(incomplete: str) -> list[str]:
    """Return list of client names for shell completion."""
    return [
        client["name"]
        for client in CLIENT_REPO.get_all_clients()
        if client["name"] and client["name"].startswith(incomplete)
    ]


def complete_task_status(incomplete: str) -> list[str]:
    return [status for status in TASK_STATUSES if status.startswith(incomplete)]


def complete_task_priority(incomplete: str) -> list[str]:
    return [priority for priority in TASK_PRIORITIES if priority.startswith(incomplete)]


def complete_payment_status(incomplete: str) -> list[str]:
    return [status for status in PAYMENT_STATUSES if status.startswith(incomplete)]
