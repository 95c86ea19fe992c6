# SPDX-License-Identifier: MIT

from typing import Optional

from clientdesk.repository.configuration import CONFIGURATION_REPO
from clientdesk.repository.task import TASK_REPO
from clientdesk.service.notification import NotificationRecorder
from clientdesk.service.task_graph import Notifier, TaskGraph


def build_task_graph() -> TaskGraph:
    """Task graph over the stored task collection, configured from settings."""
    config = CONFIGURATION_REPO.get_config()

    notifier: Optional[Notifier] = None
    if config["record_notifications"]:
        notifier = NotificationRecorder()

    return TaskGraph(
        TASK_REPO,
        notifier=notifier,
        enforce_blocking=config["enforce_blocking"],
    )
