# SPDX-License-Identifier: MIT

import pendulum

from clientdesk import log
from clientdesk.model.entity_id import EntityId
from clientdesk.repository.notification import (
    NOTIFICATION_REPO,
    NotificationRepository,
)
from clientdesk.template.notification import get_notification_template


class NotificationRecorder:
    """
    Records notification events in the notification log.

    Fire-and-forget: nothing is returned to the caller and the log is
    written when repositories are flushed.
    """

    def __init__(self, repository: NotificationRepository = NOTIFICATION_REPO) -> None:
        self.repository = repository

    def record(
        self, client_id: EntityId, message: str, timestamp: pendulum.DateTime
    ) -> None:
        notification = get_notification_template(client_id, message)
        notification["timestamp"] = timestamp
        self.repository.save_new_notification(notification)
        log.debug(f"Notification for client {client_id}: {message}")
