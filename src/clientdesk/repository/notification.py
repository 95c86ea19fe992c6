# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from clientdesk import configuration, time
from clientdesk.model.entity_id import EntityId, generate_entity_id
from clientdesk.model.notification import Notification
from clientdesk.repository.persistence import read_document, write_document


class NotificationRepository:
    """Append-only log of notification events."""

    def __init__(self) -> None:
        self._notifications: Optional[list[Notification]] = None
        self.is_dirty = False

    @property
    def notifications(self) -> list[Notification]:
        if self._notifications is None:
            self.__load_data()
        if self._notifications is None:
            raise ValueError()
        return self._notifications

    def __load_data(self) -> None:
        self._notifications = []
        if not configuration.DATA_NOTIFICATIONS_PATH.is_file():
            return
        document = read_document(configuration.DATA_NOTIFICATIONS_PATH)
        if document is None:
            return
        for raw_notification in document.get("notifications") or []:
            raw_notification["timestamp"] = time.datetime_from_str(
                raw_notification["timestamp"]
            )
            self._notifications.append(cast(Notification, raw_notification))

    def __save_data(self) -> None:
        serializable_notifications: list[dict[str, Any]] = []
        for notification in self.notifications:
            serializable_notification = cast(dict[str, Any], deepcopy(notification))
            serializable_notification["timestamp"] = time.datetime_to_iso_str(
                serializable_notification["timestamp"]
            )
            serializable_notifications.append(serializable_notification)
        write_document(
            configuration.DATA_NOTIFICATIONS_PATH,
            {"notifications": serializable_notifications},
        )

    def flush(self) -> bool:
        if self._notifications is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def save_new_notification(self, notification: Notification) -> EntityId:
        self.is_dirty = True

        notification["id"] = generate_entity_id()
        self.notifications.append(notification)
        return notification["id"]

    def get_notifications_for_client(self, client_id: EntityId) -> list[Notification]:
        return deepcopy(
            [
                notification
                for notification in self.notifications
                if notification["client_id"] == client_id
            ]
        )


NOTIFICATION_REPO = NotificationRepository()
