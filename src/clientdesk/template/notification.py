# SPDX-License-Identifier: MIT

from clientdesk.model.entity_id import EntityId
from clientdesk.model.entity_type import EntityType
from clientdesk.model.notification import Notification
from clientdesk.time import now_utc


def get_notification_template(client_id: EntityId, message: str) -> Notification:
    return {
        "id": None,
        "entity_type": EntityType.NOTIFICATION,
        "client_id": client_id,
        "message": message,
        "timestamp": now_utc(),
    }
