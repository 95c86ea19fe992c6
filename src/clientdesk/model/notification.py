# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from clientdesk.model.entity_id import EntityId


class Notification(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    client_id: EntityId
    message: str
    timestamp: pendulum.DateTime
