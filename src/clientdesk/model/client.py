# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from clientdesk.model.entity_id import EntityId


class Client(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    name: Optional[str]
    note: Optional[str]
    email: Optional[str]
    active: bool
    created: pendulum.DateTime
    updated: pendulum.DateTime
