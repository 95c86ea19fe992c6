# SPDX-License-Identifier: MIT

from clientdesk.model.client import Client
from clientdesk.model.entity_type import EntityType
from clientdesk.time import now_utc


def get_client_template() -> Client:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.CLIENT,
        "name": None,
        "note": None,
        "email": None,
        "active": False,
        "created": now,
        "updated": now,
    }
