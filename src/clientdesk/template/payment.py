# SPDX-License-Identifier: MIT

from clientdesk.model.entity_id import EntityId
from clientdesk.model.entity_type import EntityType
from clientdesk.model.payment import Payment
from clientdesk.time import now_utc, today_local


def get_payment_template(client_id: EntityId) -> Payment:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.PAYMENT,
        "client_id": client_id,
        "date": today_local(),
        "amount": 0.0,
        "status": "Unpaid",
        "note": None,
        "created": now,
        "updated": now,
    }
