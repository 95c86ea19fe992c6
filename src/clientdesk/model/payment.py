# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

import pendulum

from clientdesk.model.entity_id import EntityId

PaymentStatus = Literal["Paid", "Unpaid", "Pending"]

PAYMENT_STATUSES: tuple[PaymentStatus, ...] = get_args(PaymentStatus)


class Payment(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    client_id: EntityId
    date: pendulum.Date
    amount: float
    status: PaymentStatus
    note: Optional[str]
    created: pendulum.DateTime
    updated: pendulum.DateTime
