# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

import pendulum

from clientdesk import configuration, time
from clientdesk.model.entity_id import EntityId, generate_entity_id
from clientdesk.model.payment import Payment, PaymentStatus
from clientdesk.repository.persistence import read_document, write_document


class PaymentRepository:
    def __init__(self) -> None:
        self._payments: Optional[list[Payment]] = None
        self.is_dirty = False

    @property
    def payments(self) -> list[Payment]:
        if self._payments is None:
            self.__load_data()
        if self._payments is None:
            raise ValueError()
        return self._payments

    def __load_data(self) -> None:
        self._payments = []
        if not configuration.DATA_PAYMENTS_PATH.is_file():
            return
        document = read_document(configuration.DATA_PAYMENTS_PATH)
        if document is None:
            return
        for raw_payment in document.get("payments") or []:
            self._payments.append(
                self.__convert_payment_for_deserialization(raw_payment)
            )

    def __save_data(self) -> None:
        serializable_payments = [
            self.__convert_payment_for_serialization(deepcopy(payment))
            for payment in self.payments
        ]
        write_document(
            configuration.DATA_PAYMENTS_PATH, {"payments": serializable_payments}
        )

    def flush(self) -> bool:
        if self._payments is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_payment_for_serialization(self, payment: Payment) -> dict[str, Any]:
        serializable_payment = cast(dict[str, Any], payment)
        serializable_payment["date"] = time.date_to_str(serializable_payment["date"])
        serializable_payment["created"] = time.datetime_to_iso_str(
            serializable_payment["created"]
        )
        serializable_payment["updated"] = time.datetime_to_iso_str(
            serializable_payment["updated"]
        )
        return serializable_payment

    def __convert_payment_for_deserialization(
        self, payment: dict[str, Any]
    ) -> Payment:
        deserializable_payment = payment
        deserializable_payment["date"] = time.date_from_str(
            deserializable_payment["date"]
        )
        deserializable_payment["amount"] = float(deserializable_payment["amount"])
        deserializable_payment["created"] = time.datetime_from_str(
            deserializable_payment["created"]
        )
        deserializable_payment["updated"] = time.datetime_from_str(
            deserializable_payment["updated"]
        )
        return cast(Payment, deserializable_payment)

    def save_new_payment(self, payment: Payment) -> EntityId:
        if payment["amount"] < 0:
            raise ValueError("Payment amount cannot be negative")

        self.is_dirty = True

        payment["id"] = generate_entity_id()
        # Newest first, the way the ledger is read
        self.payments.insert(0, payment)
        return payment["id"]

    def modify_payment(
        self,
        id: EntityId,
        date: Optional[pendulum.Date],
        amount: Optional[float],
        status: Optional[PaymentStatus],
        note: Optional[str],
        remove_note: bool,
    ) -> None:
        if amount is not None and amount < 0:
            raise ValueError("Payment amount cannot be negative")

        payment = [payment for payment in self.payments if payment["id"] == id][0]

        self.is_dirty = True
        # Set updated timestamp to current moment
        payment["updated"] = time.now_utc()
        if date is not None:
            payment["date"] = date
        if amount is not None:
            payment["amount"] = amount
        if status is not None:
            payment["status"] = status
        if note is not None:
            payment["note"] = note
        if remove_note:
            payment["note"] = None

    def delete_payment(self, id: EntityId) -> None:
        self.is_dirty = True
        self._payments = [payment for payment in self.payments if payment["id"] != id]

    def get_payment(self, id: EntityId) -> Payment:
        matches = [payment for payment in self.payments if payment["id"] == id]
        if len(matches) == 0:
            raise ValueError(f"payment {id} does not exist")
        return deepcopy(matches[0])

    def get_payments_for_client(self, client_id: EntityId) -> list[Payment]:
        return deepcopy(
            [payment for payment in self.payments if payment["client_id"] == client_id]
        )


PAYMENT_REPO = PaymentRepository()
