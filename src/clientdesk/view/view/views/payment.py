# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.table import Table

from clientdesk.model.entity_id import EntityId
from clientdesk.model.payment import Payment
from clientdesk.repository.id_map import ID_MAP_REPO
from clientdesk.time import date_to_display_str
from clientdesk.view.view.util import render_amount, render_payment_status
from clientdesk.view.view.views.header import header


def payments_view(
    active_client: str, payments: list[Payment], currency_symbol: str
) -> None:
    header(active_client, "payments")

    payments_table = Table(box=box.SIMPLE)
    payments_table.add_column("id")
    payments_table.add_column("date")
    payments_table.add_column("amount", justify="right")
    payments_table.add_column("status")
    payments_table.add_column("note")

    for payment in payments:
        payments_table.add_row(
            str(ID_MAP_REPO.associate_id("payments", cast(EntityId, payment["id"]))),
            date_to_display_str(payment["date"]),
            render_amount(payment["amount"], currency_symbol),
            render_payment_status(payment["status"]),
            payment["note"] or "",
        )

    console = Console()
    console.print(payments_table)


def single_payment_view(
    active_client: str, payment: Payment, currency_symbol: str
) -> None:
    header(active_client, "payment")

    payment_table = Table(box=box.SIMPLE)
    payment_table.add_column("property")
    payment_table.add_column("value")

    payment_table.add_row(
        "id", str(ID_MAP_REPO.associate_id("payments", cast(EntityId, payment["id"])))
    )
    payment_table.add_row("date", date_to_display_str(payment["date"]))
    payment_table.add_row("amount", render_amount(payment["amount"], currency_symbol))
    payment_table.add_row("status", render_payment_status(payment["status"]))
    payment_table.add_row("note", payment["note"] or "")

    console = Console()
    console.print(payment_table)
