# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from clientdesk import log
from clientdesk.id_map import renumbers_ids
from clientdesk.model.client import Client
from clientdesk.model.entity_id import EntityId
from clientdesk.model.payment import PaymentStatus
from clientdesk.repository.configuration import CONFIGURATION_REPO
from clientdesk.repository.id_map import ID_MAP_REPO
from clientdesk.repository.payment import PAYMENT_REPO
from clientdesk.template.payment import get_payment_template
from clientdesk.terminal.completion import complete_payment_status
from clientdesk.terminal.custom_typer import ClientAwareTyperGroup
from clientdesk.terminal.errors import report_errors, require_active_client
from clientdesk.terminal.parse import parse_date
from clientdesk.terminal.validate import validate_amount, validate_payment_status
from clientdesk.version.version import checkpoint
from clientdesk.view.view.views import payment as payment_report

app = typer.Typer(cls=ClientAwareTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def _real_payment_id(active_client: Client, payment_id: int) -> EntityId:
    real_id = ID_MAP_REPO.get_real_id("payments", payment_id)
    payment = PAYMENT_REPO.get_payment(real_id)
    if payment["client_id"] != active_client["id"]:
        raise ValueError(f"Payment {payment_id} belongs to a different client")
    return real_id


@app.command("add, a")
def add(
    amount: Annotated[
        float, typer.Argument(callback=validate_amount, help="amount received or due")
    ] = 0.0,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-dt", parser=parse_date, help=DATE_HELP),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option(
            "--status",
            "-s",
            callback=validate_payment_status,
            autocompletion=complete_payment_status,
            help="valid input: Paid, Unpaid, Pending",
        ),
    ] = None,
    note: Annotated[Optional[str], typer.Option("--note", "-n")] = None,
) -> None:
    """Record a payment for the active client (defaults: today, Unpaid)."""
    active_client = require_active_client()
    config = CONFIGURATION_REPO.get_config()

    payment = get_payment_template(cast(EntityId, active_client["id"]))
    payment["amount"] = amount
    if date is not None:
        payment["date"] = date
    if status is not None:
        payment["status"] = cast(PaymentStatus, status)
    payment["note"] = note

    with report_errors():
        payment_id = PAYMENT_REPO.save_new_payment(payment)

    checkpoint(f"add payment: {payment_id}: {amount}")

    payment_report.single_payment_view(
        cast(str, active_client["name"]),
        PAYMENT_REPO.get_payment(payment_id),
        config["currency_symbol"],
    )


@app.command("list, ls")
@renumbers_ids
def list_payments() -> None:
    active_client = require_active_client()
    config = CONFIGURATION_REPO.get_config()

    payment_report.payments_view(
        cast(str, active_client["name"]),
        PAYMENT_REPO.get_payments_for_client(cast(EntityId, active_client["id"])),
        config["currency_symbol"],
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    payment_id: int,
    amount: Annotated[
        Optional[float],
        typer.Option("--amount", "-am", callback=validate_amount),
    ] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-dt", parser=parse_date, help=DATE_HELP),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option(
            "--status",
            "-s",
            callback=validate_payment_status,
            autocompletion=complete_payment_status,
            help="valid input: Paid, Unpaid, Pending",
        ),
    ] = None,
    note: Annotated[Optional[str], typer.Option("--note", "-n")] = None,
    remove_note: Annotated[bool, typer.Option("--remove-note", "-rn")] = False,
) -> None:
    active_client = require_active_client()
    config = CONFIGURATION_REPO.get_config()

    with report_errors():
        real_id = _real_payment_id(active_client, payment_id)
        PAYMENT_REPO.modify_payment(
            real_id,
            date,
            amount,
            cast(Optional[PaymentStatus], status),
            note,
            remove_note,
        )

    checkpoint(f"modify payment: {real_id}")

    payment_report.single_payment_view(
        cast(str, active_client["name"]),
        PAYMENT_REPO.get_payment(real_id),
        config["currency_symbol"],
    )


@app.command("delete, d", no_args_is_help=True)
def delete(payment_id: int) -> None:
    active_client = require_active_client()

    with report_errors():
        real_id = _real_payment_id(active_client, payment_id)
        PAYMENT_REPO.delete_payment(real_id)

    checkpoint(f"delete payment: {real_id}")
    log.success(f"Deleted payment {payment_id}")
