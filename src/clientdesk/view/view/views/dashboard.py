# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from clientdesk.color import BLOCKED_COLOR
from clientdesk.service.dashboard import DashboardSummary
from clientdesk.time import date_to_display_str
from clientdesk.view.view.util import (
    colorize,
    render_amount,
    render_payment_status,
    render_task_status,
)
from clientdesk.view.view.views.header import header


def dashboard_view(
    active_client: str, summary: DashboardSummary, currency_symbol: str
) -> None:
    header(active_client, "dashboard")

    console = Console()

    overview_table = Table(box=box.SIMPLE)
    overview_table.add_column("metric")
    overview_table.add_column("value", justify="right")
    overview_table.add_row("tasks", str(summary["task_count"]))
    overview_table.add_row("open tasks", str(summary["open_task_count"]))
    overview_table.add_row(
        "blocked tasks",
        colorize(str(summary["blocked_task_count"]), BLOCKED_COLOR)
        if summary["blocked_task_count"] > 0
        else "0",
    )
    overview_table.add_row(
        "total paid", render_amount(summary["total_paid"], currency_symbol)
    )
    overview_table.add_row(
        "outstanding", render_amount(summary["total_outstanding"], currency_symbol)
    )
    console.print(overview_table)

    status_table = Table(box=box.SIMPLE, title="tasks by status")
    status_table.add_column("status")
    status_table.add_column("count", justify="right")
    for status, count in summary["tasks_by_status"].items():
        status_table.add_row(render_task_status(status), str(count))
    console.print(status_table)

    if len(summary["recent_payments"]) == 0:
        return

    payments_table = Table(box=box.SIMPLE, title="recent payments")
    payments_table.add_column("date")
    payments_table.add_column("amount", justify="right")
    payments_table.add_column("status")
    for payment in summary["recent_payments"]:
        payments_table.add_row(
            date_to_display_str(payment["date"]),
            render_amount(payment["amount"], currency_symbol),
            render_payment_status(payment["status"]),
        )
    console.print(payments_table)
