# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from clientdesk.model.notification import Notification
from clientdesk.time import datetime_to_display_local_datetime_str
from clientdesk.view.view.views.header import header


def notifications_view(active_client: str, notifications: list[Notification]) -> None:
    header(active_client, "notifications")

    notifications_table = Table(box=box.SIMPLE)
    notifications_table.add_column("when")
    notifications_table.add_column("message")

    for notification in notifications:
        notifications_table.add_row(
            datetime_to_display_local_datetime_str(notification["timestamp"]),
            notification["message"],
        )

    console = Console()
    console.print(notifications_table)
