# SPDX-License-Identifier: MIT

from typing import Annotated, cast

import typer

from clientdesk.model.entity_id import EntityId
from clientdesk.repository.notification import NOTIFICATION_REPO
from clientdesk.terminal.custom_typer import ClientAwareTyperGroup
from clientdesk.terminal.errors import require_active_client
from clientdesk.view.view.views import notification as notification_report

app = typer.Typer(cls=ClientAwareTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_notifications(
    limit: Annotated[
        int, typer.Option("--limit", "-l", min=1, help="Most recent entries to show")
    ] = 20,
) -> None:
    active_client = require_active_client()

    notifications = NOTIFICATION_REPO.get_notifications_for_client(
        cast(EntityId, active_client["id"])
    )
    notifications.sort(key=lambda notification: notification["timestamp"])

    notification_report.notifications_view(
        cast(str, active_client["name"]), notifications[-limit:]
    )
