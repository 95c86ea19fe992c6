# SPDX-License-Identifier: MIT

from typing import cast

from clientdesk.model.entity_id import EntityId
from clientdesk.repository.configuration import CONFIGURATION_REPO
from clientdesk.repository.payment import PAYMENT_REPO
from clientdesk.repository.task import TASK_REPO
from clientdesk.service.dashboard import summarize_client
from clientdesk.terminal.errors import require_active_client
from clientdesk.view.view.views.dashboard import dashboard_view


def dashboard() -> None:
    """Show task and payment figures for the active client."""
    active_client = require_active_client()
    client_id = cast(EntityId, active_client["id"])
    config = CONFIGURATION_REPO.get_config()

    summary = summarize_client(
        TASK_REPO.get_tasks_for_client(client_id),
        PAYMENT_REPO.get_payments_for_client(client_id),
        TASK_REPO.get_all_tasks(),
    )

    dashboard_view(cast(str, active_client["name"]), summary, config["currency_symbol"])
