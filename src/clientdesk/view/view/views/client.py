# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.table import Table

from clientdesk.model.client import Client
from clientdesk.model.entity_id import EntityId
from clientdesk.repository.id_map import ID_MAP_REPO
from clientdesk.time import datetime_to_display_local_datetime_str_optional
from clientdesk.view.view.views.header import header


def clients_view(active_client: str, clients: list[Client]) -> None:
    header(active_client, "clients")

    clients_table = Table(box=box.SIMPLE)
    clients_table.add_column("id")
    clients_table.add_column("active")
    clients_table.add_column("name")
    clients_table.add_column("email")
    clients_table.add_column("note")

    for client in clients:
        clients_table.add_row(
            str(ID_MAP_REPO.associate_id("clients", cast(EntityId, client["id"]))),
            "✓" if client["active"] else " ",
            client["name"],
            client["email"] or "",
            client["note"] or "",
        )

    console = Console()
    console.print(clients_table)


def single_client_view(active_client: str, client: Client) -> None:
    header(active_client, "client")

    client_table = Table(box=box.SIMPLE)
    client_table.add_column("property")
    client_table.add_column("value")

    client_table.add_row(
        "id", str(ID_MAP_REPO.associate_id("clients", cast(EntityId, client["id"])))
    )
    client_table.add_row("name", client["name"])
    client_table.add_row("active", "✓" if client["active"] else "✗")
    client_table.add_row("email", client["email"] or "")
    client_table.add_row("note", client["note"] or "")
    client_table.add_row(
        "created", datetime_to_display_local_datetime_str_optional(client["created"])
    )
    client_table.add_row(
        "updated", datetime_to_display_local_datetime_str_optional(client["updated"])
    )

    console = Console()
    console.print(client_table)
