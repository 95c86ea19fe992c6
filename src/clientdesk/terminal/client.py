# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer

from clientdesk import log
from clientdesk.id_map import renumbers_ids
from clientdesk.model.entity_id import EntityId
from clientdesk.repository.client import CLIENT_REPO
from clientdesk.template.client import get_client_template
from clientdesk.terminal.completion import complete_client
from clientdesk.terminal.custom_typer import ClientAwareTyperGroup
from clientdesk.terminal.errors import report_errors, require_active_client
from clientdesk.version.version import checkpoint
from clientdesk.view.view.views import client as client_report

app = typer.Typer(cls=ClientAwareTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    note: Annotated[Optional[str], typer.Option("--note", "-n")] = None,
    email: Annotated[Optional[str], typer.Option("--email", "-e")] = None,
) -> None:
    """Add a client and make it the active one."""
    client = get_client_template()
    client["name"] = name.strip()
    client["note"] = note
    client["email"] = email.strip() if email is not None else None

    with report_errors():
        client_id = CLIENT_REPO.save_new_client(client)

    new_client = CLIENT_REPO.get_client(client_id)
    checkpoint(f"add client: {new_client['name']}")

    client_report.single_client_view(cast(str, new_client["name"]), new_client)


@app.command("list, ls")
@renumbers_ids
def list_clients() -> None:
    active_client = CLIENT_REPO.get_active_client()
    active_client_name = (
        cast(str, active_client["name"]) if active_client is not None else "none"
    )
    client_report.clients_view(active_client_name, CLIENT_REPO.get_all_clients())


@app.command("activate, switch, sw", no_args_is_help=True)
def activate(
    name: Annotated[
        str,
        typer.Argument(autocompletion=complete_client),
    ],
) -> None:
    """Select the client that task and payment commands act on."""
    with report_errors():
        client_to_activate = CLIENT_REPO.get_client_by_name(name)
        client_id = cast(EntityId, client_to_activate["id"])
        CLIENT_REPO.activate_client(client_id)

    activated_client = CLIENT_REPO.get_client(client_id)
    activated_client_name = cast(str, activated_client["name"])
    log.debug(f"Active client is now {activated_client_name}")
    checkpoint(f"activate client: {activated_client_name}")

    client_report.single_client_view(activated_client_name, activated_client)


@app.command("modify, m")
def modify(
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    note: Annotated[Optional[str], typer.Option("--note")] = None,
    email: Annotated[Optional[str], typer.Option("--email", "-e")] = None,
    remove_note: Annotated[bool, typer.Option("--remove-note", "-rn")] = False,
    remove_email: Annotated[bool, typer.Option("--remove-email", "-re")] = False,
) -> None:
    """Modify the active client."""
    active_client = require_active_client()
    client_id = cast(EntityId, active_client["id"])

    with report_errors():
        CLIENT_REPO.modify_client(
            client_id,
            name.strip() if name is not None else None,
            note,
            email,
            remove_note,
            remove_email,
        )

    modified_client = CLIENT_REPO.get_client(client_id)
    modified_client_name = cast(str, modified_client["name"])
    checkpoint(f"modify client: {modified_client_name}")

    client_report.single_client_view(modified_client_name, modified_client)


@app.command("show, s")
def show() -> None:
    """Show the active client."""
    active_client = require_active_client()
    client_report.single_client_view(cast(str, active_client["name"]), active_client)
