# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from clientdesk import log
from clientdesk import state
from clientdesk.terminal import client, configuration, notification, payment, task
from clientdesk.terminal.custom_typer import ClientAwareTyperGroup
from clientdesk.terminal.dashboard import dashboard

app = typer.Typer(
    cls=ClientAwareTyperGroup,
    help="clientdesk - Clients, tasks and payments for freelancers in the CLI",
    no_args_is_help=True,
)
app.add_typer(client.app, name="client, cl")
app.add_typer(task.app, name="task, t")
app.add_typer(payment.app, name="payment, p")
app.command(name="dashboard, d")(dashboard)
app.add_typer(notification.app, name="notification, n")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output"),
    ] = False,
    clear_ids: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Renumber short ids when lists are shown (overrides config)",
        ),
    ] = None,
) -> None:
    """
    clientdesk - Clients, tasks and payments for freelancers in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        state.set_show_header(False)
    if verbose:
        log.set_verbose(True)
    if clear_ids is not None:
        state.set_renumber_ids(clear_ids)


def run() -> None:
    app()
