# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from clientdesk import configuration, log
from clientdesk.repository.configuration import CONFIGURATION_REPO
from clientdesk.terminal.custom_typer import ClientAwareTyperGroup

app = typer.Typer(cls=ClientAwareTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("use_git_versioning", _enabled(config["use_git_versioning"]))
    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("clear_ids_on_view", _enabled(config["clear_ids_on_view"]))
    table.add_row("enforce_blocking", _enabled(config["enforce_blocking"]))
    table.add_row("record_notifications", _enabled(config["record_notifications"]))
    table.add_row("currency_symbol", config["currency_symbol"])
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    use_git_versioning: Annotated[
        Optional[bool],
        typer.Option(
            "--use-git-versioning/--no-use-git-versioning",
            help="Commit the data directory after every change",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header"),
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids-on-view/--no-clear-ids-on-view",
            help="Renumber short ids every time a list is shown",
        ),
    ] = None,
    enforce_blocking: Annotated[
        Optional[bool],
        typer.Option(
            "--enforce-blocking/--no-enforce-blocking",
            help="Refuse to start or complete a task with incomplete dependencies",
        ),
    ] = None,
    record_notifications: Annotated[
        Optional[bool],
        typer.Option(
            "--record-notifications/--no-record-notifications",
            help="Log task status and description changes",
        ),
    ] = None,
    currency_symbol: Annotated[
        Optional[str], typer.Option("--currency-symbol")
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the data files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
) -> None:
    """Change configuration settings."""
    CONFIGURATION_REPO.update_config(
        use_git_versioning=use_git_versioning,
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        clear_ids_on_view=clear_ids_on_view,
        enforce_blocking=enforce_blocking,
        record_notifications=record_notifications,
        currency_symbol=currency_symbol,
    )
    CONFIGURATION_REPO.flush()

    if data_path is not None or remove_data_path:
        log.info("The data path takes effect on the next run")

    view()
