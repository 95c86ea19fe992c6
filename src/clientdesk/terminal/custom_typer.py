# SPDX-License-Identifier: MIT

import re
from typing import Any, Optional

import click
import typer
import typer.core
from rich.console import Console
from rich.padding import Padding

from clientdesk.repository.client import CLIENT_REPO
from clientdesk.repository.persistence import PersistenceError

console = Console()

# Top level groups in the order help lists them
COMMAND_ORDER = (
    "client, cl",
    "task, t",
    "payment, p",
    "dashboard, d",
    "notification, n",
    "config, c",
)

_ALIAS_SEPARATOR = re.compile(r" ?, ?")
_BANNER_SHOWN = "clientdesk.active_client_shown"


def split_aliases(name: str) -> list[str]:
    """``"task, t"`` -> ``["task", "t"]``"""
    return _ALIAS_SEPARATOR.split(name)


def print_active_client_banner(ctx: click.Context) -> None:
    """Print the active client above help text, once per invocation."""
    # meta is shared by every context in the chain
    if ctx.meta.get(_BANNER_SHOWN):
        return
    ctx.meta[_BANNER_SHOWN] = True

    try:
        active_client = CLIENT_REPO.get_active_client()
    except PersistenceError:
        # Help must still render when the data directory is unreadable
        return

    client_name = active_client["name"] if active_client is not None else "none"
    console.print()
    console.print(
        Padding(f"[bold plum1]Active Client: {client_name}[/bold plum1]", (0, 0, 0, 1))
    )


class ClientAwareCommand(typer.core.TyperCommand):
    def format_help(
        self, ctx: click.Context, formatter: click.formatting.HelpFormatter
    ) -> None:
        print_active_client_banner(ctx)
        super().format_help(ctx, formatter)


class AliasedTyperGroup(typer.core.TyperGroup):
    """Group whose registered command names carry their aliases, e.g. ``"task, t"``."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def resolve_alias(self, cmd_name: str) -> str:
        for registered_name in self.commands:
            if cmd_name in split_aliases(registered_name):
                return registered_name
        return cmd_name


class ClientAwareTyperGroup(AliasedTyperGroup):
    """Aliased group that shows the active client in its help and its commands' help."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.command_class = ClientAwareCommand

    def list_commands(self, ctx: click.Context) -> list[str]:
        # Typer registers groups in its own order, so rank the known ones first
        rank = {name: position for position, name in enumerate(COMMAND_ORDER)}
        return sorted(
            self.commands, key=lambda name: rank.get(name, len(COMMAND_ORDER))
        )

    def format_help(
        self, ctx: click.Context, formatter: click.formatting.HelpFormatter
    ) -> None:
        print_active_client_banner(ctx)
        super().format_help(ctx, formatter)
