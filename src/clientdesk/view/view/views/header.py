# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from clientdesk.state import get_show_header


def header(active_client: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the current client.

    Args:
        active_client: The name of the active client
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    active_client = f"[plum1]{active_client}[/plum1]"

    print(Padding("[dark_orange]clientdesk[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(active_client, (0, 1)))
