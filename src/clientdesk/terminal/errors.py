# SPDX-License-Identifier: MIT

from contextlib import contextmanager
from typing import Iterator

import typer

from clientdesk import log
from clientdesk.model.client import Client
from clientdesk.repository.client import CLIENT_REPO
from clientdesk.repository.persistence import PersistenceError


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn domain and persistence errors into an error message and exit code 1."""
    try:
        yield
    except PersistenceError as e:
        log.error(f"{e}. The change is applied but may not be saved")
        raise typer.Exit(1)
    except ValueError as e:
        log.error(str(e))
        raise typer.Exit(1)


def require_active_client() -> Client:
    active_client = CLIENT_REPO.get_active_client()
    if active_client is None:
        log.error("No client selected. Add one with 'clientdesk client add <name>'")
        raise typer.Exit(1)
    return active_client
