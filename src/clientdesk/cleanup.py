# SPDX-License-Identifier: MIT

import atexit
from typing import Protocol

from clientdesk import log
from clientdesk.repository.client import CLIENT_REPO
from clientdesk.repository.configuration import CONFIGURATION_REPO
from clientdesk.repository.id_map import ID_MAP_REPO
from clientdesk.repository.notification import NOTIFICATION_REPO
from clientdesk.repository.payment import PAYMENT_REPO
from clientdesk.repository.persistence import PersistenceError
from clientdesk.repository.task import TASK_REPO


class Flushable(Protocol):
    def flush(self) -> bool: ...


REPOSITORIES: list[Flushable] = [
    CONFIGURATION_REPO,
    ID_MAP_REPO,
    # Entity repositories
    CLIENT_REPO,
    TASK_REPO,
    PAYMENT_REPO,
    NOTIFICATION_REPO,
]


def flush_and_sync() -> bool:
    """
    Write every dirty repository to disk.

    A repository that cannot be written is reported and left dirty; the
    others are still flushed. Returns False if any write failed.
    """
    all_flushed = True
    for repository in REPOSITORIES:
        try:
            repository.flush()
        except PersistenceError as e:
            log.error(f"{e}. Changes to it were not saved")
            all_flushed = False
    return all_flushed


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
