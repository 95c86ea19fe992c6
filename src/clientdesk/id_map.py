# SPDX-License-Identifier: MIT

from functools import wraps
from typing import Any, Callable, TypeVar

from clientdesk import state
from clientdesk.repository.id_map import ID_MAP_REPO

F = TypeVar("F", bound=Callable[..., Any])


def renumbers_ids(func: F) -> F:
    """
    Mark a list command whose rows are numbered from 1.

    Ids handed out before the command ran stop resolving, so users should
    refer to the numbers in the latest list.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if state.should_renumber_ids():
            ID_MAP_REPO.clear_ids()
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
