# SPDX-License-Identifier: MIT

"""
Display settings for one invocation.

Seeded from the configuration file by ``initialize`` and overridden by the
global command line flags.
"""

from contextvars import ContextVar

_show_header: ContextVar[bool] = ContextVar("show_header", default=True)
_renumber_ids: ContextVar[bool] = ContextVar("renumber_ids", default=True)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    return _show_header.get()


def set_renumber_ids(value: bool) -> None:
    """Whether list views start short ids from 1 again."""
    _renumber_ids.set(value)


def should_renumber_ids() -> bool:
    return _renumber_ids.get()
