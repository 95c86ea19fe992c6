# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]


class PersistenceError(Exception):
    """Raised when a collection cannot be written to (or read from) the data directory.

    In-memory state is not rolled back when this is raised, so the running
    process may hold changes that never reached disk.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not persist {path.name}: {reason}")
        self.path = path
        self.reason = reason


def read_document(path: Path) -> Any:
    try:
        return load(path.read_text(), Loader=Loader)
    except (OSError, YAMLError) as e:
        raise PersistenceError(path, str(e)) from e


def write_document(path: Path, document: Any) -> None:
    try:
        path.write_text(dump(document, Dumper=Dumper, sort_keys=False))
    except OSError as e:
        raise PersistenceError(path, str(e)) from e
