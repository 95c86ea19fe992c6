# SPDX-License-Identifier: MIT

import shutil
import subprocess
from enum import Enum
from pathlib import Path
from typing import NamedTuple, Optional


class GitCommand(Enum):
    IS_REPO = 0
    INIT = 1
    HAS_CHANGES = 2
    COMMIT = 3


class GitUnavailableError(Exception):
    pass


class GitCommandError(Exception):
    def __init__(self, args: list[str], output: str) -> None:
        super().__init__(f"'{' '.join(args)}' failed: {output.strip()}")
        self.args_run = args
        self.output = output


class GitResult(NamedTuple):
    returncode: int
    output: str


class Git:
    """Thin wrapper over the git executable, scoped to one folder per call."""

    def is_git_repo(self, folder: Path) -> bool:
        result = self.__run(GitCommand.IS_REPO, folder, check=False)[-1]
        return result.returncode == 0 and result.output.strip() == "true"

    def init(self, folder: Path) -> None:
        self.__run(GitCommand.INIT, folder)

    def has_changes(self, folder: Path) -> bool:
        return self.__run(GitCommand.HAS_CHANGES, folder)[-1].output.strip() != ""

    def commit_all(self, folder: Path, message: str) -> bool:
        """Stage everything in ``folder`` and commit. Returns False when there was nothing to commit."""
        if not self.has_changes(folder):
            return False
        self.__run(GitCommand.COMMIT, folder, message=message)
        return True

    def __run(
        self,
        command: GitCommand,
        folder: Path,
        message: Optional[str] = None,
        check: bool = True,
    ) -> list[GitResult]:
        if shutil.which("git") is None:
            raise GitUnavailableError("Git is not available on the system")

        base = ["git", "-C", str(folder.resolve())]
        match command:
            case GitCommand.IS_REPO:
                invocations = [base + ["rev-parse", "--is-inside-work-tree"]]
            case GitCommand.INIT:
                invocations = [base + ["init"]]
            case GitCommand.HAS_CHANGES:
                invocations = [base + ["status", "--porcelain"]]
            case GitCommand.COMMIT:
                invocations = [
                    base + ["add", "-A"],
                    base + ["commit", "-m", message or "checkpoint"],
                ]

        results: list[GitResult] = []
        for invocation in invocations:
            completed = subprocess.run(invocation, text=True, capture_output=True)
            output = completed.stdout + completed.stderr
            if check and completed.returncode != 0:
                raise GitCommandError(invocation, output)
            results.append(GitResult(completed.returncode, output))
        return results
