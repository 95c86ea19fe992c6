# SPDX-License-Identifier: MIT

from clientdesk import configuration, log
from clientdesk.cleanup import flush_and_sync
from clientdesk.repository.configuration import CONFIGURATION_REPO
from clientdesk.version.git import Git, GitCommandError, GitUnavailableError

# The id map is per-terminal scratch state, not client data
IGNORED_DATA_FILES = ["id_map.yaml"]


class Version:
    def __init__(self, git: Git | None = None) -> None:
        self.git = git or Git()

    def initialize_data_versioning(self) -> bool:
        if self.git.is_git_repo(configuration.DATA_PATH):
            return False

        self.git.init(configuration.DATA_PATH)
        gitignore_path = configuration.DATA_PATH / ".gitignore"
        gitignore_path.write_text("\n".join(IGNORED_DATA_FILES) + "\n")
        log.debug(f"Initialized data versioning in {configuration.DATA_PATH}")
        return True

    def create_data_checkpoint(self, message: str) -> bool:
        if not self.git.is_git_repo(configuration.DATA_PATH):
            return False
        committed = self.git.commit_all(configuration.DATA_PATH, message)
        if committed:
            log.debug(f"Checkpoint: {message}")
        return committed


def checkpoint(message: str) -> None:
    """Commit the data directory when git versioning is enabled."""
    if not CONFIGURATION_REPO.get_config()["use_git_versioning"]:
        return

    # Pending collections must be on disk before they can be committed
    if not flush_and_sync():
        log.warn("Some data could not be saved, skipping data checkpoint")
        return
    try:
        Version().create_data_checkpoint(message)
    except (GitUnavailableError, GitCommandError) as e:
        log.warn(f"{e}, skipping data checkpoint")
