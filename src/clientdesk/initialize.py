# SPDX-License-Identifier: MIT

from clientdesk import configuration, log
from clientdesk import state
from clientdesk.repository.configuration import CONFIGURATION_REPO
from clientdesk.repository.persistence import write_document
from clientdesk.template.id_map import get_id_map_template
from clientdesk.version.git import GitCommandError, GitUnavailableError
from clientdesk.version.version import Version


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    if config["use_git_versioning"]:
        try:
            Version().initialize_data_versioning()
        except (GitUnavailableError, GitCommandError) as e:
            log.warn(f"{e}, data checkpoints are disabled")
    state.set_show_header(config["show_header"])
    state.set_renumber_ids(config["clear_ids_on_view"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        write_document(
            configuration.APP_CONFIG_PATH, configuration.get_default_configuration()
        )


def __ensure_data_files() -> None:
    if not configuration.DATA_CLIENTS_PATH.is_file():
        write_document(configuration.DATA_CLIENTS_PATH, {"clients": []})
    if not configuration.DATA_TASKS_PATH.is_file():
        write_document(configuration.DATA_TASKS_PATH, {"tasks": []})
    if not configuration.DATA_PAYMENTS_PATH.is_file():
        write_document(configuration.DATA_PAYMENTS_PATH, {"payments": []})
    if not configuration.DATA_NOTIFICATIONS_PATH.is_file():
        write_document(configuration.DATA_NOTIFICATIONS_PATH, {"notifications": []})
    if not configuration.DATA_ID_MAP_PATH.is_file():
        write_document(configuration.DATA_ID_MAP_PATH, get_id_map_template())
