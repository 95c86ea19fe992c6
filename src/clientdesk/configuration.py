# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "clientdesk"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_CLIENTS_PATH: Path = DATA_PATH / "clients.yaml"
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_PAYMENTS_PATH: Path = DATA_PATH / "payments.yaml"
DATA_NOTIFICATIONS_PATH: Path = DATA_PATH / "notifications.yaml"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"


class Configuration(TypedDict):
    use_git_versioning: bool
    show_header: bool
    data_path: Optional[str]
    clear_ids_on_view: bool
    enforce_blocking: bool
    record_notifications: bool
    currency_symbol: str


def get_default_configuration() -> Configuration:
    return {
        "use_git_versioning": False,
        "show_header": True,
        "data_path": None,
        "clear_ids_on_view": True,
        "enforce_blocking": False,
        "record_notifications": True,
        "currency_symbol": "$",
    }


def set_data_path(data_path: Path) -> None:
    global \
        DATA_PATH, \
        DATA_CLIENTS_PATH, \
        DATA_TASKS_PATH, \
        DATA_PAYMENTS_PATH, \
        DATA_NOTIFICATIONS_PATH, \
        DATA_ID_MAP_PATH

    DATA_PATH = data_path
    DATA_CLIENTS_PATH = DATA_PATH / "clients.yaml"
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
    DATA_PAYMENTS_PATH = DATA_PATH / "payments.yaml"
    DATA_NOTIFICATIONS_PATH = DATA_PATH / "notifications.yaml"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
