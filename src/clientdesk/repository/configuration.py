# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional, cast

from clientdesk import configuration
from clientdesk.repository.persistence import read_document, write_document


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = cast(
            Optional[configuration.Configuration],
            read_document(configuration.APP_CONFIG_PATH),
        )

        if self._config is None:
            raise ValueError(f"{configuration.APP_CONFIG_PATH} is empty")

        # Migration: back-fill settings added after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        write_document(configuration.APP_CONFIG_PATH, config)

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        use_git_versioning: Optional[bool] = None,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        clear_ids_on_view: Optional[bool] = None,
        enforce_blocking: Optional[bool] = None,
        record_notifications: Optional[bool] = None,
        currency_symbol: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if use_git_versioning is not None:
            self.config["use_git_versioning"] = use_git_versioning
        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if clear_ids_on_view is not None:
            self.config["clear_ids_on_view"] = clear_ids_on_view
        if enforce_blocking is not None:
            self.config["enforce_blocking"] = enforce_blocking
        if record_notifications is not None:
            self.config["record_notifications"] = record_notifications
        if currency_symbol is not None:
            self.config["currency_symbol"] = currency_symbol


CONFIGURATION_REPO = ConfigurationRepository()
