# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from phasechart import configuration


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
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: add any settings introduced after the file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        source: Optional[str] = None,
        remove_source: bool = False,
        sheet_id: Optional[str] = None,
        remove_sheet_id: bool = False,
        viewport_months: Optional[int] = None,
        fetch_timeout_seconds: Optional[float] = None,
        locale: Optional[str] = None,
        show_header: Optional[bool] = None,
        left_column_width: Optional[int] = None,
        marker_strip_px: Optional[int] = None,
    ) -> None:
        self.is_dirty = True

        if source is not None:
            self.config["source"] = source
        if remove_source:
            self.config["source"] = None
        if sheet_id is not None:
            self.config["sheet_id"] = sheet_id
        if remove_sheet_id:
            self.config["sheet_id"] = None
        if viewport_months is not None:
            self.config["viewport_months"] = viewport_months
        if fetch_timeout_seconds is not None:
            self.config["fetch_timeout_seconds"] = fetch_timeout_seconds
        if locale is not None:
            self.config["locale"] = locale
        if show_header is not None:
            self.config["show_header"] = show_header
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if marker_strip_px is not None:
            self.config["marker_strip_px"] = marker_strip_px


CONFIGURATION_REPO = ConfigurationRepository()
