# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "phasechart"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    source: Optional[str]
    sheet_id: Optional[str]
    viewport_months: int
    fetch_timeout_seconds: float
    locale: str
    show_header: bool
    left_column_width: int
    marker_strip_px: int


def get_default_configuration() -> Configuration:
    return {
        "source": None,
        "sheet_id": None,
        "viewport_months": 4,
        "fetch_timeout_seconds": 10.0,
        "locale": "en",
        "show_header": True,
        "left_column_width": 24,
        "marker_strip_px": 0,
    }


def set_config_path(config_path: Path) -> None:
    """Point the configuration at another directory, e.g. for tests or portable installs."""
    global CONFIG_PATH, APP_CONFIG_PATH

    CONFIG_PATH = config_path
    APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
