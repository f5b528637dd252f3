# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "intake"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)

ENTRIES_SLOT_KEY = "formEntries"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    confirm_deletes: bool
    log_level: NotRequired[str]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "confirm_deletes": True,
        "log_level": "WARNING",
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set DATA_PATH dynamically.

    This must be called after the config file exists and before the entry
    repository is instantiated.
    """
    global DATA_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
