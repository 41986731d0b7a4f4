"""Configuration loading."""

from cargo_with.config.loader import (
    get_home_config_path,
    get_local_config_path,
    load_config,
    load_yaml_config,
)
from cargo_with.config.schema import (
    COMMAND_DESCRIPTION,
    COMMAND_NAME,
    DEFAULT_CONFIG,
    CargoWithConfig,
)

__all__ = [
    "COMMAND_DESCRIPTION",
    "COMMAND_NAME",
    "DEFAULT_CONFIG",
    "CargoWithConfig",
    "get_home_config_path",
    "get_local_config_path",
    "load_config",
    "load_yaml_config",
]
