"""Configuration management for scriptrun."""

from .parser import (
    CONFIG_FILE_NAME,
    ScriptrunConfig,
    find_config_file,
    load_config,
    load_effective_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ScriptrunConfig",
    "find_config_file",
    "load_config",
    "load_effective_config",
]
