"""Application configuration helpers."""

from __future__ import annotations

from .cargo import CargoConfig, ToolchainConfig, get_cargo_config, get_toolchain_config
from .env import env_flag, env_float, env_list, env_str
from .errors import ConfigurationError, InvalidConfigurationError

__all__ = [
    "CargoConfig",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ToolchainConfig",
    "env_flag",
    "env_float",
    "env_list",
    "env_str",
    "get_cargo_config",
    "get_toolchain_config",
]
