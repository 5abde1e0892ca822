"""Configuration management for the index build."""

from .loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_NAME,
    Config,
    load_config,
    save_config,
)
from .models import ConfigModel, OutputConfig, ReaderConfig, SummaryConfig

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_NAME",
    "Config",
    "ConfigModel",
    "OutputConfig",
    "ReaderConfig",
    "SummaryConfig",
    "load_config",
    "save_config",
]
