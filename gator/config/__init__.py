"""Configuration management for the feed aggregator."""

from .loader import Config, default_config_path, load_config, save_config
from .models import ConfigModel, FetcherConfig, PostgresConfig

__all__ = [
    "Config",
    "ConfigModel",
    "FetcherConfig",
    "PostgresConfig",
    "default_config_path",
    "load_config",
    "save_config",
]
