"""Configuration management for dailyreads."""

from .loader import Config, default_config_path, load_config, load_sources, save_config, save_sources
from .models import (
    DEFAULT_SOURCES,
    ConfigModel,
    FetchConfig,
    ReaderConfig,
    SelectionConfig,
    ServerConfig,
    SourceConfig,
)

__all__ = [
    "Config",
    "ConfigModel",
    "DEFAULT_SOURCES",
    "FetchConfig",
    "ReaderConfig",
    "SelectionConfig",
    "ServerConfig",
    "SourceConfig",
    "default_config_path",
    "load_config",
    "load_sources",
    "save_config",
    "save_sources",
]
