"""Configuration models and loaders for filehash."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, load_config
from .models import FileHashConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "FileHashConfig",
    "load_config",
]
