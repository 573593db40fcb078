"""Configuration module for searchbot."""

from searchbot.config.loader import get_config_path, load_config
from searchbot.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
