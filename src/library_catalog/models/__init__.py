"""Data models for library catalog."""

from .config import Config, DisplayConfig, InputConfig, load_config, save_config, create_default_config

__all__ = ["Config", "DisplayConfig", "InputConfig", "load_config", "save_config", "create_default_config"]
