"""Configuration adapters."""

from commuter.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
