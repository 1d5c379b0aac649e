"""Core configuration and orchestration."""

from .config import FlashConfig, Settings, get_settings

__all__ = ["Settings", "FlashConfig", "get_settings"]
