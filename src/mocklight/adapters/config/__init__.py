"""Configuration adapter - loading, settings parsing, and display.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.settings` - ``[mocklight]`` section parsing into MockSettings
    * :mod:`.display` - Configuration and settings display
"""

from __future__ import annotations

from .display import display_config, display_settings
from .loader import DEFAULT_CONFIG_PATH, get_config
from .settings import MockSettingsModel, load_mock_settings

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "MockSettingsModel",
    "display_config",
    "display_settings",
    "get_config",
    "load_mock_settings",
]
