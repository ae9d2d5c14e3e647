"""Application layer - port definitions.

Contains the Protocol interfaces that adapter implementations and test
doubles satisfy.

Contents:
    * :mod:`.ports` - Callable and structural Protocol definitions
"""

from __future__ import annotations

from .ports import (
    ConfigurationProvider,
    DisplayConfig,
    DisplaySettings,
    GetConfig,
    HttpClientFactory,
    HttpContextAccessor,
    InitLogging,
    LoadMockSettings,
    OptionsMonitor,
    OptionsProvider,
    OptionsSnapshot,
)

__all__ = [
    "ConfigurationProvider",
    "DisplayConfig",
    "DisplaySettings",
    "GetConfig",
    "HttpClientFactory",
    "HttpContextAccessor",
    "InitLogging",
    "LoadMockSettings",
    "OptionsMonitor",
    "OptionsProvider",
    "OptionsSnapshot",
]
