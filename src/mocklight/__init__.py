"""Public package surface for hand-written test doubles.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: the stub registry, call history and its queries, errors
- Adapter exports: ready-made doubles for common external interfaces
- Composition exports: settings loaded from layered configuration
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Interface doubles
from .adapters.doubles import (
    MockConfiguration,
    MockHttpClientFactory,
    MockHttpContextAccessor,
    OptionsMock,
    OptionsMonitorMock,
    OptionsSnapshotMock,
)

# Composition exports (wired adapters)
from .composition import load_settings

# Domain exports
from .domain.calls import CallRecord
from .domain.enums import StubKind, UnknownMemberPolicy
from .domain.errors import (
    ConfigurationError,
    MockError,
    StubArityError,
    StubBehaviorError,
    StubNotConfiguredError,
    UnverifiedMemberError,
)
from .domain.mock import Mock, StubTable, mock_method
from .domain.settings import MockSettings
from .domain.verify import CallHistoryQuery

__all__ = [
    "CallHistoryQuery",
    "CallRecord",
    "ConfigurationError",
    "Mock",
    "MockConfiguration",
    "MockError",
    "MockHttpClientFactory",
    "MockHttpContextAccessor",
    "MockSettings",
    "OptionsMock",
    "OptionsMonitorMock",
    "OptionsSnapshotMock",
    "StubArityError",
    "StubBehaviorError",
    "StubKind",
    "StubNotConfiguredError",
    "StubTable",
    "UnknownMemberPolicy",
    "UnverifiedMemberError",
    "load_settings",
    "mock_method",
    "print_info",
]
