"""Domain layer - the stub registry and call history, free of I/O and frameworks.

Contents:
    * :mod:`.calls` - Per-member invocation history (CallRecord)
    * :mod:`.verify` - Predicate queries over a history (CallHistoryQuery)
    * :mod:`.mock` - Stub registry base class (Mock) and stub table
    * :mod:`.settings` - Mock behaviour switches (MockSettings)
    * :mod:`.enums` - Domain enumerations (StubKind, UnknownMemberPolicy, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .calls import CallRecord
from .enums import OutputFormat, StubKind, UnknownMemberPolicy
from .errors import (
    ConfigurationError,
    MockError,
    StubArityError,
    StubBehaviorError,
    StubNotConfiguredError,
    UnverifiedMemberError,
)
from .mock import MAX_STUB_ARITY, Mock, StubTable, mock_method, stub_kind_of
from .settings import DEFAULT_SETTINGS, MockSettings
from .verify import CallHistoryQuery, Comparer, values_equal

__all__ = [
    # Core
    "CallHistoryQuery",
    "CallRecord",
    "Comparer",
    "MAX_STUB_ARITY",
    "Mock",
    "StubTable",
    "mock_method",
    "stub_kind_of",
    "values_equal",
    # Settings
    "DEFAULT_SETTINGS",
    "MockSettings",
    # Enums
    "OutputFormat",
    "StubKind",
    "UnknownMemberPolicy",
    # Errors
    "ConfigurationError",
    "MockError",
    "StubArityError",
    "StubBehaviorError",
    "StubNotConfiguredError",
    "UnverifiedMemberError",
]
