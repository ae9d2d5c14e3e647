"""Type-safe domain enums for stub kinds, verification policy, and output formats."""

from __future__ import annotations

from enum import Enum


class StubKind(str, Enum):
    """Variant tag of an entry in the stub table.

    Attributes:
        VALUE: Plain value returned as-is on a property-style read.
        ACTION: Wrapped behavior whose result is discarded.
        FUNCTION: Wrapped behavior whose result is returned.

    Example:
        >>> StubKind.ACTION.value
        'action'
    """

    VALUE = "value"
    ACTION = "action"
    FUNCTION = "function"


class UnknownMemberPolicy(str, Enum):
    """How verification answers for a member with no recorded history.

    Inherits from str so configuration values compare directly.

    Attributes:
        EMPTY: Return a query over an empty history (never called).
        RAISE: Raise :class:`~mocklight.domain.errors.UnverifiedMemberError`.

    Example:
        >>> UnknownMemberPolicy("raise") is UnknownMemberPolicy.RAISE
        True
        >>> UnknownMemberPolicy.EMPTY == "empty"
        True
    """

    EMPTY = "empty"
    RAISE = "raise"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "OutputFormat",
    "StubKind",
    "UnknownMemberPolicy",
]
