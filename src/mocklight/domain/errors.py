"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class MockError(Exception):
    """Base class for every error raised by mocklight itself.

    Example:
        >>> from mocklight.domain.errors import MockError
        >>> issubclass(StubNotConfiguredError, MockError)
        True
    """


class StubBehaviorError(MockError, TypeError):
    """A setup operation received something it cannot wrap.

    Raised when ``mock_setup_action`` or ``mock_setup_function`` is given a
    non-callable. Inherits from TypeError so it reads like any other bad
    argument at the call site.

    Example:
        >>> err = StubBehaviorError("behavior for 'PayBill' is not callable: 42")
        >>> isinstance(err, TypeError)
        True
    """


class StubArityError(StubBehaviorError):
    """A behavior cannot be called with 0 to 5 positional arguments.

    Example:
        >>> str(StubArityError("behavior for 'Sum' requires 6 positional arguments"))
        "behavior for 'Sum' requires 6 positional arguments"
    """


class StubNotConfiguredError(MockError, KeyError):
    """The stub table was read for a member nothing was set up under.

    Inherits from KeyError because the stub table is a mapping.

    Example:
        >>> err = StubNotConfiguredError("PayBill")
        >>> err.name
        'PayBill'
        >>> isinstance(err, KeyError)
        True
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"no stub configured for {self.name!r}"


class UnverifiedMemberError(MockError, LookupError):
    """Verification requested for a member that has no call history.

    Only raised when the mock runs with ``UnknownMemberPolicy.RAISE``; the
    default policy answers with an empty history instead.

    Example:
        >>> str(UnverifiedMemberError("Setup has not been called for PayBill."))
        'Setup has not been called for PayBill.'
    """


class ConfigurationError(MockError):
    """Missing, invalid, or incomplete ``[mocklight]`` configuration.

    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> err = ConfigurationError("unknown_member must be 'empty' or 'raise'")
        >>> str(err)
        "unknown_member must be 'empty' or 'raise'"
    """


__all__ = [
    "ConfigurationError",
    "MockError",
    "StubArityError",
    "StubBehaviorError",
    "StubNotConfiguredError",
    "UnverifiedMemberError",
]
