"""Stub registry base class for hand-written test doubles.

A double for an interface inherits from :class:`Mock` and forwards every
interface member to the stub table, e.g.::

    class MockAccount(Mock):
        @property
        def account_holder(self) -> Person:
            return self._mock_property("account_holder")

        def pay_bill(self, amount: int) -> bool:
            return self.mocks.pay_bill(amount)

Tests then program and inspect the double::

    account = MockAccount()
    account.mock_setup_function("pay_bill", lambda amount: True)
    account.pay_bill(10)
    assert account.mock_verify("pay_bill").was_called_with(10)

Contents:
    * :class:`StubTable` - dynamic name -> stub storage with item and attribute access.
    * :class:`Mock` - setup, invocation recording, verification and reset.
    * :func:`mock_method` - identity decorator for declaring stub behaviors.
"""

from __future__ import annotations

import copy
import functools
import inspect
import logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from .calls import CallRecord
from .enums import StubKind, UnknownMemberPolicy
from .errors import StubArityError, StubBehaviorError, StubNotConfiguredError, UnverifiedMemberError
from .settings import DEFAULT_SETTINGS, MockSettings
from .verify import CallHistoryQuery

logger = logging.getLogger(__name__)

#: Largest positional arity a stub behavior may require.
MAX_STUB_ARITY = 5

_STUB_KIND_ATTRIBUTE = "__mock_stub_kind__"

F = TypeVar("F", bound=Callable[..., Any])
M = TypeVar("M", bound="Mock")


class StubTable:
    """Name -> stub storage readable as a mapping or as attributes.

    Only dunder methods are defined so that no stub name can collide with
    a method of the table itself. Missing names raise
    :class:`StubNotConfiguredError` on item access and ``AttributeError``
    on attribute access.

    Example:
        >>> table = StubTable()
        >>> table["Value"] = 42
        >>> table.Value
        42
        >>> table.Missing  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        AttributeError: no stub configured for 'Missing'
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        object.__setattr__(self, "_entries", {})

    def __getattr__(self, name: str) -> Any:
        # "_entries" only reaches here before __init__ ran (copy reconstruction)
        if name.startswith("__") or name == "_entries":
            raise AttributeError(name)
        try:
            return self._entries[name]
        except KeyError:
            raise AttributeError(f"no stub configured for {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        self._entries[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._entries[name]
        except KeyError:
            raise AttributeError(f"no stub configured for {name!r}") from None

    def __getitem__(self, name: str) -> Any:
        try:
            return self._entries[name]
        except KeyError:
            raise StubNotConfiguredError(name) from None

    def __setitem__(self, name: str, value: Any) -> None:
        self._entries[name] = value

    def __delitem__(self, name: str) -> None:
        try:
            del self._entries[name]
        except KeyError:
            raise StubNotConfiguredError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __copy__(self) -> StubTable:
        table = StubTable()
        table._entries.update(self._entries)
        return table

    def __deepcopy__(self, memo: dict[int, Any]) -> StubTable:
        table = StubTable()
        memo[id(self)] = table
        table._entries.update(copy.deepcopy(self._entries, memo))
        return table

    def __repr__(self) -> str:
        return f"StubTable({sorted(self._entries)!r})"


def _check_behavior(name: str, behavior: Any) -> None:
    """Reject behaviors that can never be invoked with 0-5 positional arguments."""
    if not callable(behavior):
        raise StubBehaviorError(f"behavior for {name!r} is not callable: {behavior!r}")
    try:
        signature = inspect.signature(behavior)
    except (TypeError, ValueError):
        # builtins and some C callables expose no signature
        return
    required = 0
    for parameter in signature.parameters.values():
        if parameter.kind is parameter.KEYWORD_ONLY and parameter.default is parameter.empty:
            raise StubArityError(f"behavior for {name!r} requires keyword-only argument {parameter.name!r}")
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            if parameter.default is parameter.empty:
                required += 1
    if required > MAX_STUB_ARITY:
        raise StubArityError(
            f"behavior for {name!r} requires {required} positional arguments; at most {MAX_STUB_ARITY} are supported"
        )


def stub_kind_of(entry: Any) -> StubKind:
    """Return the variant tag of a stub table entry.

    Entries written by :meth:`Mock.mock_setup_action` or
    :meth:`Mock.mock_setup_function` carry their tag; anything else,
    including raw callables written through :meth:`Mock.mock_setup_manual`,
    is a plain value.

    Example:
        >>> stub_kind_of(42)
        <StubKind.VALUE: 'value'>
    """
    kind = getattr(entry, _STUB_KIND_ATTRIBUTE, None)
    return kind if isinstance(kind, StubKind) else StubKind.VALUE


def mock_method(behavior: F) -> F:
    """Return ``behavior`` unchanged.

    Lets a stub be declared with ``def`` and a decorator where a lambda
    would be too small, keeping the declaration next to its setup.

    Example:
        >>> @mock_method
        ... def pay_bill(amount: int) -> bool:
        ...     return amount < 100
        >>> pay_bill(10)
        True
    """
    return behavior


class Mock:
    """Base class providing stub storage, call recording, and verification.

    Subclass it together with (or in place of) the interface being replaced,
    and implement each interface member as a one-line forward into
    :attr:`mocks`. Registry operations are prefixed with ``mock_`` so they
    stay clear of the interface's own member names.

    Args:
        settings: Verification and logging switches. Defaults to
            :data:`~mocklight.domain.settings.DEFAULT_SETTINGS`.

    Example:
        >>> mock = Mock()
        >>> mock.mock_setup_function("sum", lambda a, b: a + b)
        >>> mock.mocks.sum(2, 3)
        5
        >>> query = mock.mock_verify("sum")
        >>> query.was_called_times(1), query.was_called_with(3, 2)
        (True, True)
        >>> mock.mock_verify("never").was_called()
        False
    """

    def __init__(self, *, settings: MockSettings | None = None) -> None:
        self._settings = settings if settings is not None else DEFAULT_SETTINGS
        self._stubs = StubTable()
        self._calls: dict[str, CallRecord] = {}

    @property
    def mocks(self) -> StubTable:
        """The stub table that interface members forward to."""
        return self._stubs

    @property
    def mock_settings(self) -> MockSettings:
        """Settings this mock was created with."""
        return self._settings

    def mock_reset(self) -> None:
        """Erase every stub and all recorded call history."""
        self._stubs = StubTable()
        self._calls = {}
        logger.debug("Mock reset", extra={"mock": type(self).__name__})

    def mock_setup(self, name: str, setup: Any) -> None:
        """Install ``setup`` under ``name``, choosing the stub kind from its type.

        Callables become function stubs (recorded, result returned); any
        other object is stored as a plain value. Use
        :meth:`mock_setup_value` to store a callable as a value.
        """
        if callable(setup):
            self.mock_setup_function(name, setup)
        else:
            self.mock_setup_value(name, setup)

    def mock_setup_value(self, name: str, value: Any) -> None:
        """Store ``value`` under ``name`` for property-style reads.

        Reading a value stub does not record a call.
        """
        self._stubs[name] = value
        logger.debug("Stub configured", extra={"member": name, "kind": StubKind.VALUE.value})

    def mock_setup_action(self, name: str, setup: Callable[..., Any]) -> None:
        """Install a side-effect-only behavior taking 0-5 positional arguments.

        Each invocation is recorded before ``setup`` runs; its return value
        is discarded and the stub returns ``None``.

        Raises:
            StubBehaviorError: ``setup`` is not callable.
            StubArityError: ``setup`` cannot accept 0-5 positional arguments.
        """
        self._install(name, setup, StubKind.ACTION)

    def mock_setup_function(self, name: str, setup: Callable[..., Any]) -> None:
        """Install a value-returning behavior taking 0-5 positional arguments.

        Each invocation is recorded before ``setup`` runs and its result is
        returned unchanged. Coroutine functions work too: the call counts
        when the coroutine is created, not when it is awaited.

        Raises:
            StubBehaviorError: ``setup`` is not callable.
            StubArityError: ``setup`` cannot accept 0-5 positional arguments.
        """
        self._install(name, setup, StubKind.FUNCTION)

    def mock_setup_manual(self, setup: Callable[[StubTable], Any]) -> None:
        """Hand the raw stub table to ``setup`` for arbitrary configuration.

        Nothing written this way is call-tracked. Call
        :meth:`mock_update_calls` from inside your stubs if you want to
        verify them later.

        Example:
            >>> mock = Mock()
            >>> mock.mock_setup_manual(lambda mocks: mocks.__setitem__("AccountHolder", "Ada"))
            >>> mock.mocks.AccountHolder
            'Ada'
            >>> mock.mock_verify("AccountHolder").was_called()
            False
        """
        setup(self._stubs)
        logger.debug("Manual stub setup applied", extra={"mock": type(self).__name__, "stub_count": len(self._stubs)})

    def mock_update_calls(self, name: str, *parameters: Any) -> None:
        """Record one invocation of ``name`` with its positional arguments.

        This is the only call-recording primitive; every wrapped stub
        funnels through it before running its behavior.
        """
        record = self._calls.get(name)
        if record is None:
            record = CallRecord.first_call(parameters)
            self._calls[name] = record
        else:
            record.add_call(parameters)
        if self._settings.log_invocations:
            logger.debug(
                "Stub invoked",
                extra={"member": name, "call_count": record.count, "argument_count": len(parameters)},
            )

    def mock_verify(self, name: str) -> CallHistoryQuery:
        """Return a snapshot query over the call history of ``name``.

        Members that were never invoked get an empty history, so
        ``was_called()`` answers False instead of raising. Invocations made
        after this returns are not reflected in the query.

        Raises:
            UnverifiedMemberError: Only when the mock's settings use
                :attr:`UnknownMemberPolicy.RAISE` and ``name`` has no history.
        """
        record = self._calls.get(name)
        if record is not None:
            return CallHistoryQuery(name, record)
        if self._settings.unknown_member is UnknownMemberPolicy.RAISE:
            raise UnverifiedMemberError(f"Setup has not been called for {name}.")
        return CallHistoryQuery(name)

    def mock_stub_kind(self, name: str) -> StubKind:
        """Return the variant tag of the stub stored under ``name``.

        Raises:
            StubNotConfiguredError: Nothing is stored under ``name``.
        """
        return stub_kind_of(self._stubs[name])

    def __deepcopy__(self: M, memo: dict[int, Any]) -> M:
        """Copy settings, stubs, and history into an independent mock.

        Value stubs are deep-copied. Action and function stubs are
        reinstalled around the same behavior, so calling them on the copy
        records into the copy only.
        """
        clone = type(self).__new__(type(self))
        memo[id(self)] = clone
        for key, value in self.__dict__.items():
            if key != "_stubs":
                clone.__dict__[key] = copy.deepcopy(value, memo)
        clone._stubs = StubTable()
        for name in self._stubs:
            entry = self._stubs[name]
            kind = stub_kind_of(entry)
            if kind is StubKind.VALUE:
                clone._stubs[name] = copy.deepcopy(entry, memo)
            else:
                clone._install(name, entry.__wrapped__, kind)
        return clone

    def _mock_property(self, name: str) -> Any:
        """Resolve a property-style member.

        Value stubs are returned as stored and not recorded; a function
        stub is invoked without arguments, which records the read.
        """
        entry = self._stubs[name]
        if stub_kind_of(entry) is StubKind.VALUE:
            return entry
        return entry()

    def _install(self, name: str, setup: Callable[..., Any], kind: StubKind) -> None:
        _check_behavior(name, setup)

        @functools.wraps(setup)
        def stub(*parameters: Any) -> Any:
            self.mock_update_calls(name, *parameters)
            result = setup(*parameters)
            return None if kind is StubKind.ACTION else result

        setattr(stub, _STUB_KIND_ATTRIBUTE, kind)
        self._stubs[name] = stub
        logger.debug("Stub configured", extra={"member": name, "kind": kind.value})


__all__ = [
    "MAX_STUB_ARITY",
    "Mock",
    "StubTable",
    "mock_method",
    "stub_kind_of",
]
