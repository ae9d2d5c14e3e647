"""Predicate queries over one member's recorded call history.

Contents:
    * :class:`CallHistoryQuery` - answers "was it called, how often, with what".
    * :func:`values_equal` - argument equality used by the queries.
"""

from __future__ import annotations

import numbers
from collections.abc import Callable, Sequence
from typing import Any

from .calls import CallRecord

Comparer = Callable[[Any, Any], bool]
"""Custom equality ``(recorded, expected) -> bool`` for parameter checks."""


def values_equal(left: Any, right: Any) -> bool:
    """Return True when two recorded arguments count as the same value.

    Identity always matches. Numbers (``bool`` included) must also share
    their exact type, so ``False`` never matches ``0`` and ``1`` never
    matches ``1.0``. Otherwise ``==`` decides; an ``==`` that raises, or
    returns something without a truth value (array-like results), is a
    non-match.

    Example:
        >>> values_equal([1, 2], [1, 2])
        True
        >>> values_equal(object(), object())
        False
        >>> values_equal(True, 1)
        False
    """
    if left is right:
        return True
    if isinstance(left, numbers.Number) or isinstance(right, numbers.Number):
        if type(left) is not type(right):
            return False
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


def _same_multiset(recorded: Sequence[Any], expected: Sequence[Any]) -> bool:
    """Compare two argument lists ignoring order but honouring multiplicity."""
    if len(recorded) != len(expected):
        return False
    remaining = list(expected)
    for item in recorded:
        for position, candidate in enumerate(remaining):
            if values_equal(item, candidate):
                del remaining[position]
                break
        else:
            return False
    return not remaining


class CallHistoryQuery:
    """Snapshot of the :class:`CallRecord` of one member.

    The count and argument lists are copied when the query is built, so
    invocations made afterwards do not change its answers; ask
    :meth:`Mock.mock_verify` again for a fresh snapshot. :meth:`clear` is
    the one operation that reaches back into the owning mock: it resets
    that member's record and empties this snapshot too.

    Example:
        >>> record = CallRecord.first_call((1, "a"))
        >>> query = CallHistoryQuery("Pay", record)
        >>> record.add_call((2, "b"))
        >>> query.was_called_times(1)
        True
        >>> query.was_called_with("a", 1)
        True
        >>> query.was_called_with_parameter_at(1, 1)
        False
    """

    __slots__ = ("_count", "_name", "_parameters", "_record")

    def __init__(self, name: str, record: CallRecord | None = None) -> None:
        self._name = name
        self._record = record
        if record is None:
            self._count = 0
            self._parameters: dict[int, tuple[Any, ...]] = {}
        else:
            self._count = record.count
            self._parameters = dict(record.parameters)

    @property
    def name(self) -> str:
        """Member name this query reports on."""
        return self._name

    @property
    def count(self) -> int:
        """Number of recorded invocations."""
        return self._count

    @property
    def calls(self) -> tuple[tuple[Any, ...], ...]:
        """Recorded argument tuples in invocation order.

        Invocations made without arguments leave no entry.
        """
        return tuple(self._parameters[index] for index in sorted(self._parameters))

    def was_called(self) -> bool:
        """Return True if the member was invoked at least once."""
        return self._count > 0

    def was_called_times(self, number: int) -> bool:
        """Return True if the member was invoked exactly ``number`` times."""
        return self._count == number

    def was_called_with(self, *parameters: Any) -> bool:
        """Return True if some invocation received exactly these arguments.

        Order is ignored but multiplicity is not: ``(1, "a")`` matches
        ``("a", 1)``, while ``(1, 1)`` does not match ``(1,)``.

        Args:
            *parameters: Expected positional arguments in any order.

        Returns:
            True when at least one recorded argument list is the same
            multiset as ``parameters``.
        """
        return any(_same_multiset(recorded, parameters) for recorded in self._parameters.values())

    def was_called_with_parameter_at(self, index: int, value: Any, comparer: Comparer | None = None) -> bool:
        """Return True if some invocation passed ``value`` at position ``index``.

        Without a comparer, the recorded argument must be an instance of
        ``type(value)`` and equal to it; a type mismatch is a non-match.
        Invocations with too few arguments are skipped.

        Args:
            index: Zero-based positional argument index.
            value: Expected argument.
            comparer: Optional ``(recorded, value) -> bool`` equality.

        Returns:
            False for an empty history, otherwise whether any invocation matched.

        Raises:
            IndexError: No recorded invocation has an argument at ``index``.
        """
        matches = comparer if comparer is not None else _typed_equal
        in_range = False
        for _invocation, recorded in sorted(self._parameters.items()):
            try:
                argument = recorded[index]
            except IndexError:
                continue
            in_range = True
            if matches(argument, value):
                return True
        if self._parameters and not in_range:
            raise IndexError(f"parameter index {index} out of range for every recorded call of {self._name!r}")
        return False

    def clear(self) -> None:
        """Reset the member's history to zero calls; stubs stay configured."""
        if self._record is not None:
            self._record.clear()
        self._count = 0
        self._parameters = {}

    def __repr__(self) -> str:
        return f"CallHistoryQuery(name={self._name!r}, count={self._count}, calls={self.calls!r})"


def _typed_equal(recorded: Any, expected: Any) -> bool:
    return isinstance(recorded, type(expected)) and values_equal(recorded, expected)


__all__ = ["CallHistoryQuery", "Comparer", "values_equal"]
