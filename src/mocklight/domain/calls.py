"""Append-only invocation history for a single stubbed member."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


def _empty_parameters() -> dict[int, tuple[Any, ...]]:
    """Create an empty typed mapping for per-invocation arguments."""
    return {}


@dataclass(slots=True)
class CallRecord:
    """Invocation count plus the positional arguments of each invocation.

    ``parameters`` is keyed by the 1-based invocation index. Invocations
    without arguments bump ``count`` but leave no entry, so the mapping never
    holds more than ``count`` entries.

    Attributes:
        count: Invocations since creation or the last :meth:`clear`.
        parameters: Invocation index -> argument tuple passed that time.

    Example:
        >>> record = CallRecord.first_call(("world",))
        >>> record.add_call(())
        >>> record.count, record.parameters
        (2, {1: ('world',)})
    """

    count: int = 0
    parameters: dict[int, tuple[Any, ...]] = field(default_factory=_empty_parameters)

    @classmethod
    def first_call(cls, parameters: Sequence[Any] = ()) -> CallRecord:
        """Create a record seeded with one invocation."""
        record = cls(count=1)
        if parameters:
            record.parameters[1] = tuple(parameters)
        return record

    def add_call(self, parameters: Sequence[Any] = ()) -> None:
        """Count one more invocation, keeping its arguments when there are any."""
        self.count += 1
        if parameters:
            self.parameters[self.count] = tuple(parameters)

    def clear(self) -> None:
        """Forget all history; the next invocation is counted as the first."""
        self.count = 0
        self.parameters = _empty_parameters()


__all__ = ["CallRecord"]
