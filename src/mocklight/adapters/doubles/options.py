"""Options provider doubles: fixed, monitored, and snapshot options."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ...domain.mock import Mock

T = TypeVar("T")


class OptionsMock(Mock, Generic[T]):
    """Stands in for a fixed options value.

    Example:
        >>> options: OptionsMock[dict[str, int]] = OptionsMock()
        >>> options.mock_setup_value("value", {"retries": 3})
        >>> options.value
        {'retries': 3}
    """

    @property
    def value(self) -> T:
        return self._mock_property("value")


class OptionsMonitorMock(Mock, Generic[T]):
    """Stands in for options that change at runtime and notify listeners."""

    @property
    def current_value(self) -> T:
        return self._mock_property("current_value")

    def get(self, name: str) -> T:
        return self.mocks.get(name)

    def on_change(self, listener: Callable[[T, str], Any]) -> Any:
        return self.mocks.on_change(listener)


class OptionsSnapshotMock(Mock, Generic[T]):
    """Stands in for options captured once per scope."""

    @property
    def value(self) -> T:
        return self._mock_property("value")

    def get(self, name: str) -> T:
        return self.mocks.get(name)


__all__ = ["OptionsMock", "OptionsMonitorMock", "OptionsSnapshotMock"]
