"""Configuration provider double."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ...domain.mock import Mock


class MockConfiguration(Mock):
    """Stands in for a key/section configuration reader.

    Indexing reads and writes the stub stored under the key itself, so
    ``mock_setup_value("ConnectionString", "...")`` answers
    ``config["ConnectionString"]``. The methods forward to the stubs of
    the same name.

    Example:
        >>> config = MockConfiguration()
        >>> config["Logging:Level"] = "Debug"
        >>> config["Logging:Level"]
        'Debug'
        >>> config.mock_setup_function("get_section", lambda key: {"Level": "Debug"})
        >>> config.get_section("Logging")
        {'Level': 'Debug'}
        >>> config.mock_verify("get_section").was_called_with("Logging")
        True
    """

    def __getitem__(self, key: str) -> Any:
        return self.mocks[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.mocks[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.mocks.get(key, default)

    def get_section(self, key: str) -> Any:
        return self.mocks.get_section(key)

    def get_children(self) -> Iterable[Any]:
        return self.mocks.get_children()

    def get_reload_token(self) -> Any:
        return self.mocks.get_reload_token()


__all__ = ["MockConfiguration"]
