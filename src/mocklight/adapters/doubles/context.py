"""HTTP context accessor double."""

from __future__ import annotations

from typing import Any

from ...domain.mock import Mock


class MockHttpContextAccessor(Mock):
    """Stands in for an accessor exposing the current request context.

    Reading ``http_context`` returns the value stub (or invokes a function
    stub) named ``http_context``; assigning stores a value stub.

    Example:
        >>> accessor = MockHttpContextAccessor()
        >>> accessor.http_context = {"user": "ada"}
        >>> accessor.http_context
        {'user': 'ada'}
    """

    @property
    def http_context(self) -> Any:
        return self._mock_property("http_context")

    @http_context.setter
    def http_context(self, value: Any) -> None:
        self.mocks.http_context = value


__all__ = ["MockHttpContextAccessor"]
