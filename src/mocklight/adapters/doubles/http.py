"""HTTP client factory double built on ``httpx.MockTransport``.

Every client handed out by :class:`MockHttpClientFactory` routes its
requests to the stub registered under the client's name, so requests are
recorded and verifiable like any other stubbed member.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from ...domain.mock import Mock
from ...domain.settings import MockSettings

logger = logging.getLogger(__name__)

RequestHandler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]
"""Stub signature: receives the outgoing request, returns (or awaits to) a response."""


class MockHttpClientFactory(Mock):
    """Stands in for a named HTTP client factory.

    Clients are created lazily and cached per name. A handler may be set up
    before or after its client exists: the transport looks the handler up on
    every request.

    Example:
        >>> factory = MockHttpClientFactory()
        >>> factory.mock_setup("github", lambda request: httpx.Response(200, json={"ok": True}))
        >>> client = factory.create_client("github")
        >>> client.get("https://api.github.com/zen").json()
        {'ok': True}
        >>> factory.mock_verify("github").was_called_times(1)
        True
    """

    def __init__(self, *, settings: MockSettings | None = None) -> None:
        super().__init__(settings=settings)
        self._clients: dict[str, httpx.Client] = {}
        self._async_clients: dict[str, httpx.AsyncClient] = {}

    def mock_reset(self) -> None:
        """Erase handlers, call history, and every cached client.

        Cached sync clients are closed first. Async clients can only be
        closed from a running loop, so they are just dropped; their mock
        transport holds no connections.
        """
        super().mock_reset()
        for client in self._clients.values():
            client.close()
        self._clients = {}
        self._async_clients = {}

    def __deepcopy__(self, memo: dict[int, Any]) -> MockHttpClientFactory:
        # clients are bound to this factory's transport; the copy builds its own
        clients, async_clients = self._clients, self._async_clients
        self._clients, self._async_clients = {}, {}
        try:
            return super().__deepcopy__(memo)
        finally:
            self._clients, self._async_clients = clients, async_clients

    def mock_setup(self, name: str, setup: RequestHandler) -> None:  # type: ignore[override]
        """Route requests of the client named ``name`` to ``setup``.

        ``setup`` may be a coroutine function when the client is used
        through :meth:`create_async_client`.
        """
        self.mock_setup_function(name, setup)

    def create_client(self, name: str) -> httpx.Client:
        """Return the cached ``httpx.Client`` for ``name``, creating it on first use."""
        client = self._clients.get(name)
        if client is None:
            client = httpx.Client(transport=self._transport(name))
            self._clients[name] = client
            logger.debug("Created mock HTTP client", extra={"client": name})
        return client

    def create_async_client(self, name: str) -> httpx.AsyncClient:
        """Return the cached ``httpx.AsyncClient`` for ``name``, creating it on first use."""
        client = self._async_clients.get(name)
        if client is None:
            client = httpx.AsyncClient(transport=self._transport(name))
            self._async_clients[name] = client
            logger.debug("Created mock async HTTP client", extra={"client": name})
        return client

    def _transport(self, name: str) -> httpx.MockTransport:
        return httpx.MockTransport(functools.partial(self._dispatch, name))

    def _dispatch(self, name: str, request: httpx.Request) -> httpx.Response | Awaitable[httpx.Response]:
        return self.mocks[name](request)


__all__ = ["MockHttpClientFactory", "RequestHandler"]
