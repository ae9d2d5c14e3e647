"""Ready-made doubles for common external interfaces.

Each double is a :class:`~mocklight.domain.mock.Mock` whose members are
one-line forwards into the stub table.

Contents:
    * :mod:`.configuration` - MockConfiguration
    * :mod:`.context` - MockHttpContextAccessor
    * :mod:`.http` - MockHttpClientFactory (httpx)
    * :mod:`.options` - OptionsMock, OptionsMonitorMock, OptionsSnapshotMock
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .configuration import MockConfiguration
from .context import MockHttpContextAccessor
from .http import MockHttpClientFactory, RequestHandler
from .options import OptionsMock, OptionsMonitorMock, OptionsSnapshotMock

# Static conformance assertions
if TYPE_CHECKING:
    from mocklight.application.ports import (
        ConfigurationProvider,
        HttpClientFactory,
        HttpContextAccessor,
        OptionsMonitor,
        OptionsProvider,
        OptionsSnapshot,
    )

    _assert_configuration: ConfigurationProvider = MockConfiguration()
    _assert_http_client_factory: HttpClientFactory = MockHttpClientFactory()
    _assert_http_context_accessor: HttpContextAccessor = MockHttpContextAccessor()
    _assert_options: OptionsProvider[Any] = OptionsMock[Any]()
    _assert_options_monitor: OptionsMonitor[Any] = OptionsMonitorMock[Any]()
    _assert_options_snapshot: OptionsSnapshot[Any] = OptionsSnapshotMock[Any]()

__all__ = [
    "MockConfiguration",
    "MockHttpClientFactory",
    "MockHttpContextAccessor",
    "OptionsMock",
    "OptionsMonitorMock",
    "OptionsSnapshotMock",
    "RequestHandler",
]
