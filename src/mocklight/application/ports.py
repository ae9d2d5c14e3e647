"""Application ports: callable and structural Protocol definitions.

Two kinds of Protocol live here:

* Callable ports whose ``__call__`` signature matches an adapter function
  (configuration loading, display, logging, settings parsing). Module-level
  functions satisfy them via structural subtyping (PEP 544).
* Interface ports describing the external interfaces the doubles in
  :mod:`mocklight.adapters.doubles` stand in for.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``httpx.Client``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from ..domain.enums import OutputFormat
from ..domain.settings import MockSettings

if TYPE_CHECKING:
    import httpx
    from lib_layered_config import Config

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


# ---------------------------------------------------------------------------
# Callable ports
# ---------------------------------------------------------------------------


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class DisplaySettings(Protocol):
    """Display effective mock settings in the requested format."""

    def __call__(self, settings: MockSettings, *, output_format: OutputFormat = ...) -> None: ...


class LoadMockSettings(Protocol):
    """Parse the ``[mocklight]`` section of a configuration into MockSettings."""

    def __call__(self, config: Config) -> MockSettings: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


# ---------------------------------------------------------------------------
# Interface ports (what the doubles replace)
# ---------------------------------------------------------------------------


class ConfigurationProvider(Protocol):
    """Key/section configuration reader."""

    def __getitem__(self, key: str) -> Any: ...
    def __setitem__(self, key: str, value: Any) -> None: ...
    def get(self, key: str, default: Any = ...) -> Any: ...
    def get_section(self, key: str) -> Any: ...
    def get_children(self) -> Iterable[Any]: ...
    def get_reload_token(self) -> Any: ...


class HttpClientFactory(Protocol):
    """Named HTTP client factory."""

    def create_client(self, name: str) -> httpx.Client: ...
    def create_async_client(self, name: str) -> httpx.AsyncClient: ...


class HttpContextAccessor(Protocol):
    """Access to the ambient request context."""

    @property
    def http_context(self) -> Any: ...
    @http_context.setter
    def http_context(self, value: Any) -> None: ...


class OptionsProvider(Protocol[T_co]):
    """A fixed options value."""

    @property
    def value(self) -> T_co: ...


class OptionsMonitor(Protocol[T]):
    """Options that can change at runtime and notify listeners."""

    @property
    def current_value(self) -> T: ...
    def get(self, name: str) -> T: ...
    def on_change(self, listener: Callable[[T, str], Any]) -> Any: ...


class OptionsSnapshot(Protocol[T]):
    """Options captured once per scope, optionally named."""

    @property
    def value(self) -> T: ...
    def get(self, name: str) -> T: ...


__all__ = [
    "ConfigurationProvider",
    "DisplayConfig",
    "DisplaySettings",
    "GetConfig",
    "HttpClientFactory",
    "HttpContextAccessor",
    "InitLogging",
    "LoadMockSettings",
    "OptionsMonitor",
    "OptionsProvider",
    "OptionsSnapshot",
]
