"""Wiring: which adapter serves each port, for the CLI and for tests.

The CLI receives :func:`build_production` (or, in its own tests,
:func:`build_testing`) as a factory and calls it once per run. Library
users who want configuration-driven mocks call :func:`load_settings`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config, display_settings
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_mock_settings
from ..adapters.logging.setup import init_logging
from ..domain.settings import MockSettings

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, DisplaySettings, GetConfig, InitLogging, LoadMockSettings

    # pyright rejects any adapter whose signature drifts from its port
    _check_get_config: GetConfig = get_config
    _check_display_config: DisplayConfig = display_config
    _check_display_settings: DisplaySettings = display_settings
    _check_load_mock_settings: LoadMockSettings = load_mock_settings
    _check_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The ports the root group and the three commands call, bound to adapters."""

    get_config: GetConfig
    display_config: DisplayConfig
    display_settings: DisplaySettings
    load_mock_settings: LoadMockSettings
    init_logging: InitLogging


def build_production() -> AppServices:
    """Bind every port to the real lib_layered_config and lib_log_rich adapters."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        display_settings=display_settings,
        load_mock_settings=load_mock_settings,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Bind the I/O ports to silent in-memory stand-ins.

    ``load_mock_settings`` stays real because it only validates data.
    """
    from ..adapters import memory

    return AppServices(
        get_config=memory.get_config_in_memory,
        display_config=memory.display_config_in_memory,
        display_settings=memory.display_settings_in_memory,
        load_mock_settings=load_mock_settings,
        init_logging=memory.init_logging_in_memory,
    )


def load_settings(*, profile: str | None = None, start_dir: str | None = None) -> MockSettings:
    """Load MockSettings from the layered configuration.

    Use this to let configuration files and environment variables decide
    how mocks behave, e.g. in a ``conftest.py``::

        @pytest.fixture
        def account() -> MockAccount:
            return MockAccount(settings=load_settings())

    Args:
        profile: Optional configuration profile name.
        start_dir: Optional directory that seeds .env discovery.

    Returns:
        Settings parsed from the ``[mocklight]`` section.

    Raises:
        ConfigurationError: The section holds unknown keys or invalid values.
        ValueError: ``profile`` is not a valid profile name.
    """
    return load_mock_settings(get_config(profile=profile, start_dir=start_dir))


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "display_settings",
    "get_config",
    "init_logging",
    "load_mock_settings",
    "load_settings",
]
