"""In-memory stand-ins for the I/O ports, wired by ``build_testing``.

None of them touch the filesystem, the environment, or the console, so a
CLI command can be driven end to end without reading real configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lib_layered_config import Config

from ..domain.enums import OutputFormat
from ..domain.settings import MockSettings

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, DisplaySettings, GetConfig, InitLogging


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return an empty configuration; the ``[mocklight]`` defaults then apply."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Discard the configuration instead of printing it."""


def display_settings_in_memory(settings: MockSettings, *, output_format: OutputFormat = OutputFormat.HUMAN) -> None:
    """Discard the settings instead of printing them."""


def init_logging_in_memory(config: Config) -> None:
    """Leave logging untouched."""


if TYPE_CHECKING:
    _check_get_config: GetConfig = get_config_in_memory
    _check_display_config: DisplayConfig = display_config_in_memory
    _check_display_settings: DisplaySettings = display_settings_in_memory
    _check_init_logging: InitLogging = init_logging_in_memory


__all__ = [
    "display_config_in_memory",
    "display_settings_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
