"""State shared by the root group with the ``info``, ``config`` and ``settings`` commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from mocklight.composition import AppServices

#: ``-h`` works wherever ``--help`` does.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


@dataclass(slots=True)
class CLIContext:
    """Configuration loaded by the root group plus the wired services.

    Example:
        >>> from mocklight.composition import build_testing
        >>> services = build_testing()
        >>> CLIContext(config=services.get_config(), services=services).profile is None
        True
    """

    config: Config
    services: AppServices
    profile: str | None = None


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state the root group stored on ``ctx``.

    Raises:
        RuntimeError: A command ran without the root group in front of it.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized; run commands through the mocklight group.")
    return ctx.obj


def set_tracebacks(enabled: bool) -> None:
    """Switch lib_cli_exit_tools between full coloured tracebacks and one-line errors.

    Example:
        >>> set_tracebacks(True)
        >>> lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color
        (True, True)
        >>> set_tracebacks(False)
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


@contextmanager
def preserved_tracebacks(restore: bool = True) -> Iterator[None]:
    """Put the traceback switches back as they were once the block exits.

    Args:
        restore: False keeps whatever the block set, e.g. ``--traceback``.

    Example:
        >>> set_tracebacks(False)
        >>> with preserved_tracebacks():
        ...     set_tracebacks(True)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    config = lib_cli_exit_tools.config
    saved = (bool(config.traceback), bool(config.traceback_force_color))
    try:
        yield
    finally:
        if restore:
            config.traceback, config.traceback_force_color = saved


__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "get_cli_context",
    "preserved_tracebacks",
    "set_tracebacks",
]
