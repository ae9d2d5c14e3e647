"""Command-line interface: the ``mocklight`` group, its commands, and ``main``."""

from __future__ import annotations

from .commands import cli_config, cli_info, cli_settings
from .context import CLICK_CONTEXT_SETTINGS, CLIContext, get_cli_context, preserved_tracebacks, set_tracebacks
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "ExitCode",
    "cli",
    "cli_config",
    "cli_info",
    "cli_settings",
    "get_cli_context",
    "main",
    "preserved_tracebacks",
    "set_tracebacks",
]
