"""``mocklight info``: which mocklight is installed, and under what name."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from mocklight import __init__conf__

from ..context import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show the installed name, version, and console command.

    Example:
        >>> from click.testing import CliRunner
        >>> "mocklight" in CliRunner().invoke(cli_info).output
        True
    """
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Showing package metadata", extra={"version": __init__conf__.version})
        __init__conf__.print_info()


__all__ = ["cli_info"]
