"""``mocklight config`` and ``mocklight settings``: what configuration the mocks would see.

``config`` prints the merged layers; ``settings`` prints what
:func:`mocklight.load_settings` would build from them. Both accept their own
``--profile`` that overrides the one given to the root group.
"""

from __future__ import annotations

import logging
from typing import NoReturn

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from mocklight.domain.enums import OutputFormat
from mocklight.domain.errors import ConfigurationError

from ..context import CLICK_CONTEXT_SETTINGS, CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice([member.value for member in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human (rich tables) or json",
)
profile_option = click.option("--profile", default=None, help="Use this profile instead of the root --profile")


def _config_for(state: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    # the root group already loaded its profile; only an override triggers a reload
    if not profile:
        return state.config, state.profile
    return state.services.get_config(profile=profile), profile


def _fail(exc: Exception, code: ExitCode) -> NoReturn:
    click.echo(f"\nError: {exc}", err=True)
    raise SystemExit(code) from exc


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@format_option
@click.option("--section", default=None, help="Print a single section, e.g. 'mocklight'")
@profile_option
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Print the configuration merged from defaults, app, host, user, .env and environment.

    Exits with status 22 when ``--section`` names a section that is not there.
    """
    state = get_cli_context(ctx)
    config, profile = _config_for(state, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": profile}):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        try:
            state.services.display_config(config, output_format=fmt, section=section, profile=profile)
        except ValueError as exc:
            _fail(exc, ExitCode.INVALID_ARGUMENT)


@click.command("settings", context_settings=CLICK_CONTEXT_SETTINGS)
@format_option
@profile_option
@click.pass_context
def cli_settings(ctx: click.Context, output_format: str, profile: str | None) -> None:
    """Print the mock settings that load_settings() would return.

    Exits with status 78 when the [mocklight] section is invalid.
    """
    state = get_cli_context(ctx)
    config, profile = _config_for(state, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-settings", extra={"command": "settings", "profile": profile}):
        try:
            settings = state.services.load_mock_settings(config)
        except ConfigurationError as exc:
            logger.error("Invalid mock settings", extra={"error": str(exc)})
            _fail(exc, ExitCode.CONFIG_ERROR)
        logger.info("Displaying mock settings", extra={"format": fmt.value, "unknown_member": settings.unknown_member.value})
        state.services.display_settings(settings, output_format=fmt)


__all__ = ["cli_config", "cli_settings"]
