"""The ``mocklight`` command group: global options and command registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from mocklight import __init__conf__

from .context import CLICK_CONTEXT_SETTINGS, CLIContext, set_tracebacks

if TYPE_CHECKING:
    from mocklight.composition import AppServices


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show the full Python traceback on errors")
@click.option("--profile", default=None, help="Read configuration from a named profile (e.g. 'ci')")
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Build the services, load configuration once, and hand both to the command.

    ``ctx.obj`` arrives as the services factory and leaves as a
    :class:`~mocklight.adapters.cli.context.CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from mocklight.composition import build_testing
        >>> CliRunner().invoke(cli, ["info"], obj=build_testing).exit_code
        0
    """
    if not callable(ctx.obj):
        raise RuntimeError("mocklight was invoked without a services factory")
    services: AppServices = ctx.obj()
    config = services.get_config(profile=profile)
    services.init_logging(config)
    ctx.obj = CLIContext(config=config, services=services, profile=profile)
    set_tracebacks(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # command modules import this package, so they load after the group exists
    from .commands import cli_config, cli_info, cli_settings

    for command in (cli_info, cli_config, cli_settings):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
