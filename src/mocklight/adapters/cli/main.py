"""Run the ``mocklight`` group and turn its outcome into a process exit code."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from mocklight import __init__conf__

from .context import preserved_tracebacks, set_tracebacks
from .root import cli

if TYPE_CHECKING:
    from mocklight.composition import AppServices

# error output budget in characters, without and with --traceback
_SUMMARY_LIMIT = 500
_VERBOSE_LIMIT = 10_000


def _report_failure(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    set_tracebacks(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=_VERBOSE_LIMIT if verbose else _SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _shutdown_logging() -> None:
    # lib_log_rich only allows the main thread to stop its runtime
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code instead of exiting.

    The services factory travels to the root group as ``ctx.obj``; that is
    why Click runs in non-standalone mode here rather than through
    ``lib_cli_exit_tools.run_cli``.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.
        restore_traceback: Undo ``--traceback`` once the run is over.
        services_factory: Builds the wired services, normally
            :func:`mocklight.composition.build_production`.

    Returns:
        0 on success, the Click usage-error code, a command's
        :class:`~mocklight.adapters.cli.exit_codes.ExitCode`, or the code
        lib_cli_exit_tools maps an unexpected exception to.

    Raises:
        ValueError: ``services_factory`` is missing.
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass mocklight.composition.build_production")

    args = list(argv) if argv is not None else sys.argv[1:]
    with preserved_tracebacks(restore_traceback):
        try:
            result = cli.main(
                args=args,
                prog_name=__init__conf__.shell_command,
                obj=services_factory,
                standalone_mode=False,
            )
        except click.ClickException as exc:
            exc.show()
            return exc.exit_code
        except SystemExit as exc:
            # commands echo their own error before exiting with an ExitCode
            return lib_cli_exit_tools.get_system_exit_code(exc)
        except BaseException as exc:  # noqa: BLE001
            return _report_failure(exc)
        finally:
            _shutdown_logging()
    return result if isinstance(result, int) else 0


__all__ = ["main"]
