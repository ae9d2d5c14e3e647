"""Display configuration and effective mock settings.

Configuration display delegates to lib_layered_config's Rich-styled
renderer; both functions flush pending log output first so log lines do
not interleave with the rendered block.
"""

from __future__ import annotations

import lib_log_rich.runtime
import orjson
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from mocklight.domain.enums import OutputFormat
from mocklight.domain.settings import MockSettings


def _flush_logs() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: OutputFormat.HUMAN for TOML-like display or
            OutputFormat.JSON for JSON.
        section: Optional section name to display only that section.
        console: Optional Rich Console for output, mainly for tests.
        profile: Optional profile name to include in provenance comments.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    _flush_logs()
    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


def display_settings(
    settings: MockSettings,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    console: Console | None = None,
) -> None:
    """Render the effective MockSettings.

    Example:
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> display_settings(MockSettings(), console=Console(file=buffer, color_system=None))
        >>> "unknown_member = empty" in buffer.getvalue()
        True
    """
    _flush_logs()
    target = console if console is not None else Console()
    values = {
        "unknown_member": settings.unknown_member.value,
        "log_invocations": settings.log_invocations,
    }
    if output_format is OutputFormat.JSON:
        target.print(orjson.dumps(values, option=orjson.OPT_INDENT_2).decode(), markup=False, highlight=False)
        return
    target.print("[bold]\\[mocklight][/bold]")
    for key, value in values.items():
        rendered = str(value).lower() if isinstance(value, bool) else value
        target.print(f"{key} = {rendered}", markup=False, highlight=False)


__all__ = ["display_config", "display_settings"]
