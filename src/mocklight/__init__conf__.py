"""Static package metadata surfaced to the CLI and configuration layers.

Contents:
    * Distribution identifiers (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config to locate
      platform-specific configuration directories.
    * :func:`print_info` - render the metadata block for ``mocklight info``.
"""

from __future__ import annotations

from importlib import metadata as _im

name = "mocklight"
title = "Lightweight hand-written test doubles with call recording and verification"
shell_command = "mocklight"
homepage = "https://github.com/mocklight/mocklight"
author = "mocklight contributors"
author_email = "mocklight@users.noreply.github.com"

#: Vendor, application, and slug identifiers for lib_layered_config path discovery.
LAYEREDCONF_VENDOR = "mocklight"
LAYEREDCONF_APP = "mocklight"
LAYEREDCONF_SLUG = "mocklight"


def _resolve_version() -> str:
    """Return the installed distribution version, or a development marker."""
    try:
        return _im.version(name)
    except _im.PackageNotFoundError:
        return "0.0.0.dev0"


version = _resolve_version()


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for mocklight:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
