"""Read the layered configuration that can steer mock verification.

Sources are merged lowest to highest: the bundled ``defaultconfig.toml``,
then app, host and user files, then ``.env``, then ``MOCKLIGHT___*``
environment variables. A suite can pin the verification policy per
machine (``~/.config/mocklight/config.toml``), per project (``.env``), or
per CI profile.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from mocklight import __init__conf__

#: Bundled lowest-precedence layer holding the ``[mocklight]`` defaults.
DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration for ``profile``, read once per arguments.

    Args:
        profile: Optional profile; inserts ``profile/<name>/`` into every
            configuration path.
        start_dir: Directory where ``.env`` discovery starts. Defaults to
            the working directory.

    Raises:
        ValueError: ``profile`` is empty, too long, or tries to leave the
            configuration directories.

    Example:
        >>> get_config().get("mocklight.unknown_member", default="empty")
        'empty'
        >>> get_config(profile="../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_PATH,
        start_dir=start_dir,
    )


__all__ = ["DEFAULT_CONFIG_PATH", "get_config"]
