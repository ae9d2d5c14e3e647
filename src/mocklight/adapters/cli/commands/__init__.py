"""The ``info``, ``config`` and ``settings`` commands, registered by :mod:`..root`."""

from __future__ import annotations

from .config import cli_config, cli_settings
from .info import cli_info

__all__ = ["cli_config", "cli_info", "cli_settings"]
