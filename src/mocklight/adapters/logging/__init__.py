"""lib_log_rich runtime setup for the CLI; library code only uses std ``logging``."""

from __future__ import annotations

from .setup import init_logging

__all__ = ["init_logging"]
