"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the library to external
systems and frameworks, plus the ready-made interface doubles.

Contents:
    * :mod:`.doubles` - Doubles for configuration, HTTP, context and options interfaces
    * :mod:`.config` - Configuration loading, settings parsing, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory port implementations for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
