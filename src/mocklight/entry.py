"""``mocklight`` console script: the CLI with production adapters.

Lives outside :mod:`mocklight.adapters` because it reaches into
:mod:`mocklight.composition`, which the adapters must not import.
"""

from __future__ import annotations

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main() -> int:
    """Run the CLI on ``sys.argv`` and return its exit code."""
    return run_cli(services_factory=build_production)


__all__ = ["main"]
