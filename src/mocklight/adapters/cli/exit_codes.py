"""Exit statuses the ``mocklight`` commands raise ``SystemExit`` with."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses, borrowed from errno and sysexits.h.

    ``INVALID_ARGUMENT`` (EINVAL) covers a ``--section`` that the merged
    configuration does not have; ``CONFIG_ERROR`` (EX_CONFIG) covers a
    ``[mocklight]`` section that fails validation.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
