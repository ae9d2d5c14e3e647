"""Runtime settings consulted by :class:`~mocklight.domain.mock.Mock`."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import UnknownMemberPolicy


@dataclass(frozen=True, slots=True)
class MockSettings:
    """Behavioural switches for a mock instance.

    The defaults need no configuration files, so ``Mock()`` works anywhere.
    Loading these values from layered configuration happens in the adapters
    layer (see :func:`mocklight.composition.load_settings`).

    Attributes:
        unknown_member: Verification policy for members without history.
        log_invocations: Emit a DEBUG record for every recorded invocation.

    Example:
        >>> MockSettings().unknown_member
        <UnknownMemberPolicy.EMPTY: 'empty'>
        >>> MockSettings(log_invocations=True).log_invocations
        True
    """

    unknown_member: UnknownMemberPolicy = UnknownMemberPolicy.EMPTY
    log_invocations: bool = False


DEFAULT_SETTINGS = MockSettings()


__all__ = ["DEFAULT_SETTINGS", "MockSettings"]
