"""Parse the ``[mocklight]`` configuration section into domain settings.

Pydantic validates the raw section at the boundary; the domain only ever
sees the frozen :class:`~mocklight.domain.settings.MockSettings` dataclass.
"""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from mocklight.domain.enums import UnknownMemberPolicy
from mocklight.domain.errors import ConfigurationError
from mocklight.domain.settings import MockSettings

#: Configuration section holding mock settings.
SETTINGS_SECTION = "mocklight"


class MockSettingsModel(BaseModel):
    """Pydantic model for [mocklight] config section validation.

    Unknown keys are rejected so that typos surface instead of silently
    falling back to defaults.

    Example:
        >>> model = MockSettingsModel(unknown_member="raise")
        >>> model.unknown_member
        <UnknownMemberPolicy.RAISE: 'raise'>
        >>> MockSettingsModel().log_invocations
        False
    """

    unknown_member: UnknownMemberPolicy = UnknownMemberPolicy.EMPTY
    log_invocations: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_settings(self) -> MockSettings:
        """Convert to the domain settings dataclass."""
        return MockSettings(unknown_member=self.unknown_member, log_invocations=self.log_invocations)


def load_mock_settings(config: Config) -> MockSettings:
    """Build MockSettings from the ``[mocklight]`` section of ``config``.

    Args:
        config: Already-loaded layered configuration object.

    Returns:
        Validated settings; defaults when the section is absent.

    Raises:
        ConfigurationError: The section contains unknown keys or invalid values.

    Example:
        >>> load_mock_settings(Config({"mocklight": {"log_invocations": True}}, {})).log_invocations
        True
        >>> load_mock_settings(Config({}, {})).unknown_member.value
        'empty'
    """
    raw: object = config.get(SETTINGS_SECTION, default={})
    try:
        parsed = MockSettingsModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"invalid [{SETTINGS_SECTION}] configuration: {exc}") from exc
    return parsed.to_settings()


__all__ = [
    "SETTINGS_SECTION",
    "MockSettingsModel",
    "load_mock_settings",
]
