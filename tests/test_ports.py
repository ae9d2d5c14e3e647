"""Port behavioral contract tests for the in-memory adapters and composition.

Production adapters are exercised by the CLI integration tests. Static
type conformance is enforced by pyright.
"""

from __future__ import annotations

from dataclasses import fields

import pytest
from lib_layered_config import Config

from mocklight.adapters.memory import (
    display_config_in_memory,
    display_settings_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
)
from mocklight.domain.enums import OutputFormat
from mocklight.domain.settings import MockSettings


@pytest.mark.os_agnostic
def test_get_config_in_memory_returns_empty_config() -> None:
    """The in-memory loader yields an empty Config regardless of profile."""
    config = get_config_in_memory(profile="ci", start_dir="/nowhere")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_in_memory_displays_produce_no_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Display adapters are silent no-ops."""
    display_config_in_memory(Config({"a": {"b": 1}}, {}), output_format=OutputFormat.JSON)
    display_settings_in_memory(MockSettings(), output_format=OutputFormat.HUMAN)
    init_logging_in_memory(Config({}, {}))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.os_agnostic
def test_build_production_returns_fully_populated_app_services() -> None:
    """build_production wires every port."""
    from mocklight.composition import AppServices, build_production

    services = build_production()

    assert isinstance(services, AppServices)
    for field in fields(services):
        assert callable(getattr(services, field.name)), field.name


@pytest.mark.os_agnostic
def test_build_testing_uses_in_memory_adapters() -> None:
    """build_testing swaps I/O ports for in-memory versions but keeps settings parsing real."""
    from mocklight.adapters.config.settings import load_mock_settings
    from mocklight.composition import build_testing

    services = build_testing()

    assert services.get_config is get_config_in_memory
    assert services.init_logging is init_logging_in_memory
    assert services.display_settings is display_settings_in_memory
    assert services.load_mock_settings is load_mock_settings


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """The services container cannot be mutated after wiring."""
    from dataclasses import FrozenInstanceError

    from mocklight.composition import build_testing

    services = build_testing()

    with pytest.raises(FrozenInstanceError):
        services.get_config = get_config_in_memory  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_app_services_wires_only_ports_the_commands_use() -> None:
    """Every service field is consumed by the root group or a command."""
    from mocklight.composition import AppServices

    assert {field.name for field in fields(AppServices)} == {
        "get_config",
        "display_config",
        "display_settings",
        "load_mock_settings",
        "init_logging",
    }


@pytest.mark.os_agnostic
def test_bundled_default_config_is_the_lowest_layer() -> None:
    """The loader reads its defaults from the file shipped beside it."""
    from mocklight.adapters.config.loader import DEFAULT_CONFIG_PATH

    assert DEFAULT_CONFIG_PATH.is_file()
    assert "[mocklight]" in DEFAULT_CONFIG_PATH.read_text(encoding="utf-8")
