"""CLI core stories: traceback, main entry, help, info, version, unknown command."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from mocklight import __init__conf__
from mocklight.adapters import cli as cli_mod
from mocklight.composition import build_production


@pytest.mark.os_agnostic
def test_set_tracebacks_switches_both_flags(managed_traceback_state: None) -> None:
    """set_tracebacks(True) enables traceback and force_color together."""
    cli_mod.set_tracebacks(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_preserved_tracebacks_restores_flags_on_exit(managed_traceback_state: None) -> None:
    """Flags changed inside the block are put back afterwards."""
    cli_mod.set_tracebacks(False)

    with cli_mod.preserved_tracebacks():
        cli_mod.set_tracebacks(True)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_preserved_tracebacks_restores_flags_when_the_block_raises(managed_traceback_state: None) -> None:
    """An exception inside the block does not leak the changed flags."""
    cli_mod.set_tracebacks(False)

    with pytest.raises(RuntimeError), cli_mod.preserved_tracebacks():
        cli_mod.set_tracebacks(True)
        raise RuntimeError("boom")

    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_preserved_tracebacks_can_keep_the_new_flags(managed_traceback_state: None) -> None:
    """restore=False leaves whatever the block set."""
    cli_mod.set_tracebacks(False)

    with cli_mod.preserved_tracebacks(restore=False):
        cli_mod.set_tracebacks(True)

    assert lib_cli_exit_tools.config.traceback is True


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback enables both flags during command execution."""
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append(
            (
                lib_cli_exit_tools.config.traceback,
                lib_cli_exit_tools.config.traceback_force_color,
            )
        )

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert notes == [(True, True)]


@pytest.mark.os_agnostic
def test_traceback_flags_restored_after_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback flags are restored to disabled after command completes."""
    monkeypatch.setattr(__init__conf__, "print_info", lambda: None)

    cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(managed_traceback_state: None) -> None:
    """restore_traceback=False leaves traceback flags enabled after command."""
    cli_mod.set_tracebacks(False)

    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_when_main_is_called_it_invokes_cli_with_services_factory(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """main() passes the services factory through ctx.obj."""
    result = cli_mod.main(["info"], services_factory=build_production)

    assert result == 0
    assert __init__conf__.name in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_when_main_has_no_services_factory_it_refuses() -> None:
    """main() requires the composition layer to wire services."""
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_when_main_receives_no_arguments_help_is_shown(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """main with no args shows help."""
    exit_code = cli_mod.main([], services_factory=build_production)

    assert exit_code == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_when_cli_runs_without_arguments_help_is_printed(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """CLI with no arguments displays help text listing the commands."""
    result = cli_runner.invoke(cli_mod.cli, [], obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "settings" in result.output


@pytest.mark.os_agnostic
def test_when_cli_runs_with_in_memory_services_it_succeeds(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """In-memory services drive the CLI without touching the filesystem."""
    result = cli_runner.invoke(cli_mod.cli, ["info"], obj=testing_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output


@pytest.mark.os_agnostic
def test_when_cli_has_no_services_factory_it_fails(cli_runner: CliRunner) -> None:
    """Invoking the group without a factory is a wiring bug."""
    result = cli_runner.invoke(cli_mod.cli, ["info"])

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """info displays project name and version."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_version_option_prints_the_version(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """--version reports the shell command and version."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Unknown command produces 'No such command' error."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=production_factory)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_when_main_gets_unknown_command_it_returns_usage_error(
    managed_traceback_state: None,
) -> None:
    """Click usage errors map to their own exit code through main()."""
    exit_code = cli_mod.main(["does-not-exist"], services_factory=build_production)

    assert exit_code == 2


@pytest.mark.os_agnostic
def test_exit_codes_follow_posix_conventions() -> None:
    """Exit codes are stable integers."""
    assert int(cli_mod.ExitCode.SUCCESS) == 0
    assert int(cli_mod.ExitCode.GENERAL_ERROR) == 1
    assert int(cli_mod.ExitCode.INVALID_ARGUMENT) == 22
    assert int(cli_mod.ExitCode.CONFIG_ERROR) == 78


@pytest.mark.os_agnostic
def test_when_a_command_exits_with_a_code_main_returns_it_quietly(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A command's own SystemExit keeps its ExitCode and prints no traceback."""
    from dataclasses import replace

    from lib_layered_config import Config

    def invalid_settings() -> Any:
        return replace(
            build_production(),
            get_config=lambda **_kwargs: Config({"mocklight": {"unknown_member": "sometimes"}}, {}),
        )

    exit_code = cli_mod.main(["settings"], services_factory=invalid_settings)

    err = capsys.readouterr().err
    assert exit_code == cli_mod.ExitCode.CONFIG_ERROR
    assert "Error:" in err
    assert "Traceback" not in err
