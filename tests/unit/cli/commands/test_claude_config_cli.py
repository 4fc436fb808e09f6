"""Tests for claude-config CLI commands."""

import json
from pathlib import Path

from click.testing import CliRunner

import claude_config
from claude_config.cli import cli as cli_module
from claude_config.cli.cli import cli
from claude_config.cli.commands.notify import notify_hook
from claude_config.gateway.notifier.fake import FakeNotifier
from claude_config.options import DEFAULT_PERMISSIONS
from claude_config.state import get_state_path
from tests.test_utils.context_builders import FAKE_HOME, build_cli_context, config_toml


def _write_config(tmp_path: Path, content: str) -> Path:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(content, encoding="utf-8")
    return cfg_path


def test_settings_prints_rendered_json(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, config_toml(enable=True, extra_permissions=["Edit"]))
    ctx, _ = build_cli_context(config_path=cfg_path)

    result = cli_runner.invoke(cli, ["settings"], obj=ctx)

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["permissions"]["allow"] == [*DEFAULT_PERMISSIONS, "Edit"]
    assert "hooks" not in data


def test_settings_include_hooks_on_macos(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, config_toml(enable=True))
    ctx, _ = build_cli_context(config_path=cfg_path, system="Darwin")

    result = cli_runner.invoke(cli, ["settings"], obj=ctx)

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    stop_command = data["hooks"]["Stop"][0]["hooks"][0]["command"]
    assert stop_command == "/opt/bin/claude-config-notify completion"


def test_invalid_config_exits_with_error(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, 'enable = "yes"\n')
    ctx, home_files = build_cli_context(config_path=cfg_path)

    result = cli_runner.invoke(cli, ["activate"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "'enable' must be a bool" in result.output
    assert home_files.written_files == {}


def test_activate_writes_artifacts(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, config_toml(enable=True))
    ctx, home_files = build_cli_context(config_path=cfg_path)

    result = cli_runner.invoke(cli, ["activate"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Activated: 3 written, 5 linked, 0 removed" in result.output
    assert (FAKE_HOME / ".claude" / "settings.json") in home_files.written_files


def test_activate_dry_run_writes_nothing(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, config_toml(enable=True))
    ctx, home_files = build_cli_context(config_path=cfg_path)

    result = cli_runner.invoke(cli, ["activate", "--dry-run"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would write" in result.output
    assert "[DRY RUN] Activated" in result.output
    assert home_files.written_files == {}
    assert home_files.linked_files == {}


def test_activate_disabled_reports_and_declares_nothing(
    cli_runner: CliRunner, tmp_path: Path
) -> None:
    cfg_path = _write_config(tmp_path, config_toml(enable=False))
    ctx, home_files = build_cli_context(config_path=cfg_path)

    result = cli_runner.invoke(cli, ["activate"], obj=ctx)

    assert result.exit_code == 0
    assert "claude-config is disabled" in result.output
    assert "Activated: 0 written, 0 linked, 0 removed" in result.output
    assert home_files.linked_files == {}


def test_activate_missing_vendor_tree_fails(cli_runner: CliRunner, tmp_path: Path) -> None:
    missing = tmp_path / "nowhere"
    content = (
        "enable = true\n[sources]\n"
        f'anthropic_skills = "{missing}"\n'
        f'claude_plugins_official = "{missing}"\n'
    )
    cfg_path = _write_config(tmp_path, content)
    ctx, home_files = build_cli_context(config_path=cfg_path)

    result = cli_runner.invoke(cli, ["activate"], obj=ctx)

    assert result.exit_code == 1
    assert "Missing source content" in result.output
    assert str(missing / "skills" / "skill-creator") in result.output
    assert home_files.written_files == {}


def test_plan_lists_destinations(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, config_toml(enable=True))
    ctx, _ = build_cli_context(config_path=cfg_path)

    result = cli_runner.invoke(cli, ["plan"], obj=ctx)

    assert result.exit_code == 0
    assert "~/.claude/settings.json" in result.output
    assert "~/.local/bin/ocgo" in result.output


def test_plan_when_disabled(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, config_toml(enable=False))
    ctx, _ = build_cli_context(config_path=cfg_path)

    result = cli_runner.invoke(cli, ["plan"], obj=ctx)

    assert result.exit_code == 0
    assert "No artifacts" in result.output


def test_wrapper_prints_script(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["wrapper", "ocgo"], obj=object())

    assert result.exit_code == 0
    assert result.stdout.startswith("#!/usr/bin/env bash\n")
    assert 'exec opencode "$@"' in result.stdout


def test_wrapper_unknown_name(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["wrapper", "nope"], obj=object())

    assert result.exit_code == 1
    assert "Unknown wrapper 'nope' (known: ccgo, ocgo)" in result.output


def test_notify_sends_notification(cli_runner: CliRunner, tmp_path: Path) -> None:
    notifier = FakeNotifier()
    ctx, _ = build_cli_context(config_path=tmp_path / "config.toml", notifier=notifier)
    payload = json.dumps({"cwd": "/src/app", "message": "Claude needs your permission"})

    result = cli_runner.invoke(cli, ["notify", "needs-attention"], obj=ctx, input=payload)

    assert result.exit_code == 0
    assert notifier.sent[0].subtitle == "app"
    assert notifier.sent[0].message == "Claude needs your permission"


def test_notify_failure_still_exits_zero(cli_runner: CliRunner, tmp_path: Path) -> None:
    notifier = FakeNotifier(send_error=FileNotFoundError("osascript"))
    ctx, _ = build_cli_context(config_path=tmp_path / "config.toml", notifier=notifier)

    result = cli_runner.invoke(notify_hook, ["completion"], obj=ctx, input="not json")

    assert result.exit_code == 0


def test_notify_rejects_unknown_event_kind(cli_runner: CliRunner, tmp_path: Path) -> None:
    ctx, _ = build_cli_context(config_path=tmp_path / "config.toml")

    result = cli_runner.invoke(cli, ["notify", "bogus"], obj=ctx)

    assert result.exit_code == 2


def test_notify_tolerates_undecodable_stdin(cli_runner: CliRunner, tmp_path: Path) -> None:
    notifier = FakeNotifier()
    ctx, _ = build_cli_context(config_path=tmp_path / "config.toml", notifier=notifier)

    result = cli_runner.invoke(notify_hook, ["completion"], obj=ctx, input=b"\xff\xfe{")

    assert result.exit_code == 0, result.output
    assert notifier.sent[0].message == "Claude finished responding"


def test_activate_reports_corrupt_state_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, config_toml(enable=True))
    state_path = get_state_path(FAKE_HOME)
    ctx, home_files = build_cli_context(
        config_path=cfg_path, extra_files={state_path: "not = [toml\n"}
    )

    result = cli_runner.invoke(cli, ["activate"], obj=ctx)

    assert result.exit_code == 1
    assert f"Error: {state_path}: invalid state file" in result.output
    assert home_files.written_files == {}


def test_activate_refuses_to_replace_user_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, config_toml(enable=True))
    settings_path = FAKE_HOME / ".claude" / "settings.json"
    ctx, home_files = build_cli_context(
        config_path=cfg_path, extra_files={settings_path: '{"model": "mine"}\n'}
    )

    result = cli_runner.invoke(cli, ["activate"], obj=ctx)

    assert result.exit_code == 1
    assert "Existing files are in the way" in result.output
    assert str(settings_path) in result.output
    assert home_files.written_files == {}
    assert home_files.read_text(settings_path) == '{"model": "mine"}\n'


def test_console_script_entry_point_is_defined_once() -> None:
    assert callable(cli_module.main)
    assert not hasattr(claude_config, "main")
