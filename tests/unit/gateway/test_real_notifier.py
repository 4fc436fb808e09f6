"""Tests for the platform notifier command lines."""

import subprocess
from unittest.mock import patch

from claude_config.gateway.notifier.abc import Notification
from claude_config.gateway.notifier.real import RealNotifier, build_notify_command

NOTIFICATION = Notification(title="Claude Code", subtitle="app", message='Say "hi"')


def test_macos_uses_osascript_with_escaped_strings() -> None:
    cmd = build_notify_command("Darwin", NOTIFICATION)

    assert cmd == [
        "osascript",
        "-e",
        'display notification "Say \\"hi\\"" with title "Claude Code" subtitle "app"',
    ]


def test_linux_uses_notify_send() -> None:
    cmd = build_notify_command("Linux", NOTIFICATION)

    assert cmd == ["notify-send", "--app-name=Claude Code", "Claude Code: app", 'Say "hi"']


def test_linux_without_subtitle() -> None:
    cmd = build_notify_command(
        "Linux", Notification(title="Claude Code", subtitle="", message="done")
    )

    assert cmd == ["notify-send", "--app-name=Claude Code", "Claude Code", "done"]


def test_unsupported_system_has_no_command() -> None:
    assert build_notify_command("Windows", NOTIFICATION) is None


def test_real_notifier_runs_command() -> None:
    with patch("claude_config.gateway.notifier.real.subprocess.run") as run:
        RealNotifier("Linux").send(NOTIFICATION)

    run.assert_called_once()
    assert run.call_args.args[0][0] == "notify-send"
    assert run.call_args.kwargs["check"] is True


def test_real_notifier_skips_unsupported_system() -> None:
    with patch("claude_config.gateway.notifier.real.subprocess.run") as run:
        RealNotifier("Windows").send(NOTIFICATION)

    run.assert_not_called()


def test_real_notifier_propagates_failures() -> None:
    error = subprocess.CalledProcessError(1, ["notify-send"])
    with patch("claude_config.gateway.notifier.real.subprocess.run", side_effect=error):
        try:
            RealNotifier("Linux").send(NOTIFICATION)
        except subprocess.CalledProcessError as e:
            assert e is error
        else:
            raise AssertionError("expected CalledProcessError")
