"""Real Notifier using the platform's notification command.

macOS: osascript `display notification`
Linux: notify-send
"""

import subprocess

from claude_config.gateway.notifier.abc import Notification, Notifier


def _applescript_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_notify_command(system: str, notification: Notification) -> list[str] | None:
    """Build the command line that shows notification on system.

    Returns:
        argv list, or None when the system has no supported notifier
    """
    if system == "Darwin":
        script = (
            f"display notification {_applescript_string(notification.message)}"
            f" with title {_applescript_string(notification.title)}"
            f" subtitle {_applescript_string(notification.subtitle)}"
        )
        return ["osascript", "-e", script]
    if system == "Linux":
        summary = notification.title
        if notification.subtitle:
            summary = f"{notification.title}: {notification.subtitle}"
        return ["notify-send", "--app-name=Claude Code", summary, notification.message]
    return None


class RealNotifier(Notifier):
    """Production implementation shelling out to the platform notifier."""

    def __init__(self, system: str) -> None:
        self._system = system

    def send(self, notification: Notification) -> None:
        cmd = build_notify_command(self._system, notification)
        if cmd is None:
            return
        subprocess.run(cmd, check=True, capture_output=True, text=True, timeout=10)
