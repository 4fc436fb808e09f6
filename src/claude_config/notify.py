"""Notification hook: turn a Claude Code hook payload into a desktop notification.

Claude Code pipes one JSON object to the hook on stdin, e.g. for the
Notification event:

    {"session_id": "...", "cwd": "/home/me/src/app",
     "hook_event_name": "Notification",
     "message": "Claude needs your permission to use Bash"}

Notifications are best-effort: a malformed payload degrades to default text
and a failing notifier never fails the hook.
"""

import json
import logging
import subprocess
from enum import Enum
from pathlib import PurePath
from typing import Any, Final

from claude_config.gateway.notifier.abc import Notification, Notifier

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH: Final = 120
TITLE: Final = "Claude Code"
COMPLETION_MESSAGE: Final = "Claude finished responding"
NEEDS_ATTENTION_MESSAGE: Final = "Claude needs your attention"


class EventKind(str, Enum):
    COMPLETION = "completion"
    NEEDS_ATTENTION = "needs-attention"


def parse_payload(text: str) -> dict[str, Any]:
    """Parse the hook payload. Anything but a JSON object yields {}."""
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        logger.debug("ignoring malformed hook payload")
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


def _string_field(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if isinstance(value, str):
        return value
    return ""


def project_name(payload: dict[str, Any]) -> str:
    cwd = _string_field(payload, "cwd")
    if not cwd:
        return ""
    return PurePath(cwd).name


def build_notification(kind: EventKind, payload: dict[str, Any]) -> Notification:
    """Word the notification for an event kind."""
    if kind is EventKind.NEEDS_ATTENTION:
        message = _string_field(payload, "message") or NEEDS_ATTENTION_MESSAGE
    else:
        message = COMPLETION_MESSAGE

    return Notification(
        title=TITLE,
        subtitle=project_name(payload),
        message=truncate(" ".join(message.split()), MAX_MESSAGE_LENGTH),
    )


def send_notification(notifier: Notifier, kind: EventKind, payload_text: str) -> bool:
    """Show the notification for a hook invocation.

    Returns:
        True if the notifier accepted the notification, False if it failed
    """
    notification = build_notification(kind, parse_payload(payload_text))
    try:
        notifier.send(notification)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("notification failed: %s", e)
        return False
    return True
