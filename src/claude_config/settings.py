"""Render ~/.claude/settings.json from a ConfigurationRecord."""

import json
import shutil
import sys
from pathlib import Path
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, Field

from claude_config.options import ConfigurationRecord

NOTIFY_SCRIPT_NAME: Final = "claude-config-notify"

# Claude Code lifecycle event -> notification event kind passed to the hook
HOOK_EVENT_KINDS: Final[dict[str, str]] = {
    "Stop": "completion",
    "Notification": "needs-attention",
}


class HookCommand(BaseModel):
    """A single command hook in settings.json."""

    model_config = ConfigDict(frozen=True)

    type: Literal["command"] = "command"
    command: str = Field(..., min_length=1)


class HookMatcherGroup(BaseModel):
    """Groups hooks under one lifecycle event entry."""

    model_config = ConfigDict(frozen=True)

    hooks: list[HookCommand]


class Permissions(BaseModel):
    model_config = ConfigDict(frozen=True)

    allow: list[str]


class Attribution(BaseModel):
    """Empty strings disable Claude attribution in git commits and PRs."""

    model_config = ConfigDict(frozen=True)

    commit: str = ""
    pr: str = ""


class ClaudeSettings(BaseModel):
    """Top-level settings.json structure.

    hooks is None when the platform has no notifier. It then serializes as an
    absent key, which Claude Code treats differently from an empty mapping.
    """

    model_config = ConfigDict(frozen=True)

    permissions: Permissions
    attribution: Attribution = Field(default_factory=Attribution)
    hooks: dict[str, list[HookMatcherGroup]] | None = None


def build_notification_hooks(notify_command: str) -> dict[str, list[HookMatcherGroup]]:
    """Wire each lifecycle event to the notify command with its event kind."""
    return {
        event: [HookMatcherGroup(hooks=[HookCommand(command=f"{notify_command} {kind}")])]
        for event, kind in HOOK_EVENT_KINDS.items()
    }


def render_settings(record: ConfigurationRecord, *, notify_command: str | None) -> ClaudeSettings:
    """Produce the settings document for a resolved configuration.

    Args:
        record: Resolved configuration
        notify_command: Resolved notifier command. Only used when the record
            has notifications enabled; required in that case.

    Returns:
        ClaudeSettings with hooks present only when notifications are enabled
    """
    hooks = None
    if record.notifications_enabled:
        if notify_command is None:
            raise ValueError("notify_command is required when notifications are enabled")
        hooks = build_notification_hooks(notify_command)

    return ClaudeSettings(
        permissions=Permissions(allow=list(record.permissions)),
        hooks=hooks,
    )


def serialize_settings(settings: ClaudeSettings) -> str:
    """Serialize settings with stable key ordering for reproducible output."""
    data = settings.model_dump(mode="json", exclude_none=True)
    return json.dumps(data, indent=2, sort_keys=True) + "\n"


def resolve_notify_command(override: str | None) -> str:
    """Resolve the command the notification hooks invoke.

    Order: explicit override from config.toml, the console script on PATH,
    then the console script installed beside the running interpreter.
    """
    if override is not None:
        return override

    found = shutil.which(NOTIFY_SCRIPT_NAME)
    if found is not None:
        return found

    return str(Path(sys.executable).parent / NOTIFY_SCRIPT_NAME)
