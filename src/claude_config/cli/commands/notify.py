#!/usr/bin/env python3
"""
Notification Hook

Invoked by Claude Code as `claude-config-notify <event-kind>` (Stop and
Notification hooks in ~/.claude/settings.json), with the hook payload on stdin.
Always exits 0: a failed notification must never block the session.
"""

import sys

import click

from claude_config.context import ClaudeConfigContext, create_context
from claude_config.notify import EventKind, send_notification


def _read_stdin() -> str:
    if sys.stdin is None or sys.stdin.isatty():
        return ""
    # Undecodable bytes become U+FFFD instead of failing the hook
    return sys.stdin.buffer.read().decode("utf-8", errors="replace")


def _run_notify(ctx: ClaudeConfigContext, event_kind: str) -> None:
    send_notification(ctx.notifier, EventKind(event_kind), _read_stdin())


@click.command("notify")
@click.argument("event_kind", type=click.Choice([kind.value for kind in EventKind]))
@click.pass_obj
def notify_cmd(ctx: ClaudeConfigContext, event_kind: str) -> None:
    """Show a desktop notification for a Claude Code hook event."""
    _run_notify(ctx, event_kind)


@click.command("claude-config-notify")
@click.argument("event_kind", type=click.Choice([kind.value for kind in EventKind]))
@click.pass_context
def notify_hook(ctx: click.Context, event_kind: str) -> None:
    """Show a desktop notification for a Claude Code hook event."""
    if ctx.obj is None:
        ctx.obj = create_context(config_path=None, dry_run=False)
    _run_notify(ctx.obj, event_kind)


def main() -> None:
    """Entry point used by the `claude-config-notify` console script."""
    notify_hook()


if __name__ == "__main__":
    main()
