"""Activate command - write the configuration into the home directory."""

import click

from claude_config.activation import UnmanagedFileError, activate
from claude_config.cli.ensure import materialize_or_exit
from claude_config.context import ClaudeConfigContext
from claude_config.output import error_output, user_output
from claude_config.projection import DuplicateDestinationError
from claude_config.sources import MissingSourceError
from claude_config.state import StateFileError


@click.command("activate")
@click.option("--dry-run", is_flag=True, help="Print what would change without writing")
@click.pass_obj
def activate_cmd(ctx: ClaudeConfigContext, dry_run: bool) -> None:
    """Write settings, commands, skills and wrappers into the home directory.

    Files placed by a previous activation that are no longer declared are
    removed, so disabling the configuration cleans up after itself.
    """
    if dry_run:
        ctx = ctx.with_dry_run()

    result = materialize_or_exit(ctx)
    if not result.record.enabled:
        user_output("claude-config is disabled (set enable = true in config.toml)")

    try:
        activation = activate(result.mappings, home=ctx.home, home_files=ctx.home_files)
    except (
        DuplicateDestinationError,
        MissingSourceError,
        StateFileError,
        UnmanagedFileError,
    ) as e:
        error_output(str(e))
        raise SystemExit(1) from None

    prefix = "[DRY RUN] " if ctx.dry_run else ""
    user_output(
        f"{prefix}Activated: {activation.files_written} written, "
        f"{activation.files_linked} linked, {activation.files_removed} removed"
    )
