import logging
from pathlib import Path

import click

from claude_config.cli.commands.activate import activate_cmd
from claude_config.cli.commands.notify import notify_cmd
from claude_config.cli.commands.plan import plan_cmd
from claude_config.cli.commands.settings import settings_cmd
from claude_config.cli.commands.wrapper import wrapper_cmd
from claude_config.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="claude-config")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="CLAUDE_CONFIG_FILE",
    help="Path to config.toml (default: ~/.config/claude-config/config.toml)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_path: Path | None) -> None:
    """Materialize Claude Code settings, commands and skills into the home directory."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(config_path=config_path, dry_run=False)


cli.add_command(activate_cmd)
cli.add_command(notify_cmd)
cli.add_command(plan_cmd)
cli.add_command(settings_cmd)
cli.add_command(wrapper_cmd)


def main() -> None:
    """CLI entry point used by the `claude-config` console script."""
    cli()
