"""Settings command - print the rendered settings.json."""

import click

from claude_config.cli.ensure import materialize_or_exit
from claude_config.context import ClaudeConfigContext
from claude_config.output import machine_output


@click.command("settings")
@click.pass_obj
def settings_cmd(ctx: ClaudeConfigContext) -> None:
    """Print the settings.json an activation would write."""
    result = materialize_or_exit(ctx)
    machine_output(result.settings_json, nl=False)
