"""Plan command - show the artifact mapping without applying it."""

import click
from rich.console import Console
from rich.table import Table

from claude_config.cli.ensure import materialize_or_exit
from claude_config.context import ClaudeConfigContext
from claude_config.output import user_output
from claude_config.projection import describe_source

KIND_STYLES = {
    "generated": "[green]generated[/green]",
    "script": "[green]script[/green]",
    "file": "[cyan]file[/cyan]",
    "tree": "[yellow]tree[/yellow]",
}


@click.command("plan")
@click.pass_obj
def plan_cmd(ctx: ClaudeConfigContext) -> None:
    """Show where each artifact would be placed under the home directory."""
    result = materialize_or_exit(ctx)
    if not result.mappings:
        user_output("No artifacts: claude-config is disabled.")
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Destination", style="cyan", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Source")

    for mapping in result.mappings:
        kind, description = describe_source(mapping.source)
        table.add_row(f"~/{mapping.destination}", KIND_STYLES[kind], description)

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True, width=200)
    console.print(table)
