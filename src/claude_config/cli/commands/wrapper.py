"""Wrapper command - print a generated wrapper script."""

import click

from claude_config.output import error_output, machine_output
from claude_config.wrappers import default_wrappers, find_wrapper, render_wrapper_script


@click.command("wrapper")
@click.argument("name")
def wrapper_cmd(name: str) -> None:
    """Print the script installed as ~/.local/bin/NAME."""
    wrappers = default_wrappers()
    spec = find_wrapper(wrappers, name)
    if spec is None:
        known = ", ".join(wrapper.name for wrapper in wrappers)
        error_output(f"Unknown wrapper '{name}' (known: {known})")
        raise SystemExit(1)
    machine_output(render_wrapper_script(spec), nl=False)
