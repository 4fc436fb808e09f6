"""Output helpers.

user_output() writes human-facing messages to stderr. machine_output() writes
data meant for pipes and redirection (settings JSON, wrapper scripts) to stdout.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    click.echo(message, err=True, nl=nl)


def machine_output(message: str, *, nl: bool = True) -> None:
    click.echo(message, nl=nl)


def error_output(message: str) -> None:
    user_output(click.style("Error: ", fg="red") + message)
