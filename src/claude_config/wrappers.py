"""Wrapper script generation.

A wrapper sets a few environment variables and then execs another tool with
fixed leading arguments, forwarding every caller argument unchanged. Because
the wrapper replaces itself with the tool, its exit status is the tool's.
"""

import shlex
from dataclasses import dataclass
from pathlib import Path

from claude_config.sources import get_go_skills_plugin_dir


@dataclass(frozen=True)
class WrapperEnv:
    """Environment variable exported by a wrapper.

    home_relative values are joined to $HOME when the wrapper runs, so the
    script stays valid for whichever user invokes it.
    """

    name: str
    value: str
    home_relative: bool = False


@dataclass(frozen=True)
class WrapperSpec:
    """An executable entry point delegating to another tool."""

    name: str
    program: str
    fixed_args: tuple[str, ...] = ()
    env: tuple[WrapperEnv, ...] = ()


def _render_env_value(env: WrapperEnv) -> str:
    if not env.home_relative:
        return shlex.quote(env.value)
    # Double quotes keep $HOME expandable; the rest must not expand.
    escaped = env.value
    for char in ("\\", '"', "$", "`"):
        escaped = escaped.replace(char, "\\" + char)
    return f'"$HOME/{escaped}"'


def render_wrapper_script(spec: WrapperSpec) -> str:
    """Return the bash script body for a wrapper.

    Example:
        >>> print(render_wrapper_script(WrapperSpec(name="ccgo", program="claude",
        ...     fixed_args=("--plugin-dir", "/opt/plugin"))))
        #!/usr/bin/env bash
        # ccgo: generated by claude-config
        exec claude --plugin-dir /opt/plugin "$@"
    """
    lines = ["#!/usr/bin/env bash", f"# {spec.name}: generated by claude-config"]
    for env in spec.env:
        lines.append(f"export {env.name}={_render_env_value(env)}")

    command = " ".join(shlex.quote(part) for part in (spec.program, *spec.fixed_args))
    lines.append(f'exec {command} "$@"')
    return "\n".join(lines) + "\n"


def default_wrappers(go_skills_plugin_dir: Path | None = None) -> tuple[WrapperSpec, ...]:
    """Wrappers installed on PATH by every activation.

    ccgo: Claude Code with the bundled Go skills plugin loaded
    ocgo: OpenCode with the ~/.config/opencode-dev configuration
    """
    plugin_dir = go_skills_plugin_dir or get_go_skills_plugin_dir()
    return (
        WrapperSpec(
            name="ccgo",
            program="claude",
            fixed_args=("--plugin-dir", str(plugin_dir)),
        ),
        WrapperSpec(
            name="ocgo",
            program="opencode",
            env=(
                WrapperEnv(
                    name="OPENCODE_CONFIG", value=".config/opencode-dev", home_relative=True
                ),
            ),
        ),
    )


def find_wrapper(wrappers: tuple[WrapperSpec, ...], name: str) -> WrapperSpec | None:
    for wrapper in wrappers:
        if wrapper.name == name:
            return wrapper
    return None
