"""Option resolution: merge the baseline with user overrides.

Pure functions only. The resolved ConfigurationRecord is the single input to
settings rendering and filesystem projection.
"""

import platform
from dataclasses import dataclass
from typing import Final

# Permissions allowed by default in ~/.claude/settings.json
DEFAULT_PERMISSIONS: Final[tuple[str, ...]] = (
    "Bash",
    "Read",
    "Grep",
    "Glob",
    "LS",
    "WebFetch",
    "WebSearch",
    "Task",
    "ExitPlanMode",
    "TodoWrite",
    "BashOutput",
    "KillBash",
    "WebFetch(domain:docs.anthropic.com)",
    "mcp__*",
)

# Systems with a desktop notifier backend (see gateway/notifier/real.py)
NOTIFICATION_SYSTEMS: Final[frozenset[str]] = frozenset({"Darwin", "Linux"})


@dataclass(frozen=True)
class ConfigOptions:
    """Declarative options as the user writes them in config.toml."""

    enable: bool = False
    extra_permissions: tuple[str, ...] = ()


@dataclass(frozen=True)
class HostPlatform:
    """The host the activation runs on."""

    system: str

    @property
    def supports_notifications(self) -> bool:
        return self.system in NOTIFICATION_SYSTEMS


def detect_host_platform() -> HostPlatform:
    """Detect the host platform from the running interpreter."""
    return HostPlatform(system=platform.system())


@dataclass(frozen=True)
class ConfigurationRecord:
    """Resolved options for one activation.

    Fully determined before artifact generation begins and never mutated.
    """

    enabled: bool
    permissions: tuple[str, ...]
    notifications_enabled: bool


def resolve_options(
    options: ConfigOptions,
    *,
    baseline: tuple[str, ...],
    host: HostPlatform,
) -> ConfigurationRecord:
    """Merge baseline permissions with user overrides.

    Resolution is total: any sequence of strings is accepted, including
    duplicates and strings already present in the baseline. Permission
    syntax is not validated.

    Args:
        options: User-supplied declarative options
        baseline: Fixed permission list, normally DEFAULT_PERMISSIONS
        host: Platform the activation runs on

    Returns:
        ConfigurationRecord with permissions equal to baseline + extras
    """
    return ConfigurationRecord(
        enabled=options.enable,
        permissions=tuple(baseline) + tuple(options.extra_permissions),
        notifications_enabled=host.supports_notifications,
    )
