"""Load declarative options from config.toml.

Example config:
  enable = true
  extra_permissions = ["Edit", "Write"]

  # Optional: command wired into the notification hooks
  # notify_command = "/usr/local/bin/claude-config-notify"

  [sources]
  anthropic_skills = "~/src/anthropics/skills"
  claude_plugins_official = "~/src/anthropics/claude-plugins-official"
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from claude_config.options import ConfigOptions
from claude_config.sources import VendorSources, default_vendor_sources


class ConfigError(Exception):
    """config.toml is unreadable or has a value of the wrong type."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of config.toml."""

    options: ConfigOptions
    notify_command: str | None
    sources: VendorSources


def get_default_config_path(home: Path) -> Path:
    return home / ".config" / "claude-config" / "config.toml"


def _expand_path(value: str, home: Path) -> Path:
    if value == "~":
        return home
    if value.startswith("~/"):
        return home / value[2:]
    return Path(value)


def _require_type(path: Path, key: str, value: Any, expected: type) -> Any:
    if not isinstance(value, expected):
        raise ConfigError(
            path, f"'{key}' must be a {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _parse_extra_permissions(path: Path, value: Any) -> tuple[str, ...]:
    _require_type(path, "extra_permissions", value, list)
    for index, item in enumerate(value):
        _require_type(path, f"extra_permissions[{index}]", item, str)
    return tuple(value)


def parse_config(path: Path, data: dict[str, Any], *, home: Path) -> LoadedConfig:
    """Build a LoadedConfig from parsed TOML data.

    Raises:
        ConfigError: If any known key has a value of the wrong type
    """
    enable = _require_type(path, "enable", data.get("enable", False), bool)
    extra_permissions = _parse_extra_permissions(path, data.get("extra_permissions", []))

    notify_command = data.get("notify_command")
    if notify_command is not None:
        _require_type(path, "notify_command", notify_command, str)

    defaults = default_vendor_sources(home)
    sources_data = _require_type(path, "sources", data.get("sources", {}), dict)
    anthropic_skills = defaults.anthropic_skills
    if "anthropic_skills" in sources_data:
        value = _require_type(
            path, "sources.anthropic_skills", sources_data["anthropic_skills"], str
        )
        anthropic_skills = _expand_path(value, home)
    plugins_official = defaults.claude_plugins_official
    if "claude_plugins_official" in sources_data:
        value = _require_type(
            path,
            "sources.claude_plugins_official",
            sources_data["claude_plugins_official"],
            str,
        )
        plugins_official = _expand_path(value, home)

    return LoadedConfig(
        options=ConfigOptions(enable=enable, extra_permissions=extra_permissions),
        notify_command=notify_command,
        sources=VendorSources(
            anthropic_skills=anthropic_skills,
            claude_plugins_official=plugins_official,
        ),
    )


def load_config(path: Path, *, home: Path) -> LoadedConfig:
    """Load config.toml if present; otherwise return defaults (disabled).

    Raises:
        ConfigError: If the file is not valid TOML or has wrongly typed values
    """
    if not path.exists():
        return parse_config(path, {}, home=home)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, f"invalid TOML: {e}") from e
    return parse_config(path, data, home=home)
