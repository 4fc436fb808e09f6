"""Static content shipped with claude-config and vendored from upstream repos."""

from dataclasses import dataclass
from functools import cache
from pathlib import Path


class MissingSourceError(Exception):
    """A static file or tree referenced by the projection is absent.

    Vendored trees are fetched outside claude-config, so there is nothing to
    retry; the activation is aborted before any write.
    """

    def __init__(self, missing: list[Path]) -> None:
        self.missing = missing
        listed = "\n".join(f"  {path}" for path in missing)
        super().__init__(f"Missing source content:\n{listed}")


@cache
def get_bundled_data_dir() -> Path:
    """Get path to the data/ directory bundled in the claude_config package."""
    # __file__ is .../claude_config/sources.py
    return Path(__file__).parent / "data"


def get_reflect_command_path() -> Path:
    return get_bundled_data_dir() / "commands" / "reflect.md"


def get_go_skills_plugin_dir() -> Path:
    """Plugin directory loaded by the ccgo wrapper."""
    return get_bundled_data_dir() / "go-skills-plugin"


def get_go_skills_dir() -> Path:
    return get_go_skills_plugin_dir() / "skills"


@dataclass(frozen=True)
class VendorSources:
    """Checkouts of upstream repositories providing skills and agents.

    anthropic_skills: checkout of github.com/anthropics/skills
    claude_plugins_official: checkout of github.com/anthropics/claude-plugins-official
    """

    anthropic_skills: Path
    claude_plugins_official: Path

    @property
    def skill_creator_dir(self) -> Path:
        return self.anthropic_skills / "skills" / "skill-creator"

    @property
    def code_simplifier_agent(self) -> Path:
        return (
            self.claude_plugins_official
            / "plugins"
            / "code-simplifier"
            / "agents"
            / "code-simplifier.md"
        )


def default_vendor_sources(home: Path) -> VendorSources:
    """Default checkout locations under ~/.local/share/claude-config/vendor/."""
    vendor_dir = home / ".local" / "share" / "claude-config" / "vendor"
    return VendorSources(
        anthropic_skills=vendor_dir / "anthropic-skills",
        claude_plugins_official=vendor_dir / "claude-plugins-official",
    )
