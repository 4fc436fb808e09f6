"""Filesystem projection: map generated and static artifacts to home paths.

This module only assembles the mapping table. Writing files and creating
symlinks happens in claude_config.activation through the HomeFiles gateway.
"""

from collections import Counter
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from claude_config.options import ConfigurationRecord
from claude_config.sources import (
    VendorSources,
    get_go_skills_dir,
    get_reflect_command_path,
)
from claude_config.wrappers import WrapperSpec, render_wrapper_script

SETTINGS_DESTINATION = PurePosixPath(".claude/settings.json")
WRAPPER_BIN_DIR = PurePosixPath(".local/bin")


@dataclass(frozen=True)
class InlineSource:
    """Content rendered during the activation."""

    content: str
    executable: bool = False


@dataclass(frozen=True)
class FileSource:
    """A single static file, linked into place."""

    path: Path


@dataclass(frozen=True)
class TreeSource:
    """A static directory, linked into place file by file."""

    path: Path


ArtifactSource = InlineSource | FileSource | TreeSource


@dataclass(frozen=True)
class ArtifactMapping:
    """One destination (relative to the home directory) and its source."""

    destination: PurePosixPath
    source: ArtifactSource


class DuplicateDestinationError(Exception):
    """Two or more mapping entries target the same destination path."""

    def __init__(self, duplicates: list[PurePosixPath]) -> None:
        self.duplicates = duplicates
        listed = ", ".join(str(path) for path in duplicates)
        super().__init__(f"Multiple artifacts target the same destination: {listed}")


def check_unique_destinations(mappings: tuple[ArtifactMapping, ...]) -> None:
    """Reject mappings where any destination appears more than once.

    Raises:
        DuplicateDestinationError: Naming every conflicting destination
    """
    counts = Counter(mapping.destination for mapping in mappings)
    duplicates = [path for path, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateDestinationError(sorted(duplicates))


def wrapper_destination(wrapper: WrapperSpec) -> PurePosixPath:
    return WRAPPER_BIN_DIR / wrapper.name


def project_artifacts(
    record: ConfigurationRecord,
    *,
    settings_json: str,
    wrappers: tuple[WrapperSpec, ...],
    sources: VendorSources,
) -> tuple[ArtifactMapping, ...]:
    """Assemble the artifact mapping for one activation.

    Args:
        record: Resolved configuration
        settings_json: Serialized settings document
        wrappers: Wrapper scripts to place on PATH
        sources: Vendored upstream checkouts

    Returns:
        Ordered mapping table, empty when the configuration is disabled

    Raises:
        DuplicateDestinationError: If two entries share a destination
    """
    if not record.enabled:
        return ()

    mappings: list[ArtifactMapping] = [
        ArtifactMapping(SETTINGS_DESTINATION, InlineSource(settings_json)),
        ArtifactMapping(
            PurePosixPath(".claude/commands/reflect.md"),
            FileSource(get_reflect_command_path()),
        ),
        ArtifactMapping(
            PurePosixPath(".claude/skills/skill-creator"),
            TreeSource(sources.skill_creator_dir),
        ),
        ArtifactMapping(
            PurePosixPath(".config/opencode-dev/skill"),
            TreeSource(get_go_skills_dir()),
        ),
        ArtifactMapping(
            PurePosixPath(".claude/agents/code-simplifier.md"),
            FileSource(sources.code_simplifier_agent),
        ),
    ]
    for wrapper in wrappers:
        mappings.append(
            ArtifactMapping(
                wrapper_destination(wrapper),
                InlineSource(render_wrapper_script(wrapper), executable=True),
            )
        )

    result = tuple(mappings)
    check_unique_destinations(result)
    return result


def describe_source(source: ArtifactSource) -> tuple[str, str]:
    """Return (kind, description) for display."""
    if isinstance(source, InlineSource):
        kind = "script" if source.executable else "generated"
        return kind, f"{len(source.content)} bytes"
    if isinstance(source, FileSource):
        return "file", str(source.path)
    return "tree", str(source.path)
