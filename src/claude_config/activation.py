"""Apply an artifact mapping to the home directory."""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from claude_config.gateway.home_files.abc import HomeFiles
from claude_config.projection import (
    ArtifactMapping,
    FileSource,
    InlineSource,
    TreeSource,
    check_unique_destinations,
)
from claude_config.sources import MissingSourceError
from claude_config.state import (
    ActivationState,
    load_activation_state,
    save_activation_state,
)

logger = logging.getLogger(__name__)


class UnmanagedFileError(Exception):
    """Destinations are occupied by files claude-config did not place."""

    def __init__(self, conflicts: list[Path]) -> None:
        self.conflicts = conflicts
        listed = "\n".join(f"  {path}" for path in conflicts)
        super().__init__(f"Existing files are in the way (move them aside):\n{listed}")


@dataclass(frozen=True)
class ActivationResult:
    """Result of applying a mapping."""

    files_written: int
    files_linked: int
    files_removed: int
    managed: tuple[PurePosixPath, ...]


@dataclass(frozen=True)
class _Placement:
    destination: PurePosixPath
    link_source: Path | None = None
    content: str = ""
    executable: bool = False


def ensure_sources_exist(mappings: tuple[ArtifactMapping, ...], home_files: HomeFiles) -> None:
    """Verify every static source is present before anything is written.

    Raises:
        MissingSourceError: Listing every absent source
    """
    missing: list[Path] = []
    for mapping in mappings:
        source = mapping.source
        if isinstance(source, (FileSource, TreeSource)) and not home_files.exists(source.path):
            missing.append(source.path)
    if missing:
        raise MissingSourceError(missing)


def _plan_placements(
    mappings: tuple[ArtifactMapping, ...], home_files: HomeFiles
) -> list[_Placement]:
    placements: list[_Placement] = []
    for mapping in mappings:
        source = mapping.source
        if isinstance(source, InlineSource):
            placements.append(
                _Placement(
                    mapping.destination, content=source.content, executable=source.executable
                )
            )
        elif isinstance(source, FileSource):
            placements.append(_Placement(mapping.destination, link_source=source.path))
        else:
            for relative in home_files.list_tree_files(source.path):
                placements.append(
                    _Placement(
                        mapping.destination / PurePosixPath(relative.as_posix()),
                        link_source=source.path / relative,
                    )
                )
    return placements


def _ensure_no_unmanaged_files(
    placements: list[_Placement],
    previous: ActivationState | None,
    *,
    home: Path,
    home_files: HomeFiles,
) -> None:
    """Refuse to replace files that the last activation did not place.

    A destination that already links to its source is left alone, so
    adopting an existing setup only conflicts on files with other content.

    Raises:
        UnmanagedFileError: Listing every occupied destination
    """
    managed = set(previous.managed) if previous is not None else set()
    conflicts: list[Path] = []
    for placement in placements:
        if placement.destination in managed:
            continue
        target = home / placement.destination
        if not home_files.exists(target):
            continue
        if placement.link_source is not None and (
            home_files.read_link(target) == placement.link_source
        ):
            continue
        conflicts.append(target)
    if conflicts:
        raise UnmanagedFileError(conflicts)


def activate(
    mappings: tuple[ArtifactMapping, ...],
    *,
    home: Path,
    home_files: HomeFiles,
) -> ActivationResult:
    """Place every mapped artifact under home and clean up stale ones.

    Validation (unique destinations, sources present, no foreign files in
    the way) completes before the first write, so a failing activation
    leaves the home directory untouched. Trees are linked file by file,
    leaving the destination directories real so other tools can add files
    next to ours.

    Args:
        mappings: Artifact mapping from project_artifacts()
        home: Home directory destinations are relative to
        home_files: Gateway performing the filesystem operations

    Returns:
        ActivationResult with counts and the managed paths recorded in state

    Raises:
        DuplicateDestinationError: If two entries share a destination
        MissingSourceError: If a static source is absent
        StateFileError: If state.toml from the last activation is malformed
        UnmanagedFileError: If a destination holds a file not placed by us
    """
    check_unique_destinations(mappings)
    ensure_sources_exist(mappings, home_files)

    previous = load_activation_state(home, home_files)
    placements = _plan_placements(mappings, home_files)
    _ensure_no_unmanaged_files(placements, previous, home=home, home_files=home_files)

    written = 0
    linked = 0
    for placement in placements:
        target = home / placement.destination
        if placement.link_source is None:
            home_files.write_file(target, placement.content, executable=placement.executable)
            written += 1
        else:
            home_files.link_file(target, placement.link_source)
            linked += 1
    managed = tuple(placement.destination for placement in placements)

    removed = 0
    if previous is not None:
        current = set(managed)
        for stale in previous.managed:
            if stale in current:
                continue
            stale_path = home / stale
            if home_files.exists(stale_path):
                logger.debug("removing stale artifact %s", stale)
                home_files.remove(stale_path)
                home_files.prune_empty_dirs(stale_path, stop=home)
                removed += 1

    save_activation_state(home, home_files, ActivationState(managed=managed))

    return ActivationResult(
        files_written=written,
        files_linked=linked,
        files_removed=removed,
        managed=managed,
    )
