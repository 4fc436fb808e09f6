"""Home directory file operations gateway ABC.

Activation applies the artifact mapping exclusively through this gateway so
tests use FakeHomeFiles and --dry-run uses DryRunHomeFiles. All paths are
absolute.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class HomeFiles(ABC):
    """Abstract gateway for placing files under the home directory."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether a file, directory or symlink exists at path.

        Dangling symlinks count as existing so they can be replaced or removed.
        """
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str | None:
        """Read a text file.

        Returns:
            File content, or None if the file doesn't exist
        """
        ...

    @abstractmethod
    def list_tree_files(self, source: Path) -> list[Path]:
        """List files under a source directory.

        Args:
            source: Directory to walk

        Returns:
            Sorted paths relative to source, files only
        """
        ...

    @abstractmethod
    def write_file(self, path: Path, content: str, *, executable: bool) -> None:
        """Write content to path, replacing any file or symlink already there.

        Creates parent directories as needed.

        Args:
            path: Destination path
            content: File content
            executable: Whether to mark the file executable (0755)
        """
        ...

    @abstractmethod
    def link_file(self, path: Path, source: Path) -> None:
        """Create a symlink at path pointing to source.

        Replaces any file or symlink already at path. Creates parent
        directories as needed.
        """
        ...

    @abstractmethod
    def remove(self, path: Path) -> None:
        """Remove a file or symlink. No-op if nothing exists at path."""
        ...

    @abstractmethod
    def read_link(self, path: Path) -> Path | None:
        """Return the target of the symlink at path, or None if path is not a symlink."""
        ...

    @abstractmethod
    def prune_empty_dirs(self, path: Path, *, stop: Path) -> None:
        """Remove path's parent directories while they are empty.

        Walks upwards from path.parent and stops at the first non-empty
        directory or at stop, which is never removed.
        """
        ...
