"""Fake HomeFiles implementation for testing.

FakeHomeFiles is an in-memory implementation. Source trees are seeded via the
constructor; writes, links and removals are tracked for assertions.
"""

from pathlib import Path

from claude_config.gateway.home_files.abc import HomeFiles


class FakeHomeFiles(HomeFiles):
    """In-memory fake implementation.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        files: dict[Path, str] | None = None,
        links: dict[Path, Path] | None = None,
    ) -> None:
        """Create FakeHomeFiles with pre-seeded state.

        Args:
            files: Mapping of absolute path -> content. Seed source files and
                trees here (a tree is any path prefix of seeded files).
            links: Mapping of absolute path -> symlink target already present.
        """
        self._files: dict[Path, str] = dict(files or {})
        self._links: dict[Path, Path] = dict(links or {})
        self._executables: set[Path] = set()
        self._written: dict[Path, str] = {}
        self._linked: dict[Path, Path] = {}
        self._removed: list[Path] = []
        self._pruned: list[Path] = []

    @property
    def written_files(self) -> dict[Path, str]:
        """Files written via write_file(). For test assertions only."""
        return dict(self._written)

    @property
    def linked_files(self) -> dict[Path, Path]:
        """Symlinks created via link_file(). For test assertions only."""
        return dict(self._linked)

    @property
    def removed_paths(self) -> list[Path]:
        """Paths removed via remove(). For test assertions only."""
        return list(self._removed)

    @property
    def pruned_dirs(self) -> list[Path]:
        """Empty directories removed via prune_empty_dirs(). For test assertions only."""
        return list(self._pruned)

    @property
    def executables(self) -> set[Path]:
        return set(self._executables)

    def _is_dir(self, path: Path) -> bool:
        return any(path in existing.parents for existing in (*self._files, *self._links))

    def exists(self, path: Path) -> bool:
        return path in self._files or path in self._links or self._is_dir(path)

    def read_text(self, path: Path) -> str | None:
        return self._files.get(path)

    def list_tree_files(self, source: Path) -> list[Path]:
        return sorted(path.relative_to(source) for path in self._files if source in path.parents)

    def write_file(self, path: Path, content: str, *, executable: bool) -> None:
        self._links.pop(path, None)
        self._files[path] = content
        self._written[path] = content
        if executable:
            self._executables.add(path)
        else:
            self._executables.discard(path)

    def link_file(self, path: Path, source: Path) -> None:
        self._files.pop(path, None)
        self._links[path] = source
        self._linked[path] = source

    def remove(self, path: Path) -> None:
        if not self.exists(path):
            return
        self._files.pop(path, None)
        self._links.pop(path, None)
        self._executables.discard(path)
        self._removed.append(path)

    def read_link(self, path: Path) -> Path | None:
        return self._links.get(path)

    def prune_empty_dirs(self, path: Path, *, stop: Path) -> None:
        # Directories only exist while something lives below them
        for parent in path.parents:
            if parent == stop or stop not in parent.parents or self._is_dir(parent):
                return
            if parent not in self._pruned:
                self._pruned.append(parent)
