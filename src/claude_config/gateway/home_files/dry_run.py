"""Dry-run HomeFiles implementation.

Delegates read-only methods to wrapped, no-ops mutations.
"""

from pathlib import Path

from claude_config.gateway.home_files.abc import HomeFiles
from claude_config.output import user_output


class DryRunHomeFiles(HomeFiles):
    """No-op wrapper that prevents writes in dry-run mode.

    Read-only methods delegate to the wrapped implementation.
    Mutation methods print what would happen.
    """

    def __init__(self, wrapped: HomeFiles) -> None:
        self._wrapped = wrapped

    def exists(self, path: Path) -> bool:
        return self._wrapped.exists(path)

    def read_text(self, path: Path) -> str | None:
        return self._wrapped.read_text(path)

    def list_tree_files(self, source: Path) -> list[Path]:
        return self._wrapped.list_tree_files(source)

    def write_file(self, path: Path, content: str, *, executable: bool) -> None:
        user_output(f"[DRY RUN] Would write {path}")

    def link_file(self, path: Path, source: Path) -> None:
        user_output(f"[DRY RUN] Would link {path} -> {source}")

    def remove(self, path: Path) -> None:
        user_output(f"[DRY RUN] Would remove {path}")

    def read_link(self, path: Path) -> Path | None:
        return self._wrapped.read_link(path)

    def prune_empty_dirs(self, path: Path, *, stop: Path) -> None:
        # Nothing was removed, so no directory became empty
        return None
