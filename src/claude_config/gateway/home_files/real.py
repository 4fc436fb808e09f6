"""Real HomeFiles implementation using filesystem operations."""

import logging
from pathlib import Path

from claude_config.gateway.home_files.abc import HomeFiles

logger = logging.getLogger(__name__)


def _clear(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()


class RealHomeFiles(HomeFiles):
    """Production implementation backed by the filesystem."""

    def exists(self, path: Path) -> bool:
        return path.is_symlink() or path.exists()

    def read_text(self, path: Path) -> str | None:
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def list_tree_files(self, source: Path) -> list[Path]:
        if not source.is_dir():
            return []
        files = [path.relative_to(source) for path in source.rglob("*") if path.is_file()]
        return sorted(files)

    def write_file(self, path: Path, content: str, *, executable: bool) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # Replace symlinks instead of writing through them into the source tree
        _clear(path)
        path.write_text(content, encoding="utf-8")
        path.chmod(0o755 if executable else 0o644)
        logger.debug("wrote %s", path)

    def link_file(self, path: Path, source: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.is_symlink() and path.readlink() == source:
            return
        _clear(path)
        path.symlink_to(source)
        logger.debug("linked %s -> %s", path, source)

    def remove(self, path: Path) -> None:
        if not self.exists(path):
            return
        _clear(path)
        logger.debug("removed %s", path)

    def read_link(self, path: Path) -> Path | None:
        if not path.is_symlink():
            return None
        return path.readlink()

    def prune_empty_dirs(self, path: Path, *, stop: Path) -> None:
        for parent in path.parents:
            if parent == stop or stop not in parent.parents:
                return
            if not parent.is_dir() or parent.is_symlink() or any(parent.iterdir()):
                return
            parent.rmdir()
            logger.debug("removed empty directory %s", parent)
