"""Application context with dependency injection."""

from dataclasses import dataclass, replace
from pathlib import Path

from claude_config.config import get_default_config_path
from claude_config.gateway.home_files.abc import HomeFiles
from claude_config.gateway.home_files.dry_run import DryRunHomeFiles
from claude_config.gateway.home_files.real import RealHomeFiles
from claude_config.gateway.notifier.abc import Notifier
from claude_config.gateway.notifier.real import RealNotifier
from claude_config.options import HostPlatform, detect_host_platform


@dataclass(frozen=True)
class ClaudeConfigContext:
    """Immutable context holding all dependencies for claude-config operations.

    Created at CLI entry point and threaded through the application via Click's
    context system. Frozen to prevent accidental modification at runtime.
    """

    home: Path
    config_path: Path
    host: HostPlatform
    home_files: HomeFiles
    notifier: Notifier
    dry_run: bool

    def with_dry_run(self) -> "ClaudeConfigContext":
        """Return a copy whose home files gateway only reports mutations."""
        if self.dry_run:
            return self
        return replace(self, home_files=DryRunHomeFiles(self.home_files), dry_run=True)

    @staticmethod
    def for_test(
        home: Path | None = None,
        config_path: Path | None = None,
        host: HostPlatform | None = None,
        home_files: HomeFiles | None = None,
        notifier: Notifier | None = None,
        dry_run: bool = False,
    ) -> "ClaudeConfigContext":
        """Create test context with fakes for any unspecified gateway.

        Args:
            home: Home directory. Defaults to Path("/test/home").
            config_path: config.toml location. Defaults to the standard
                location under home.
            host: Host platform. Defaults to a system without notifications.
            home_files: Defaults to an empty FakeHomeFiles.
            notifier: Defaults to FakeNotifier.
            dry_run: Whether to enable dry-run mode (default False).

        Example:
            >>> home_files = FakeHomeFiles(files={Path("/src/a.md"): "# A"})
            >>> ctx = ClaudeConfigContext.for_test(home_files=home_files)
        """
        from claude_config.gateway.home_files.fake import FakeHomeFiles
        from claude_config.gateway.notifier.fake import FakeNotifier

        resolved_home = home or Path("/test/home")
        return ClaudeConfigContext(
            home=resolved_home,
            config_path=config_path or get_default_config_path(resolved_home),
            host=host or HostPlatform(system="TestOS"),
            home_files=home_files or FakeHomeFiles(),
            notifier=notifier or FakeNotifier(),
            dry_run=dry_run,
        )


def create_context(*, config_path: Path | None, dry_run: bool) -> ClaudeConfigContext:
    """Create production context with real implementations.

    Args:
        config_path: Explicit config.toml location, or None for the default
        dry_run: Wrap the home files gateway so mutations are printed
            instead of performed
    """
    home = Path.home()
    host = detect_host_platform()
    ctx = ClaudeConfigContext(
        home=home,
        config_path=config_path or get_default_config_path(home),
        host=host,
        home_files=RealHomeFiles(),
        notifier=RealNotifier(host.system),
        dry_run=False,
    )
    if dry_run:
        return ctx.with_dry_run()
    return ctx
