"""Run option resolution, artifact generation and projection in sequence."""

from dataclasses import dataclass

from claude_config.config import LoadedConfig
from claude_config.options import (
    DEFAULT_PERMISSIONS,
    ConfigurationRecord,
    HostPlatform,
    resolve_options,
)
from claude_config.projection import ArtifactMapping, project_artifacts
from claude_config.settings import (
    ClaudeSettings,
    render_settings,
    resolve_notify_command,
    serialize_settings,
)
from claude_config.wrappers import WrapperSpec, default_wrappers


@dataclass(frozen=True)
class Materialization:
    """Everything derived from the configuration for one activation."""

    record: ConfigurationRecord
    settings: ClaudeSettings
    settings_json: str
    wrappers: tuple[WrapperSpec, ...]
    mappings: tuple[ArtifactMapping, ...]


def materialize(config: LoadedConfig, *, host: HostPlatform) -> Materialization:
    """Derive settings, wrappers and the artifact mapping from config.

    Raises:
        DuplicateDestinationError: If the mapping has conflicting destinations
    """
    record = resolve_options(config.options, baseline=DEFAULT_PERMISSIONS, host=host)

    notify_command = None
    if record.notifications_enabled:
        notify_command = resolve_notify_command(config.notify_command)
    settings = render_settings(record, notify_command=notify_command)
    settings_json = serialize_settings(settings)

    wrappers = default_wrappers()
    mappings = project_artifacts(
        record,
        settings_json=settings_json,
        wrappers=wrappers,
        sources=config.sources,
    )
    return Materialization(
        record=record,
        settings=settings,
        settings_json=settings_json,
        wrappers=wrappers,
        mappings=mappings,
    )
