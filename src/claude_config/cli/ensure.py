"""Turn domain errors into user-friendly CLI exits."""

from claude_config.config import ConfigError, load_config
from claude_config.context import ClaudeConfigContext
from claude_config.output import error_output
from claude_config.pipeline import Materialization, materialize
from claude_config.projection import DuplicateDestinationError


def materialize_or_exit(ctx: ClaudeConfigContext) -> Materialization:
    """Load config.toml and run the pipeline, exiting 1 on build-time errors.

    Raises:
        SystemExit: If the config is invalid or the mapping has duplicates
    """
    try:
        config = load_config(ctx.config_path, home=ctx.home)
        return materialize(config, host=ctx.host)
    except (ConfigError, DuplicateDestinationError) as e:
        error_output(str(e))
        raise SystemExit(1) from None
