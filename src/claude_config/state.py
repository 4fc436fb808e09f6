"""Activation state stored in ~/.local/state/claude-config/state.toml.

Records which home-relative paths the last activation placed, so the next
activation can remove the ones it no longer declares.
"""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

import tomli
import tomli_w

from claude_config.gateway.home_files.abc import HomeFiles


class StateFileError(Exception):
    """state.toml exists but cannot be parsed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message} (delete it to activate from scratch)")


@dataclass(frozen=True)
class ActivationState:
    """Paths (relative to home) managed by the last activation."""

    managed: tuple[PurePosixPath, ...]


def get_state_path(home: Path) -> Path:
    return home / ".local" / "state" / "claude-config" / "state.toml"


def parse_state(content: str) -> ActivationState:
    """Parse state.toml content.

    Raises:
        ValueError: If the content is not TOML or `managed` is not a list of strings
    """
    data = tomli.loads(content)
    activation = data.get("activation", {})
    if not isinstance(activation, dict):
        raise ValueError("'activation' must be a table")
    managed = activation.get("managed", [])
    if not isinstance(managed, list) or not all(isinstance(path, str) for path in managed):
        raise ValueError("'activation.managed' must be a list of strings")
    return ActivationState(managed=tuple(PurePosixPath(path) for path in managed))


def format_state(state: ActivationState) -> str:
    data = {"activation": {"managed": [str(path) for path in state.managed]}}
    return tomli_w.dumps(data)


def load_activation_state(home: Path, home_files: HomeFiles) -> ActivationState | None:
    """Load state.toml. Returns None if no activation has run yet.

    Raises:
        StateFileError: If state.toml is present but malformed
    """
    path = get_state_path(home)
    content = home_files.read_text(path)
    if content is None:
        return None
    try:
        return parse_state(content)
    except ValueError as e:
        raise StateFileError(path, f"invalid state file: {e}") from e


def save_activation_state(home: Path, home_files: HomeFiles, state: ActivationState) -> None:
    home_files.write_file(get_state_path(home), format_state(state), executable=False)
