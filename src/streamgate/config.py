"""Global configuration — XDG paths, env vars, defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "streamgate"
    return Path.home() / ".config" / "streamgate"


@dataclass
class StreamGateConfig:
    """Application-wide configuration."""

    config_dir: Path = field(default_factory=_default_config_dir)
    vhosts_file: Path | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.vhosts_file is None:
            self.vhosts_file = self.config_dir / "vhosts.yaml"

    @classmethod
    def load(cls) -> StreamGateConfig:
        """Load config from environment variables with XDG defaults."""
        config = cls()

        env_file = os.environ.get("STREAMGATE_CONFIG")
        if env_file:
            config.vhosts_file = Path(env_file)

        env_verbose = os.environ.get("STREAMGATE_VERBOSE")
        if env_verbose:
            config.verbose = env_verbose.lower() in ("1", "true", "yes", "on")

        return config
