"""
Panequal configuration management.

Configuration priority (highest to lowest):
1. CLI arguments (--target, --json, etc.)
2. Environment variables (PANEQUAL_*)
3. Config file (~/.config/panequal/config.json or platform-specific)
4. Default values (zero-config)
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

import platformdirs

logger = logging.getLogger(__name__)


@dataclass
class TmuxConfig:
    """tmux connection settings."""

    socket_path: str = ""  # empty = default socket
    target: str = ""  # empty = current window
    timeout: float = 5.0


@dataclass
class OutputConfig:
    """CLI output settings."""

    json: bool = False
    log_level: str = "WARNING"


@dataclass
class PanequalConfig:
    """Main configuration container."""

    tmux: TmuxConfig = field(default_factory=TmuxConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "tmux": asdict(self.tmux),
            "output": asdict(self.output),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PanequalConfig":
        """Create from dictionary."""
        return cls(
            tmux=TmuxConfig(**data.get("tmux", {})),
            output=OutputConfig(**data.get("output", {})),
        )

    def apply_env_overrides(self) -> "PanequalConfig":
        """
        Apply environment variable overrides.

        Environment variables:
            PANEQUAL_TMUX_SOCKET - tmux socket path
            PANEQUAL_TARGET - target window
            PANEQUAL_TIMEOUT - tmux command timeout in seconds
            PANEQUAL_JSON - true/false
            PANEQUAL_LOG_LEVEL - DEBUG/INFO/WARNING/ERROR
        """
        if os.environ.get("PANEQUAL_TMUX_SOCKET"):
            self.tmux.socket_path = os.environ["PANEQUAL_TMUX_SOCKET"]
        if os.environ.get("PANEQUAL_TARGET"):
            self.tmux.target = os.environ["PANEQUAL_TARGET"]
        if os.environ.get("PANEQUAL_TIMEOUT"):
            try:
                self.tmux.timeout = float(os.environ["PANEQUAL_TIMEOUT"])
            except ValueError:
                logger.warning("Ignoring invalid PANEQUAL_TIMEOUT=%r", os.environ["PANEQUAL_TIMEOUT"])

        if os.environ.get("PANEQUAL_JSON"):
            self.output.json = os.environ["PANEQUAL_JSON"].lower() == "true"
        if os.environ.get("PANEQUAL_LOG_LEVEL"):
            self.output.log_level = _checked_log_level(
                os.environ["PANEQUAL_LOG_LEVEL"], "PANEQUAL_LOG_LEVEL"
            )

        return self


def _checked_log_level(value, source: str) -> str:
    """Normalize a level name, falling back to WARNING if logging doesn't know it."""
    name = str(value).upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    logger.warning("Ignoring unknown log level %r from %s", value, source)
    return OutputConfig.log_level


def get_config_dir() -> Path:
    """
    Per-user directory holding panequal's config.json.

    Resolved by platformdirs, e.g. ~/.config/panequal on Linux
    (honouring $XDG_CONFIG_HOME).
    """
    return Path(platformdirs.user_config_dir("panequal", appauthor=False))


def get_config_path() -> Path:
    return get_config_dir() / "config.json"


def load_config(path: Optional[Path] = None, apply_env: bool = True) -> PanequalConfig:
    """
    Read settings for one panequal run.

    A missing file means defaults. An unreadable or malformed file, or an
    unknown log level, is logged and replaced by the default value rather
    than aborting the run.

    Args:
        path: Config file; the platform default when None.
        apply_env: Layer PANEQUAL_* variables on top of the file.
    """
    config_path = path or get_config_path()
    config = PanequalConfig()

    if config_path.exists():
        try:
            with open(config_path) as f:
                data = json.load(f)
            config = PanequalConfig.from_dict(data)
        except (OSError, json.JSONDecodeError, TypeError, AttributeError) as e:
            logger.warning("Ignoring invalid config %s: %s", config_path, e)
        else:
            config.output.log_level = _checked_log_level(config.output.log_level, str(config_path))

    if apply_env:
        config.apply_env_overrides()

    return config


def save_config(config: PanequalConfig, path: Optional[Path] = None) -> bool:
    """Write config as JSON, creating the directory. False if the write failed."""
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(config.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.warning("Could not write config %s: %s", config_path, e)
        return False


def init_config(path: Optional[Path] = None) -> Path:
    """Write a default config file and return where it went."""
    config_path = path or get_config_path()
    save_config(PanequalConfig(), config_path)
    return config_path
