"""
Configuration management for predicates.
Loads settings from environment variables with sensible defaults.
"""

import os
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..types import DiffAlgorithm
from .constants import (
    ColorMode,
    DEFAULT_COLOR_MODE,
    DEFAULT_DIFF_ALGORITHM,
    DEFAULT_LOG_LEVEL,
    ENV_COLOR,
    ENV_DIFF_ALGORITHM,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    validate_color_mode,
    validate_log_level,
)


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = DEFAULT_LOG_LEVEL
    log_dir: Optional[str] = None  # None = console only

    def __post_init__(self):
        self.level = validate_log_level(self.level)


@dataclass
class DisplayConfig:
    """
    Rendering of diffs and explanation trees.

    color_mode:
        auto   - ANSI colors only when stdout is a terminal
        always - always emit ANSI colors
        never  - plain-text markers only
    """
    color_mode: str = DEFAULT_COLOR_MODE

    def __post_init__(self):
        self.color_mode = validate_color_mode(self.color_mode)

    def use_color(self) -> bool:
        """Resolve color_mode against the current stdout."""
        if self.color_mode == ColorMode.ALWAYS:
            return True
        if self.color_mode == ColorMode.NEVER:
            return False
        isatty = getattr(sys.stdout, "isatty", None)
        return bool(isatty and isatty())


@dataclass
class DiffConfig:
    """Defaults for new diff-distance predicates."""
    algorithm: DiffAlgorithm = DiffAlgorithm.SEQUENCE


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables (and .env files) and
    provides typed access to all settings.
    """

    _instance: Optional['Config'] = None
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._initialized = False
            return cls._instance

    def __init__(self, env_file: str = ".env"):
        with Config._lock:
            if self._initialized:
                return

            # Later files override earlier ones
            for env_name in [".env", env_file]:
                env_path = Path(env_name)
                if env_path.exists():
                    load_dotenv(env_path, override=True)

            self.log = self._load_log_config()
            self.display = self._load_display_config()
            self.diff = self._load_diff_config()

            self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            log_dir=os.getenv(ENV_LOG_DIR) or None,
        )

    def _load_display_config(self) -> DisplayConfig:
        """Load display configuration from environment."""
        return DisplayConfig(
            color_mode=os.getenv(ENV_COLOR, DEFAULT_COLOR_MODE),
        )

    def _load_diff_config(self) -> DiffConfig:
        """Load diff defaults from environment."""
        name = os.getenv(ENV_DIFF_ALGORITHM, DEFAULT_DIFF_ALGORITHM)
        try:
            algorithm = DiffAlgorithm.from_name(name)
        except ValueError as e:
            raise ValueError(f"{ENV_DIFF_ALGORITHM}: {e}") from None
        return DiffConfig(algorithm=algorithm)

    def summary_short(self) -> str:
        """Generate a short one-line configuration summary."""
        log_target = self.log.log_dir or "console"
        return (
            f"predicates | log: {self.log.level} -> {log_target} | "
            f"color: {self.display.color_mode} | diff: {self.diff.algorithm.value}"
        )


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reload_config(env_file: str = ".env") -> Config:
    """Drop the global config instance and load it again."""
    Config._instance = None
    return Config(env_file)


def use_color() -> bool:
    """
    Color decision for rendered diffs and trees.

    Rendering is presentation only: an invalid configuration logs a warning
    and falls back to plain text instead of raising.
    """
    try:
        return get_config().display.use_color()
    except ValueError as e:
        from ..utils.logger import get_logger

        get_logger().warning(f"Invalid configuration, rendering without color: {e}")
        return False
