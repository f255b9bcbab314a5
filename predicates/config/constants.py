"""
Centralized constants for predicate configuration.

Environment variable names, accepted values and defaults live here so the
config loader and its validation agree on one list.
"""

from typing import List


# ==================== Environment Variables ====================

ENV_LOG_LEVEL = "PREDICATES_LOG_LEVEL"
ENV_LOG_DIR = "PREDICATES_LOG_DIR"
ENV_COLOR = "PREDICATES_COLOR"
ENV_DIFF_ALGORITHM = "PREDICATES_DIFF_ALGORITHM"


# ==================== Logging ====================

LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_LEVEL = "WARNING"


def validate_log_level(level: str) -> str:
    """
    Validate and normalize a log level name.

    Args:
        level: Level name (case-insensitive, e.g. "debug")

    Returns:
        Upper-case level name

    Raises:
        ValueError: If the level is not a standard logging level
    """
    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ValueError(
            f"{ENV_LOG_LEVEL} must be one of {LOG_LEVELS}, got '{level}'"
        )
    return normalized


# ==================== Color ====================

class ColorMode:
    AUTO = "auto"      # Color when stdout is a terminal
    ALWAYS = "always"
    NEVER = "never"


COLOR_MODES: List[str] = [ColorMode.AUTO, ColorMode.ALWAYS, ColorMode.NEVER]
DEFAULT_COLOR_MODE = ColorMode.AUTO


def validate_color_mode(mode: str) -> str:
    """
    Validate and normalize a color mode.

    Raises:
        ValueError: If mode is not one of COLOR_MODES
    """
    normalized = mode.strip().lower()
    if normalized not in COLOR_MODES:
        raise ValueError(
            f"{ENV_COLOR} must be one of {COLOR_MODES}, got '{mode}'"
        )
    return normalized


# ==================== Diff ====================

DEFAULT_DIFF_ALGORITHM = "sequence"
