"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    reload_config,
    use_color,
    LogConfig,
    DisplayConfig,
    DiffConfig,
)

from .constants import (
    ColorMode,
    COLOR_MODES,
    LOG_LEVELS,
    validate_color_mode,
    validate_log_level,
)

__all__ = [
    # Config classes
    "Config",
    "get_config",
    "reload_config",
    "use_color",
    "LogConfig",
    "DisplayConfig",
    "DiffConfig",
    # Constants
    "ColorMode",
    "COLOR_MODES",
    "LOG_LEVELS",
    "validate_color_mode",
    "validate_log_level",
]
