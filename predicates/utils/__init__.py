"""
Utility modules.
"""

from .logger import Colors, get_logger, setup_logger, PredicateLogger

__all__ = [
    "Colors",
    "get_logger",
    "setup_logger",
    "PredicateLogger",
]
