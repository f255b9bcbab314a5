"""
Logging system for predicates.
Provides human-readable console logs and optional dated file output.

Evaluation never raises for soft failures (unreadable candidate files,
undecodable bytes, failed stat calls); they are recorded here on the
"predicates.eval" channel instead.
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Optional


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # Color a copy so file handlers on the same record stay plain.
        record = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class PredicateLogger:
    """
    Central logging system for predicates.

    Features:
    - Console output with colors
    - Optional file output (one file per day) when log_dir is set
    - Separate channel for evaluation soft failures
    """

    _instance: Optional['PredicateLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_level: str = "WARNING", log_dir: Optional[str] = None):
        if PredicateLogger._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._create_logger("predicates", log_level)
        # Child of "predicates": records propagate to the main handlers.
        self.eval_logger = logging.getLogger("predicates.eval")

        PredicateLogger._initialized = True

    def _create_logger(self, name: str, level: str) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.handlers.clear()

        # Console handler with colors
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        # File handler (plain text, no colors)
        if self.log_dir is not None:
            log_file = self.log_dir / f"predicates_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    def info(self, msg: str, *args, **kwargs):
        """Log info message."""
        self.main_logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message."""
        self.main_logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.main_logger.warning(msg, *args, **kwargs)

    def soft_failure(self, predicate: Any, reason: str, **kwargs):
        """
        Log an evaluation that collapsed to False instead of raising.

        Args:
            predicate: The predicate being evaluated (rendered with str())
            reason: Why the condition could not be confirmed
            **kwargs: Additional context (path, error, ...)
        """
        parts = [f"[SOFT_FAIL] {predicate}", reason]
        for key, value in kwargs.items():
            parts.append(f"{key}={value}")
        self.eval_logger.debug(" | ".join(parts))


# Global logger instance
_logger: Optional[PredicateLogger] = None
_logger_lock = threading.Lock()


def get_logger() -> PredicateLogger:
    """
    Get or create the global logger instance (settings from config).

    Invalid logging settings fall back to the defaults with a warning, so a
    soft failure during evaluation can never turn into a config error.
    """
    global _logger
    with _logger_lock:
        if _logger is None:
            from ..config import get_config
            from ..config.constants import DEFAULT_LOG_LEVEL

            try:
                config = get_config()
            except ValueError as e:
                _logger = PredicateLogger(DEFAULT_LOG_LEVEL)
                _logger.warning(f"Invalid configuration, using default logging: {e}")
            else:
                _logger = PredicateLogger(config.log.level, config.log.log_dir)
        return _logger


def setup_logger(log_level: str = "WARNING", log_dir: Optional[str] = None) -> PredicateLogger:
    """Initialize the logger with custom settings."""
    global _logger
    with _logger_lock:
        PredicateLogger._initialized = False
        PredicateLogger._instance = None
        _logger = PredicateLogger(log_level, log_dir)
        return _logger
