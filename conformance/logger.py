# conformance/logger.py

"""
Logger module.

Logging utility for conformance tasks with coloured console output. The level
and colour switch come from `ConformanceConfig`, so CONFORMANCE_LOG_LEVEL and
CONFORMANCE_DEV_MODE mean the same thing here as everywhere else. Kept as a
module-level utility rather than a service so it is available before any task
or runner exists.
"""

import logging
import sys

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "purple": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "light_black": "\033[90m",
    "light_red": "\033[91m",
    "light_green": "\033[92m",
    "light_yellow": "\033[93m",
    "light_blue": "\033[94m",
    "light_purple": "\033[95m",
    "light_cyan": "\033[96m",
    "light_white": "\033[97m",
    "bold": "\033[1m",
    "bold_red": "\033[1;31m",
    "fg_bold_white_bg_bold_red": "\033[1;37;41m",
}

# level name -> (level column color, message color)
LEVEL_STYLES = {
    "DEBUG": ("cyan", "light_black"),
    "INFO": ("green", "light_white"),
    "WARNING": ("yellow", "yellow"),
    "ERROR": ("red", "bold_red"),
    "CRITICAL": ("fg_bold_white_bg_bold_red", "fg_bold_white_bg_bold_red"),
}

DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

LEVEL_MAP = {
    "DEBUG": DEBUG,
    "INFO": INFO,
    "WARNING": WARNING,
    "ERROR": ERROR,
    "CRITICAL": CRITICAL,
}


def colorize(text: str, color: str) -> str:
    """
    Wrap text in the ANSI code for `color` followed by a reset.

    Unknown color names raise KeyError.
    """
    return f"{COLORS[color]}{text}{COLORS['reset']}"


def _plain(text: str, color: str) -> str:
    return text


class ConformanceFormatter(logging.Formatter):
    """
    `time | LEVEL | logger | message - (func - file:line)`, one line per record.

    Task output arrives with its "[<task>]" prefix already in the message, so
    the formatter only paints the columns around it.
    """

    def __init__(self, use_colors: bool = True):
        """
        Args:
            use_colors: Paint columns with ANSI codes when writing to a terminal.
        """
        super().__init__()
        isatty = getattr(sys.stderr, "isatty", None)
        self.use_colors = use_colors and bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        paint = colorize if self.use_colors else _plain
        level_color, message_color = LEVEL_STYLES.get(
            record.levelname, ("reset", "reset")
        )
        timestamp = self.formatTime(record, "%y-%m-%d %H:%M:%S")
        origin = f"- ({record.funcName} - {record.filename}:{record.lineno})"

        return " | ".join(
            (
                paint(timestamp, "light_black"),
                paint(f"{record.levelname:<8}", level_color),
                paint(f"{record.name:<20}", message_color),
                paint(record.getMessage(), message_color),
            )
        ) + " " + paint(origin, "light_black")


_handler: logging.Handler | None = None


def _initialize_logging() -> None:
    """Attach the console handler to the root logger (called lazily)."""
    global _handler

    if _handler is not None:
        return

    _handler = logging.StreamHandler()
    logging.getLogger().addHandler(_handler)
    apply_config()


def apply_config(config=None) -> None:
    """
    Set the console level and colours from a ConformanceConfig.

    Args:
        config: Defaults to `conformance.config.get_config()`.
    """
    if config is None:
        # conformance.config imports this module for its color and level tables
        from conformance.config import get_config

        config = get_config()

    _initialize_logging()
    if _handler is None:
        return
    _handler.setFormatter(ConformanceFormatter(use_colors=config.use_colors))
    set_level(config.level)


def set_level(level: int) -> None:
    """
    Set the logging level.

    Args:
        level: Logging level (use constants like DEBUG, INFO, etc.)
    """
    _initialize_logging()
    if _handler is not None:
        _handler.setLevel(level)
    logging.getLogger().setLevel(level)


def get_handler() -> logging.Handler | None:
    """Return the shared console handler, initialising logging if needed."""
    _initialize_logging()
    return _handler


def get_logger(name: str | None = None, level: int | None = None) -> logging.Logger:
    """
    Get a logger with the package formatting.

    Args:
        name: Logger name (typically __name__ from calling module)
        level: Optional override for logging level

    Usage:
        log = get_logger(__name__)
        log.info("Hello world!")
    """
    _initialize_logging()

    if level is not None:
        set_level(level)

    return logging.getLogger(name)


def add_file_handler(
    filepath: str, level: int | None = None, use_colors: bool = False
) -> logging.Handler:
    """
    Add a file handler to the root logger and return it.

    Args:
        filepath: Path to log file
        level: Optional logging level for file handler
        use_colors: Whether to include ANSI colors in file output
    """
    _initialize_logging()

    file_handler = logging.FileHandler(filepath, encoding="utf-8")
    file_handler.setFormatter(ConformanceFormatter(use_colors=use_colors))

    if level is not None:
        file_handler.setLevel(level)

    logging.getLogger().addHandler(file_handler)
    return file_handler
