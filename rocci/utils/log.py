import logging
from os import getenv
from typing import Any, Optional

from rich.logging import RichHandler
from rich.text import Text

LOGGER_NAME = "rocci"

LOG_STYLES = {
    "debug": "green",
    "info": "blue",
}


class ColoredRichHandler(RichHandler):
    def get_level_text(self, record: logging.LogRecord) -> Text:
        if not record.msg:
            return Text("")
        color = LOG_STYLES.get(record.levelname.lower())
        if color is not None:
            return Text(record.levelname, style=color)
        return super().get_level_text(record)


def build_logger(logger_name: str) -> Any:
    _logger = logging.getLogger(logger_name)
    # Re-importing the module must not stack handlers
    if any(isinstance(h, ColoredRichHandler) for h in _logger.handlers):
        return _logger

    rich_handler = ColoredRichHandler(
        show_time=False,
        rich_tracebacks=False,
        show_path=True if getenv("ROCCI_RUNTIME") == "dev" else False,
        tracebacks_show_locals=False,
    )
    rich_handler.setFormatter(
        logging.Formatter(
            fmt="%(message)s",
            datefmt="[%X]",
        )
    )

    _logger.addHandler(rich_handler)
    _logger.setLevel(logging.INFO)
    _logger.propagate = False
    return _logger


logger: logging.Logger = build_logger(LOGGER_NAME)

debug_on: bool = False


def set_log_level_to_debug():
    global debug_on

    debug_on = True
    logger.setLevel(logging.DEBUG)


def set_log_level_to_info():
    global debug_on

    debug_on = False
    logger.setLevel(logging.INFO)


def set_log_level(level: Optional[str]) -> None:
    """Set the log level from a config value such as "debug" or "WARNING"."""
    if level is None:
        return
    if level.lower() == "debug":
        set_log_level_to_debug()
        return
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    set_log_level_to_info()
    logger.setLevel(numeric_level)


def log_debug(msg, *args, **kwargs):
    if debug_on:
        logger.debug(msg, *args, **kwargs)


def log_info(msg, *args, **kwargs):
    logger.info(msg, *args, **kwargs)


def log_warning(msg, *args, **kwargs):
    logger.warning(msg, *args, **kwargs)


def log_error(msg, *args, **kwargs):
    logger.error(msg, *args, **kwargs)


if getenv("ROCCI_DEBUG", "false").lower() == "true":
    set_log_level_to_debug()
