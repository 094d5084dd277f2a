"""Logging setup for the showcase app."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER = "view_components"

_HANDLER_MARK = "_view_components_handler"


def parse_level(level: str) -> int:
    """Translate a string log level into a logging constant."""

    value = getattr(logging, str(level).strip().upper(), None)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Send ``view_components`` log records to stderr at ``level``.

    Streamlit re-runs page scripts on every interaction, so repeated calls only
    update the level and never stack a second handler.
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(parse_level(level))
    if not any(getattr(handler, _HANDLER_MARK, False) for handler in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_MARK, True)
        package_logger.addHandler(handler)
    return package_logger


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "parse_level", "setup_logging"]
