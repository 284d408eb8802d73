"""Logging configuration for a host application (console UI, GUI loop, ...)."""

import logging
import sys

LOG_FORMATS: dict[str, str] = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Configure the root logger.

    The engine modules only create loggers with `logging.getLogger(__name__)` and never configure handlers themselves.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    log_format = LOG_FORMATS.get(format_style, LOG_FORMATS["simple"])
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
