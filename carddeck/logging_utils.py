"""Logging setup shared by the library and the command line."""

import logging

from config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (the CLI does this)."""
    level = (level or config.logging.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=config.logging.format,
        datefmt=config.logging.datefmt,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
