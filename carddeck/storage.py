"""Blocking file I/O for saved decks. Errors are logged and re-raised, never retried."""

from pathlib import Path

from carddeck.logging_utils import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"


def write_text(path: str | Path, text: str) -> None:
    """Replace the content of path with text. No trailing newline is added."""
    try:
        with open(path, "w", encoding=ENCODING) as f:
            f.write(text)
    except OSError as e:
        logger.error("Could not write deck file %s: %s", path, e)
        raise


def read_text(path: str | Path, errors: str = "strict") -> str:
    """Return the whole content of path, decoding with the given error handler."""
    try:
        with open(path, "r", encoding=ENCODING, errors=errors) as f:
            return f.read()
    except OSError as e:
        logger.error("Could not read deck file %s: %s", path, e)
        raise
