"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_bool(name: str, default: str = "false") -> bool:
    """Parse a true/false environment variable."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _parse_seed() -> int | None:
    """Parse CARDDECK_SEED; unset or blank means an unseeded generator."""
    seed = os.getenv("CARDDECK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class DeckConfig:
    """Deck, parsing and dealing defaults."""

    strict_parsing: bool = field(default_factory=lambda: _parse_bool("CARDDECK_STRICT_PARSE"))
    seed: int | None = field(default_factory=_parse_seed)
    default_file: str = field(default_factory=lambda: os.getenv("CARDDECK_FILE", "my_cards"))
    hand_capacity: int = 13
    hand_count: int = 4


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    deck: DeckConfig = field(default_factory=DeckConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
