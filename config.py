"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_bool(name: str, default: str) -> bool:
    """Parse a true/false environment variable."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _parse_seed() -> int | None:
    """Parse CARDTRICK_SEED environment variable; unset or blank means unseeded."""
    seed = os.getenv("CARDTRICK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class TrickConfig:
    """Card trick run configuration."""

    seed: int | None = field(default_factory=_parse_seed)
    check_invariant: bool = field(
        default_factory=lambda: _parse_bool("CARDTRICK_CHECK_INVARIANT", "true")
    )
    glyphs: bool = field(default_factory=lambda: _parse_bool("CARDTRICK_GLYPHS", "false"))


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    trick: TrickConfig = field(default_factory=TrickConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
