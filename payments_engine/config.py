"""Configuration management for payments-engine."""

import os
from dataclasses import dataclass, field

from payments_engine.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format_type: str = "standard"

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.level}")
        if self.format_type not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.format_type}")


@dataclass
class IngestionConfig:
    """Input parsing configuration."""

    amount_scale: int = 4  # max fraction digits in an amount

    def __post_init__(self) -> None:
        if self.amount_scale < 0:
            raise ConfigurationError(f"Amount scale must be non-negative, got {self.amount_scale}")


@dataclass
class EngineConfig:
    """Main configuration for payments-engine."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    ingestion: IngestionConfig = field(default_factory=IngestionConfig)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        scale = os.getenv("AMOUNT_SCALE", "4")
        try:
            amount_scale = int(scale)
        except ValueError as e:
            raise ConfigurationError(f"AMOUNT_SCALE must be an integer, got {scale!r}") from e

        return cls(
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "WARNING"),
                format_type=os.getenv("LOG_FORMAT", "standard"),
            ),
            ingestion=IngestionConfig(amount_scale=amount_scale),
        )
