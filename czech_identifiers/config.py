"""Configuration management for czech-identifiers."""

import os
from dataclasses import dataclass, field

from czech_identifiers.exceptions import ConfigurationError
from czech_identifiers.models import account_number, birth_number, identification_number

ACCOUNT_NUMBER_FORMATS = account_number.FORMATS
BIRTH_NUMBER_FORMATS = birth_number.FORMATS
IDENTIFICATION_NUMBER_FORMATS = identification_number.FORMATS
LOG_FORMATS = ("standard", "json")


@dataclass
class FormatConfig:
    """Default format selectors used when formatting identifiers."""

    account_number: str = "S"
    birth_number: str = "S"

    def validate(self) -> None:
        """Check the selectors are supported by the identifiers."""
        if self.account_number not in ACCOUNT_NUMBER_FORMATS:
            raise ConfigurationError(
                f"Unsupported account number format '{self.account_number}'."
            )
        if self.birth_number not in BIRTH_NUMBER_FORMATS:
            raise ConfigurationError(
                f"Unsupported birth number format '{self.birth_number}'."
            )


@dataclass
class OutputConfig:
    """Output configuration."""

    pretty_json: bool = False


@dataclass
class IdentifiersConfig:
    """Main configuration for czech-identifiers."""

    formats: FormatConfig = field(default_factory=FormatConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "IdentifiersConfig":
        """Create config from environment variables."""
        formats = FormatConfig(
            account_number=os.getenv("ACCOUNT_NUMBER_FORMAT", "S"),
            birth_number=os.getenv("BIRTH_NUMBER_FORMAT", "S"),
        )
        formats.validate()

        output = OutputConfig(
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got '{seed_str}'.") from exc

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got '{log_format}'."
            )

        return cls(
            formats=formats,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
