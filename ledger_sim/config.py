"""Configuration management for ledger-sim."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP

from ledger_sim.exceptions import ConfigurationError

ROUNDING_MODES: dict[str, str] = {
    "HALF_EVEN": ROUND_HALF_EVEN,
    "HALF_UP": ROUND_HALF_UP,
}

OUTPUT_FORMATS = ("table", "json")


@dataclass
class InterestConfig:
    """Interest accrual configuration.

    The default rounding is banker's rounding, which is what the reference
    statements were produced with.
    """

    day_count: int = 365
    rounding: str = "HALF_EVEN"

    @property
    def rounding_mode(self) -> str:
        """Get the ``decimal`` rounding constant."""
        try:
            return ROUNDING_MODES[self.rounding.upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown rounding mode: {self.rounding}") from None


@dataclass
class DisplayConfig:
    """Console output configuration."""

    bank_name: str = "AwesomeGIC Bank"
    output_format: str = "table"


@dataclass
class LedgerConfig:
    """Main configuration for ledger-sim."""

    interest: InterestConfig = field(default_factory=InterestConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    def validate(self) -> "LedgerConfig":
        """Check option values, returning self so calls can be chained."""
        if self.interest.day_count <= 0:
            raise ConfigurationError(f"Day count must be positive, got {self.interest.day_count}")
        # Raises for unknown modes
        self.interest.rounding_mode
        if self.display.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Unknown output format: {self.display.output_format}")
        if self.log_format not in ("standard", "json"):
            raise ConfigurationError(f"Unknown log format: {self.log_format}")
        return self

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        try:
            day_count = int(os.getenv("LEDGER_DAY_COUNT", "365"))
        except ValueError as exc:
            raise ConfigurationError(f"LEDGER_DAY_COUNT must be an integer: {exc}") from exc

        interest = InterestConfig(
            day_count=day_count,
            rounding=os.getenv("LEDGER_INTEREST_ROUNDING", "HALF_EVEN"),
        )

        display = DisplayConfig(
            bank_name=os.getenv("LEDGER_BANK_NAME", "AwesomeGIC Bank"),
            output_format=os.getenv("LEDGER_OUTPUT_FORMAT", "table").lower(),
        )

        return cls(
            interest=interest,
            display=display,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard").lower(),
        )
