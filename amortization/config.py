"""Configuration management for amortization."""

from dataclasses import dataclass

from amortization.exceptions import ConfigurationError

DEFAULT_DECIMAL_PLACES = 4
MAX_PERIODS = 500


@dataclass
class ScheduleConfig:
    """Configuration for building and displaying a schedule."""

    decimal_places: int = DEFAULT_DECIMAL_PLACES
    max_periods: int = MAX_PERIODS
    log_level: str = "INFO"
    log_format: str = "standard"
    output_format: str = "text"
    pretty_json: bool = False

    @classmethod
    def from_env(cls) -> "ScheduleConfig":
        """Create config from environment variables."""
        import os

        return cls(
            decimal_places=_env_int("AMORTIZATION_DECIMAL_PLACES", DEFAULT_DECIMAL_PLACES),
            max_periods=_env_int("AMORTIZATION_MAX_PERIODS", MAX_PERIODS),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            output_format=os.getenv("OUTPUT_FORMAT", "text"),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )


def _env_int(name: str, default: int) -> int:
    """Read a non-negative integer environment variable."""
    import os

    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return value
