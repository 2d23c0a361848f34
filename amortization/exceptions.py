"""Custom exception hierarchy for amortization."""


class AmortizationError(Exception):
    """Base exception for all amortization errors."""


class InvalidDateArithmeticError(AmortizationError):
    """Raised when a payment date cannot be stepped to a valid calendar date."""


class ConfigurationError(AmortizationError):
    """Raised when configuration is invalid or missing."""


class SinkError(AmortizationError):
    """Raised when a sink operation fails."""
