"""Loan terms model."""

from dataclasses import dataclass
from datetime import date

from amortization.models.enums import CompoundingFrequency, PaymentFrequency


@dataclass(frozen=True)
class LoanTerms:
    """Inputs that fully determine a loan's schedule."""

    principal: float
    term: float  # years
    annual_rate: float  # percent, e.g. 7.0 for 7%
    payment_frequency: PaymentFrequency
    compounding: CompoundingFrequency
    origination_date: date
    first_payment_date: date
    decimal_places: int = 4
