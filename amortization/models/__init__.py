"""Domain models for loan amortization."""

from amortization.models.enums import CompoundingFrequency, PaymentFrequency
from amortization.models.loan import LoanTerms
from amortization.models.payment import PaymentRecord

__all__ = [
    "CompoundingFrequency",
    "LoanTerms",
    "PaymentFrequency",
    "PaymentRecord",
]
