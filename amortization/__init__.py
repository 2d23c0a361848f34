"""Loan amortization schedules."""

from amortization.dates import next_payment_date
from amortization.loan import Loan
from amortization.models import (
    CompoundingFrequency,
    LoanTerms,
    PaymentFrequency,
    PaymentRecord,
)
from amortization.solver import payment_amount

__all__ = [
    "CompoundingFrequency",
    "Loan",
    "LoanTerms",
    "PaymentFrequency",
    "PaymentRecord",
    "next_payment_date",
    "payment_amount",
]
