"""Pytest configuration and fixtures."""

import logging
from datetime import date
from typing import Iterator

import pytest

from amortization.loan import Loan
from amortization.models.enums import CompoundingFrequency, PaymentFrequency
from amortization.models.loan import LoanTerms


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def daily_terms() -> LoanTerms:
    """15 year, 7% loan paid monthly with daily compounding."""
    return LoanTerms(
        principal=200000.0,
        term=15.0,
        annual_rate=7.0,
        payment_frequency=PaymentFrequency.MONTHLY,
        compounding=CompoundingFrequency.DAILY,
        origination_date=date(2024, 2, 15),
        first_payment_date=date(2024, 4, 1),
        decimal_places=4,
    )


@pytest.fixture
def monthly_terms() -> LoanTerms:
    """15 year, 7% loan paid monthly with monthly compounding."""
    return LoanTerms(
        principal=200000.0,
        term=15.0,
        annual_rate=7.0,
        payment_frequency=PaymentFrequency.MONTHLY,
        compounding=CompoundingFrequency.MONTHLY,
        origination_date=date(2024, 3, 1),
        first_payment_date=date(2024, 4, 1),
        decimal_places=4,
    )


@pytest.fixture
def daily_loan(daily_terms: LoanTerms) -> Loan:
    """Loan built from ``daily_terms``."""
    return Loan.from_terms(daily_terms)


@pytest.fixture
def monthly_loan(monthly_terms: LoanTerms) -> Loan:
    """Loan built from ``monthly_terms``."""
    return Loan.from_terms(monthly_terms)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo any setup_logging() call made by a test."""
    root = logging.getLogger()
    package = logging.getLogger("amortization")
    saved = (root.handlers[:], root.level, package.level)
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    package.setLevel(saved[2])
