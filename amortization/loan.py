"""Loan with an eagerly computed amortization schedule."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from amortization.config import DEFAULT_DECIMAL_PLACES, MAX_PERIODS
from amortization.models.enums import CompoundingFrequency, PaymentFrequency
from amortization.models.loan import LoanTerms
from amortization.models.payment import PaymentRecord
from amortization.schedule import iter_scheduled_payments
from amortization.solver import payment_amount as solve_payment_amount

logger = logging.getLogger(__name__)

NO_PAYMENT_INFO = "No payment information."


class Loan:
    """An amortizing loan and its scheduled payments.

    The level payment and the full schedule are computed once, at
    construction, and never change afterwards.

    Parameters
    ----------
    principal : float
        Amount borrowed.
    term : float
        Term in years.
    annual_rate : float
        Nominal annual rate in percent (7.0 means 7%).
    payment_frequency : PaymentFrequency
        How often payments are due.
    compounding : CompoundingFrequency
        How often interest compounds.
    origination_date : date
        Date the loan starts accruing interest.
    first_payment_date : date
        Due date of the first payment.
    decimal_places : int
        Digits amounts are rounded to.
    max_periods : int
        Hard cap on the number of scheduled payments.

    Amounts come back as ``Decimal`` values built from the rounded floats,
    so compare them against ``Decimal("1799.8691")`` or convert with
    ``float()`` first; ``Decimal`` never equals a float literal such as
    ``1799.8691``.

    Raises
    ------
    InvalidDateArithmeticError
        If a payment date cannot be stepped to a valid calendar date.
    """

    def __init__(
        self,
        principal: float,
        term: float,
        annual_rate: float,
        payment_frequency: PaymentFrequency,
        compounding: CompoundingFrequency,
        origination_date: date,
        first_payment_date: date,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        *,
        max_periods: int = MAX_PERIODS,
    ) -> None:
        self._terms = LoanTerms(
            principal=principal,
            term=term,
            annual_rate=annual_rate,
            payment_frequency=payment_frequency,
            compounding=compounding,
            origination_date=origination_date,
            first_payment_date=first_payment_date,
            decimal_places=decimal_places,
        )
        level_payment = solve_payment_amount(
            principal,
            term,
            annual_rate,
            payment_frequency,
            compounding,
            decimal_places,
        )
        self._payment_amount = Decimal(str(level_payment))
        self._scheduled: tuple[PaymentRecord, ...] = tuple(
            iter_scheduled_payments(self._terms, level_payment, max_periods)
        )
        self._actual: tuple[PaymentRecord, ...] = ()

        logger.debug(
            "Built schedule: %d payments of %s (%s, %s compounding)",
            len(self._scheduled),
            self._payment_amount,
            payment_frequency.value,
            compounding.value,
        )

    @classmethod
    def from_terms(cls, terms: LoanTerms, *, max_periods: int = MAX_PERIODS) -> Loan:
        """Build a loan from a ``LoanTerms`` instance."""
        return cls(
            terms.principal,
            terms.term,
            terms.annual_rate,
            terms.payment_frequency,
            terms.compounding,
            terms.origination_date,
            terms.first_payment_date,
            terms.decimal_places,
            max_periods=max_periods,
        )

    @property
    def terms(self) -> LoanTerms:
        return self._terms

    @property
    def principal(self) -> float:
        return self._terms.principal

    @property
    def term(self) -> float:
        return self._terms.term

    @property
    def annual_rate(self) -> float:
        return self._terms.annual_rate

    @property
    def payment_frequency(self) -> PaymentFrequency:
        return self._terms.payment_frequency

    @property
    def compounding(self) -> CompoundingFrequency:
        return self._terms.compounding

    @property
    def origination_date(self) -> date:
        return self._terms.origination_date

    @property
    def first_payment_date(self) -> date:
        return self._terms.first_payment_date

    @property
    def decimal_places(self) -> int:
        return self._terms.decimal_places

    @property
    def actual_payments(self) -> tuple[PaymentRecord, ...]:
        """Recorded real-world payments (always empty for now)."""
        return self._actual

    def payment_amount(self) -> Decimal:
        """Return the level payment amount."""
        return self._payment_amount

    def payment_count(self) -> int:
        """Return the number of scheduled payments."""
        return len(self._scheduled)

    def payment_record(self, payment_number: int) -> PaymentRecord | None:
        """Return scheduled payment ``payment_number`` (1-based), or None."""
        if 1 <= payment_number <= len(self._scheduled):
            return self._scheduled[payment_number - 1]
        return None

    def payment_info(self, payment_number: int) -> str:
        """Return a one-line description of a scheduled payment."""
        record = self.payment_record(payment_number)
        if record is None:
            return NO_PAYMENT_INFO
        return str(record)

    def scheduled_payments(self) -> tuple[PaymentRecord, ...]:
        """Return all scheduled payments in due-date order."""
        return self._scheduled

    def is_paid_off(self) -> bool:
        """Whether the schedule retires the loan before the period cap."""
        return bool(self._scheduled) and self._scheduled[-1].ending_balance == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Loan):
            return NotImplemented
        return (
            self._terms == other._terms
            and self._payment_amount == other._payment_amount
            and self._scheduled == other._scheduled
            and self._actual == other._actual
        )

    def __hash__(self) -> int:
        return hash((self._terms, self._scheduled))

    def __repr__(self) -> str:
        return (
            f"Loan(principal={self.principal!r}, term={self.term!r}, "
            f"annual_rate={self.annual_rate!r}, payment_frequency={self.payment_frequency.value}, "
            f"compounding={self.compounding.value}, payments={self.payment_count()})"
        )
