"""Scheduled payment generation."""

from __future__ import annotations

import logging
from typing import Iterator

from amortization.config import MAX_PERIODS
from amortization.dates import day_count, next_payment_date
from amortization.models.enums import CompoundingFrequency
from amortization.models.loan import LoanTerms
from amortization.models.payment import PaymentRecord
from amortization.rates import (
    DailyRateTable,
    compounding_periods,
    payments_per_year,
    periodic_rate,
)
from amortization.rounding import to_currency

logger = logging.getLogger(__name__)


def fixed_period_rate(terms: LoanTerms) -> float:
    """Return the period rate used for every payment of a non-daily loan."""
    periods = compounding_periods(terms.compounding)
    if payments_per_year(terms.payment_frequency) == periods:
        return (terms.annual_rate / 100.0) / periods
    return periodic_rate(terms.annual_rate, terms.compounding, terms.payment_frequency)


def iter_scheduled_payments(
    terms: LoanTerms,
    payment_amount: float,
    max_periods: int = MAX_PERIODS,
) -> Iterator[PaymentRecord]:
    """Generate the scheduled payments for a loan.

    The first period runs from the origination date to the first payment
    date; later periods step by the payment frequency. With daily
    compounding each period's rate follows its actual day count, otherwise
    one fixed rate applies throughout. When the level payment exceeds the
    outstanding balance the payment is resized to retire the loan.

    Generation stops once the balance reaches zero or after
    ``max_periods`` payments, whichever comes first. Hitting the cap is
    not an error: the last record simply carries a positive balance.

    Parameters
    ----------
    terms : LoanTerms
        Loan inputs.
    payment_amount : float
        Level payment, already rounded.
    max_periods : int
        Hard cap on the number of generated payments.

    Yields
    ------
    PaymentRecord
        Payments in due-date order.
    """
    places = terms.decimal_places
    daily_rates: DailyRateTable | None = None
    period_rate = 0.0

    if terms.compounding == CompoundingFrequency.DAILY:
        daily_rates = DailyRateTable(terms.annual_rate)
    else:
        period_rate = fixed_period_rate(terms)

    payment = payment_amount
    begin_balance = terms.principal
    end_balance = 1.0  # any positive value enters the loop
    begin_date = terms.origination_date
    end_date = terms.first_payment_date
    period = 0

    while end_balance > 0 and period < max_periods:
        if period > 0:
            begin_date = end_date
            end_date = next_payment_date(begin_date, terms.payment_frequency)
            begin_balance = end_balance

        period += 1

        if daily_rates is not None:
            period_rate = daily_rates.rate_for(day_count(begin_date, end_date))
        logger.debug("pmt # %d, period interest rate %r", period, period_rate)

        interest = begin_balance * period_rate

        if payment <= begin_balance:
            end_balance = begin_balance - (payment - interest)
        else:
            payment = begin_balance + interest
            end_balance = 0.0
        logger.debug(
            "pmt # %d, end date %s, interest %r, end bal %r",
            period,
            end_date,
            interest,
            end_balance,
            extra={
                "payment_number": period,
                "due_date": end_date,
                "ending_balance": end_balance,
            },
        )

        yield PaymentRecord(
            payment_number=period,
            due_date=end_date,
            payment_amount=to_currency(payment, places),
            interest_paid=to_currency(interest, places),
            ending_balance=to_currency(end_balance, places),
        )

    if period and end_balance > 0:
        logger.warning(
            "Schedule stopped after %d payments with %.*f still outstanding",
            period,
            places,
            end_balance,
        )
