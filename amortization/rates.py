"""Periods-per-year lookups and periodic interest rate derivation."""

from amortization.models.enums import CompoundingFrequency, PaymentFrequency

COMPOUNDING_PERIODS: dict[CompoundingFrequency, float] = {
    CompoundingFrequency.DAILY: 365.0,
    CompoundingFrequency.MONTHLY: 12.0,
    CompoundingFrequency.QUARTERLY: 4.0,
    CompoundingFrequency.SEMI_ANNUALLY: 2.0,
    CompoundingFrequency.ANNUALLY: 1.0,
}

PAYMENTS_PER_YEAR: dict[PaymentFrequency, float] = {
    PaymentFrequency.WEEKLY: 52.0,
    PaymentFrequency.BIWEEKLY: 26.0,
    PaymentFrequency.SEMI_MONTHLY: 24.0,
    PaymentFrequency.MONTHLY: 12.0,
    PaymentFrequency.QUARTERLY: 4.0,
    PaymentFrequency.SEMI_ANNUALLY: 2.0,
    PaymentFrequency.ANNUALLY: 1.0,
}

# Day counts that monthly payment periods almost always span
COMMON_PERIOD_DAYS = (28, 29, 30, 31)


def compounding_periods(compounding: CompoundingFrequency) -> float:
    """Return the number of compounding periods per year."""
    return COMPOUNDING_PERIODS[compounding]


def payments_per_year(frequency: PaymentFrequency) -> float:
    """Return the number of payments per year."""
    return PAYMENTS_PER_YEAR[frequency]


def periodic_rate(
    annual_rate: float,
    compounding: CompoundingFrequency,
    frequency: PaymentFrequency,
) -> float:
    """Convert a nominal annual rate to an effective rate per payment period.

    Parameters
    ----------
    annual_rate : float
        Nominal annual rate in percent (7.0 means 7%).
    compounding : CompoundingFrequency
        How often interest compounds.
    frequency : PaymentFrequency
        How often payments are made.

    Returns
    -------
    float
        ``(1 + (r / 100) / c) ** (c / p) - 1``.
    """
    c = compounding_periods(compounding)
    p = payments_per_year(frequency)
    return (1.0 + (annual_rate / 100.0) / c) ** (c / p) - 1.0


class DailyRateTable:
    """Period rates for daily compounding, keyed by the period's day count.

    Rates for 28-31 day periods are computed up front; any other day
    count is computed on demand with the same formula.
    """

    def __init__(self, annual_rate: float) -> None:
        self.daily_rate = (annual_rate / 100.0) / COMPOUNDING_PERIODS[CompoundingFrequency.DAILY]
        self._rates = {days: self._compound(days) for days in COMMON_PERIOD_DAYS}

    def rate_for(self, days: int) -> float:
        """Return the compounded rate for a period of ``days`` days."""
        rate = self._rates.get(days)
        if rate is None:
            rate = self._compound(days)
        return rate

    def _compound(self, days: int) -> float:
        return (1.0 + self.daily_rate) ** days - 1.0
