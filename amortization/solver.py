"""Level payment amount for an amortizing loan."""

from amortization.models.enums import CompoundingFrequency, PaymentFrequency
from amortization.rates import payments_per_year, periodic_rate
from amortization.rounding import round_half_away


def payment_amount(
    principal: float,
    term: float,
    annual_rate: float,
    frequency: PaymentFrequency,
    compounding: CompoundingFrequency,
    decimal_places: int,
) -> float:
    """Compute the level payment that retires ``principal`` over ``term`` years.

    Parameters
    ----------
    principal : float
        Amount borrowed.
    term : float
        Loan term in years.
    annual_rate : float
        Nominal annual rate in percent.
    frequency : PaymentFrequency
        Payment frequency.
    compounding : CompoundingFrequency
        Interest compounding frequency.
    decimal_places : int
        Digits to round the payment to.

    Returns
    -------
    float
        Annuity payment ``P * i * (1 + i)**n / ((1 + i)**n - 1)``, rounded
        half away from zero.
    """
    rate = periodic_rate(annual_rate, compounding, frequency)
    total_payments = term * payments_per_year(frequency)

    if rate == 0:
        return round_half_away(principal / total_payments, decimal_places)

    factor = (1.0 + rate) ** total_payments
    return round_half_away(principal * rate * factor / (factor - 1.0), decimal_places)
