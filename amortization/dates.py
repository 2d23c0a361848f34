"""Payment date stepping."""

from datetime import date

from dateutil.relativedelta import relativedelta

from amortization.exceptions import InvalidDateArithmeticError
from amortization.models.enums import PaymentFrequency

# relativedelta clamps month arithmetic to the last valid day of the month
PAYMENT_STEPS: dict[PaymentFrequency, relativedelta] = {
    PaymentFrequency.WEEKLY: relativedelta(days=7),
    PaymentFrequency.BIWEEKLY: relativedelta(days=14),
    PaymentFrequency.MONTHLY: relativedelta(months=1),
    PaymentFrequency.QUARTERLY: relativedelta(months=3),
    PaymentFrequency.SEMI_ANNUALLY: relativedelta(months=6),
    PaymentFrequency.ANNUALLY: relativedelta(months=12),
}


def next_payment_date(begin_date: date, frequency: PaymentFrequency) -> date:
    """Return the payment date following ``begin_date``.

    Semi-monthly payments fall on the 1st and 15th of each month: a 1st
    steps to the 15th, anything else steps to the 1st of the next month.
    Month-based frequencies clamp to month end (Jan 31 + 1 month is the
    last day of February).

    Parameters
    ----------
    begin_date : date
        Start of the payment period.
    frequency : PaymentFrequency
        Payment frequency of the loan.

    Returns
    -------
    date
        End of the payment period.

    Raises
    ------
    InvalidDateArithmeticError
        If no valid calendar date results (e.g. stepping past year 9999).
    """
    try:
        if frequency == PaymentFrequency.SEMI_MONTHLY:
            if begin_date.day == 1:
                return begin_date.replace(day=15)
            return begin_date.replace(day=1) + relativedelta(months=1)
        return begin_date + PAYMENT_STEPS[frequency]
    except (ValueError, OverflowError) as exc:
        raise InvalidDateArithmeticError(
            f"{begin_date.isoformat()} does not return a new payment date"
        ) from exc


def day_count(begin_date: date, end_date: date) -> int:
    """Number of calendar days from ``begin_date`` to ``end_date``."""
    return (end_date - begin_date).days
