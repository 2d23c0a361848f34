"""Synthetic loan terms generator."""

import random
from datetime import date, timedelta
from typing import Iterator

from faker import Faker

from amortization.dates import next_payment_date
from amortization.models.enums import CompoundingFrequency, PaymentFrequency
from amortization.models.loan import LoanTerms


class LoanTermsGenerator:
    """Generate realistic, fully amortizing loan terms.

    Each generator owns its Faker and ``random.Random`` instances and leaves
    the module-level ``random`` state untouched.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    start_date, end_date : date
        Range origination dates are drawn from.
    zero_rate_share : float
        Probability of an interest-free loan.
    locale : str
        Faker locale (default ``en_US``).
    """

    FREQUENCIES = list(PaymentFrequency)
    COMPOUNDINGS = list(CompoundingFrequency)

    # Terms in years, kept short enough that every schedule fits under the
    # period cap (at most 360 nominal payments)
    TERMS = {
        PaymentFrequency.WEEKLY: [1, 2, 3, 5],
        PaymentFrequency.BIWEEKLY: [1, 2, 5, 10],
        PaymentFrequency.SEMI_MONTHLY: [1, 5, 10, 15],
        PaymentFrequency.MONTHLY: [1, 3, 5, 10, 15, 20, 25],
        PaymentFrequency.QUARTERLY: [1, 5, 10, 15, 20, 30],
        PaymentFrequency.SEMI_ANNUALLY: [1, 5, 10, 15, 20, 30],
        PaymentFrequency.ANNUALLY: [1, 5, 10, 15, 20, 30],
    }

    def __init__(
        self,
        seed: int | None = None,
        start_date: date = date(2000, 1, 1),
        end_date: date = date(2035, 12, 31),
        zero_rate_share: float = 0.05,
        locale: str = "en_US",
    ) -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
        self.start_date = start_date
        self.end_date = end_date
        self.zero_rate_share = zero_rate_share

    def generate(self) -> LoanTerms:
        """Generate one set of loan terms.

        Returns
        -------
        LoanTerms
            Terms with a positive principal, a rate between 0% and 15%,
            and a first payment date one payment period after a short
            funding delay.
        """
        frequency = self.rng.choice(self.FREQUENCIES)
        compounding = self.rng.choice(self.COMPOUNDINGS)

        if self.rng.random() < self.zero_rate_share:
            annual_rate = 0.0
        else:
            annual_rate = round(self.rng.uniform(0.5, 15.0), 3)

        origination = self.fake.date_between(start_date=self.start_date, end_date=self.end_date)
        # Funding usually settles a few days after signing
        funded = origination + timedelta(days=self.rng.randint(0, 10))

        return LoanTerms(
            principal=float(self.rng.randint(5, 1500) * 1000),
            term=float(self.rng.choice(self.TERMS[frequency])),
            annual_rate=annual_rate,
            payment_frequency=frequency,
            compounding=compounding,
            origination_date=origination,
            first_payment_date=next_payment_date(funded, frequency),
            decimal_places=self.rng.choice([2, 4]),
        )

    def generate_batch(self, count: int) -> Iterator[LoanTerms]:
        """Generate ``count`` sets of loan terms."""
        for _ in range(count):
            yield self.generate()
