"""Scheduled payment model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class PaymentRecord:
    """One scheduled loan payment."""

    payment_number: int  # 1, 2, 3, ...
    due_date: date
    payment_amount: Decimal
    interest_paid: Decimal
    ending_balance: Decimal

    def __str__(self) -> str:
        return (
            f"pmt number {self.payment_number}, date {self.due_date.isoformat()}, "
            f"payment ${self.payment_amount:.4f}, interest paid ${self.interest_paid:.4f}, "
            f"ending balance ${self.ending_balance:.4f}"
        )
