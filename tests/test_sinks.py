"""Tests for the console sink."""

import json
from datetime import date
from decimal import Decimal

import pytest

from amortization.exceptions import SinkError
from amortization.loan import Loan
from amortization.models.payment import PaymentRecord
from amortization.sinks.console import ConsoleSink, record_to_dict


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        """Test default initialization."""
        sink = ConsoleSink()

        assert sink.output_format == "text"
        assert sink.pretty is False
        assert sink.max_records is None
        assert sink._counts == {}

    def test_init_invalid_format(self) -> None:
        with pytest.raises(SinkError, match="Unsupported output format"):
            ConsoleSink(output_format="xml")

    def test_write_schedule_text(self, daily_loan: Loan, capsys: pytest.CaptureFixture) -> None:
        """Test text output prints one line per payment."""
        sink = ConsoleSink()

        sink.write_schedule("scheduled", daily_loan.scheduled_payments())
        lines = capsys.readouterr().out.splitlines()

        assert len(lines) == 182
        assert lines[0] == daily_loan.payment_info(1)
        assert lines[-1] == daily_loan.payment_info(182)
        assert sink._counts["scheduled"] == 182

    def test_write_schedule_json(self, daily_loan: Loan, capsys: pytest.CaptureFixture) -> None:
        """Test JSON output prints one object per payment."""
        sink = ConsoleSink(output_format="json")

        sink.write_schedule("scheduled", daily_loan.scheduled_payments()[:2])
        lines = capsys.readouterr().out.splitlines()

        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first == {
            "payment_number": 1,
            "due_date": "2024-04-01",
            "payment_amount": "1799.8691",
            "interest_paid": "1772.0185",
            "ending_balance": "199972.1494",
        }

    def test_write_schedule_pretty_json(self, daily_loan: Loan, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(output_format="json", pretty=True)

        sink.write_schedule("scheduled", daily_loan.scheduled_payments()[:1])
        captured = capsys.readouterr()

        assert '  "payment_number": 1' in captured.out
        assert json.loads(captured.out)["due_date"] == "2024-04-01"

    def test_max_records(self, daily_loan: Loan, capsys: pytest.CaptureFixture) -> None:
        """Test truncated output reports the remaining payments."""
        sink = ConsoleSink(max_records=3)

        sink.write_schedule("scheduled", daily_loan.scheduled_payments())
        lines = capsys.readouterr().out.splitlines()

        assert len(lines) == 4
        assert lines[-1] == "... and 179 more payments"
        assert sink._counts["scheduled"] == 182

    def test_close_prints_summary(self, monthly_loan: Loan, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(max_records=1)
        sink.write_schedule("monthly", monthly_loan.scheduled_payments())
        capsys.readouterr()

        sink.close()
        captured = capsys.readouterr()

        assert "Console Sink Summary" in captured.out
        assert "monthly: 180 payments" in captured.out

    def test_close_json_is_silent(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(output_format="json")

        sink.close()

        assert capsys.readouterr().out == ""


class TestRecordToDict:
    """Tests for record_to_dict."""

    def test_record_to_dict(self) -> None:
        record = PaymentRecord(3, date(2024, 6, 1), Decimal("10"), Decimal("1"), Decimal("0"))

        assert record_to_dict(record) == {
            "payment_number": 3,
            "due_date": "2024-06-01",
            "payment_amount": "10",
            "interest_paid": "1",
            "ending_balance": "0",
        }

    def test_keeps_trailing_zeros(self) -> None:
        """Test amounts keep the precision they were rounded to."""
        record = PaymentRecord(1, date(2024, 4, 1), Decimal("93.7300"), Decimal("0.5377"), Decimal("0.0"))

        data = record_to_dict(record)

        assert data["payment_amount"] == "93.7300"
        assert data["ending_balance"] == "0.0"
