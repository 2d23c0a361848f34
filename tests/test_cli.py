"""Tests for the command line entry point."""

import json
import os
from typing import Iterator
from unittest.mock import patch

import pytest

from amortization.cli import build_parser, main
from amortization.config import ScheduleConfig


@pytest.fixture(autouse=True)
def clean_env() -> Iterator[None]:
    """Run without schedule-related environment variables."""
    env = {
        k: v
        for k, v in os.environ.items()
        if k not in ("AMORTIZATION_DECIMAL_PLACES", "AMORTIZATION_MAX_PERIODS", "OUTPUT_FORMAT", "PRETTY_JSON")
    }
    with patch.dict(os.environ, env, clear=True):
        yield


class TestBuildParser:
    """Tests for build_parser."""

    def test_defaults(self) -> None:
        args = build_parser(ScheduleConfig()).parse_args([])

        assert args.principal == 200000.0
        assert args.term == 15.0
        assert args.rate == 7.0
        assert args.frequency == "MONTHLY"
        assert args.compounding == "DAILY"
        assert args.decimal_places == 4
        assert args.max_periods == 500
        assert args.format == "text"

    def test_defaults_follow_config(self) -> None:
        args = build_parser(ScheduleConfig(decimal_places=2, output_format="json")).parse_args([])

        assert args.decimal_places == 2
        assert args.format == "json"

    def test_frequency_is_case_insensitive(self) -> None:
        args = build_parser(ScheduleConfig()).parse_args(["--frequency", "semi_monthly"])

        assert args.frequency == "SEMI_MONTHLY"

    def test_rejects_unknown_frequency(self) -> None:
        with pytest.raises(SystemExit):
            build_parser(ScheduleConfig()).parse_args(["--frequency", "daily"])


class TestMain:
    """Tests for main."""

    def test_default_schedule(self, capsys: pytest.CaptureFixture) -> None:
        """Test the default loan prints its full schedule."""
        assert main([]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 182
        assert lines[0] == (
            "pmt number 1, date 2024-04-01, payment $1799.8691, "
            "interest paid $1772.0185, ending balance $199972.1494"
        )
        assert lines[-1] == (
            "pmt number 182, date 2039-05-01, payment $93.7322, "
            "interest paid $0.5377, ending balance $0.0000"
        )

    def test_json_output(self, capsys: pytest.CaptureFixture) -> None:
        argv = [
            "--principal", "12000",
            "--term", "1",
            "--frequency", "monthly",
            "--compounding", "monthly",
            "--origination", "2024-01-01",
            "--first-payment", "2024-02-01",
            "--decimal-places", "2",
            "--format", "json",
        ]

        assert main(argv) == 0

        records = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert records[0]["payment_number"] == 1
        assert records[0]["due_date"] == "2024-02-01"
        assert records[-1]["ending_balance"] == "0.0"

    def test_summary(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--summary"]) == 0

        assert "scheduled: 182 payments" in capsys.readouterr().out

    def test_logs_to_stderr(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--log-level", "INFO"]) == 0

        captured = capsys.readouterr()
        assert "182 payments of 1799.8691" in captured.err
        assert "182 payments of" not in captured.out
