"""Console sink for printing amortization schedules."""

import json
from dataclasses import fields
from datetime import date
from decimal import Decimal
from typing import Any, Iterable

from amortization.exceptions import SinkError
from amortization.models.payment import PaymentRecord

OUTPUT_FORMATS = ("text", "json")


def record_to_dict(record: PaymentRecord) -> dict[str, Any]:
    """Convert a payment to a JSON-ready dict.

    Amounts become strings so no precision is lost; dates become ISO strings.
    """
    data: dict[str, Any] = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if isinstance(value, Decimal):
            value = str(value)
        elif isinstance(value, date):
            value = value.isoformat()
        data[f.name] = value
    return data


class ConsoleSink:
    """Output scheduled payments to console (stdout)."""

    def __init__(
        self,
        output_format: str = "text",
        pretty: bool = False,
        max_records: int | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        output_format : str
            "text" prints one line per payment, "json" one JSON object.
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per schedule (None for all).

        Raises
        ------
        SinkError
            If ``output_format`` is not supported.
        """
        if output_format not in OUTPUT_FORMATS:
            raise SinkError(
                f"Unsupported output format {output_format!r}; expected one of {OUTPUT_FORMATS}"
            )
        self.output_format = output_format
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_schedule(self, name: str, payments: Iterable[PaymentRecord]) -> None:
        """Write a schedule of payments to console."""
        records = list(payments)
        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            print(self.format_record(record))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more payments")

        self._counts[name] = self._counts.get(name, 0) + len(records)

    def format_record(self, record: PaymentRecord) -> str:
        """Render one payment in the configured format."""
        if self.output_format == "json":
            indent = 2 if self.pretty else None
            return json.dumps(record_to_dict(record), indent=indent, ensure_ascii=False)
        return str(record)

    def close(self) -> None:
        """Print summary and close."""
        if self.output_format == "json":
            return
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for name, count in self._counts.items():
            print(f"  {name}: {count} payments")
