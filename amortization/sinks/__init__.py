"""Output sinks for rendering schedules."""

from amortization.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
