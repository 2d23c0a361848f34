"""Synthetic loan term generators."""

from amortization.generators.loan import LoanTermsGenerator

__all__ = ["LoanTermsGenerator"]
