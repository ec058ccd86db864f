"""Exit Calc - Portuguese employment-exit payout comparison."""

__version__ = "0.1.0"
