"""Currency rounding and display helpers (whole euros)."""

import math


def round_half_up(amount: float) -> int:
    """Round to the nearest whole euro, halves towards +infinity.

    Python's round() uses banker's rounding (2.5 -> 2); payout figures use
    the schoolbook rule instead (2.5 -> 3, -2.5 -> -2).
    """
    return math.floor(amount + 0.5)


def format_currency(amount: float) -> str:
    """Format whole euros the pt-PT way.

    Examples:
        format_currency(36000)  # -> '36.000 €'
        format_currency(0)      # -> '0 €'
    """
    value = round_half_up(amount)
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,}".replace(",", ".")
    return f"{sign}{grouped} €"
