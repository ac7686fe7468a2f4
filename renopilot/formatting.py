"""
Display formatting — presentation only.

Computed values keep full float precision; rounding happens here.
"""

import math

from .config import settings


def format_currency(amount, symbol: str = None) -> str:
    """Format a number as $X,XXX.XX"""
    if symbol is None:
        symbol = settings.CURRENCY_SYMBOL
    try:
        value = float(amount)
    except (ValueError, TypeError):
        return f"{symbol}0.00"
    if value < 0:
        return f"-{symbol}{abs(value):,.2f}"
    return f"{symbol}{value:,.2f}"


def format_area(area) -> str:
    return f"{float(area):.2f} m²"


def format_volume(volume) -> str:
    return f"{float(volume):.2f} L"


def format_time(minutes) -> str:
    """Minutes → "Xh Ym", or "Ym" under an hour."""
    total = int(math.floor(float(minutes) + 0.5))
    hours, mins = divmod(total, 60)
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"
