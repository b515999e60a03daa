"""Currency formatting for presentation layers"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from app.config import settings

CENT = Decimal("0.01")


def format_currency(amount: Decimal, symbol: Optional[str] = None) -> str:
    """
    Render an amount as a currency string, e.g. Decimal("1234.5") -> "$1,234.50".

    Negative amounts put the sign before the symbol ("-$1.00").
    """
    if symbol is None:
        symbol = settings.currency_symbol
    value = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
