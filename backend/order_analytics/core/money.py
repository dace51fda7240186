"""
Money helpers - exact decimal arithmetic for revenue calculations

Revenue is always accumulated as Decimal. Rounding happens only when a
value is presented (reports, CLI output), never while summing.

Author: TM3
Date: 2026-10-19
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union

from order_analytics.core.config import settings

ZERO = Decimal('0')
ONE = Decimal('1')

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Convert a number to Decimal without binary floating point noise

    Floats go through str() so that 0.1 becomes Decimal('0.1') instead of
    Decimal('0.1000000000000000055511151231257827...').
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def line_revenue(quantity: int, price: Decimal, discount: Decimal) -> Decimal:
    """Revenue for one order line: quantity * price * (1 - discount)"""
    return Decimal(quantity) * price * (ONE - discount)


def sum_money(amounts: Iterable[Decimal]) -> Decimal:
    """Exact sum of monetary amounts (ZERO for an empty iterable)"""
    return sum(amounts, ZERO)


def quantize_money(amount: Decimal, places: Optional[int] = None) -> Decimal:
    """
    Round an amount for display

    Args:
        amount: Exact amount
        places: Decimal places, defaults to settings.MONEY_DECIMAL_PLACES

    Returns:
        Amount rounded half-up to the requested number of places
    """
    if places is None:
        places = settings.MONEY_DECIMAL_PLACES
    quantum = ONE.scaleb(-places)
    return amount.quantize(quantum, rounding=ROUND_HALF_UP)
