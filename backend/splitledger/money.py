"""Fixed-point money helpers: amounts are held as integer cents."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENT = Decimal("0.01")

# Balances within one cent of zero count as settled.
TOLERANCE_CENTS = 1

Amount = Union[Decimal, float, int, str]


def to_decimal(amount: Amount) -> Decimal:
    return Decimal(str(amount))


def has_sub_cents(amount: Amount) -> bool:
    value = to_decimal(amount)
    return value != value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(amount: Amount) -> int:
    """Round an amount to the nearest cent (half up) and return it as an int."""
    value = to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    return int(value * 100)


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(CENT)


def divide_cents(cents: int, count: int) -> int:
    return int((Decimal(cents) / count).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def is_settled(cents: int) -> bool:
    return abs(cents) < TOLERANCE_CENTS
