from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from .errors import InvalidArgumentError

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")
OVERDRAFT_CEILING = Decimal("-500.00")

# NUMERIC(19, 2): 17 integer digits.
MAX_INTEGER_DIGITS = 17
MONEY_LIMIT = Decimal(10) ** MAX_INTEGER_DIGITS

MoneyLike = Union[Decimal, int, str, float]


def to_money(value: MoneyLike) -> Decimal:
    """Normalise ``value`` to a two-decimal ``Decimal`` without rounding.

    Floats go through ``str`` so their shortest repr is used instead of the
    binary expansion. Anything that would need rounding to fit two fractional
    digits, or more integer digits than a stored balance holds, is rejected.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidArgumentError(f"Invalid amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid amount: {value!r}") from exc

    if not amount.is_finite():
        raise InvalidArgumentError(f"Invalid amount: {value!r}")
    try:
        quantized = amount.quantize(CENTS)
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"Amount out of range: {value!r}") from exc
    if quantized != amount:
        raise InvalidArgumentError("Amount cannot have more than 2 decimal places")
    if abs(quantized) >= MONEY_LIMIT:
        raise InvalidArgumentError(
            f"Amount cannot have more than {MAX_INTEGER_DIGITS} integer digits"
        )
    return quantized
