"""
Money coercion helpers.

Amounts, rates and hours are held as Decimal so products are exact. Floats
are converted through their string form, never their binary value.
"""

from decimal import Decimal, InvalidOperation
from typing import Union

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Coerce a number to a finite Decimal.

    Raises:
        TypeError: If ``value`` is not a number or numeric string
        ValueError: If ``value`` is not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise TypeError(f"Expected a number, got {type(value).__name__}")

    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {value!r}") from e

    if not number.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")
    return number


def format_amount(amount: Decimal) -> str:
    """
    Format an amount with at least two decimal places, never rounding.

    ``Decimal("2500")`` renders as ``2500.00``; ``Decimal("241.6425")`` keeps
    all four places.
    """
    exponent = amount.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -2:
        return f"{amount:f}"
    return f"{amount:.2f}"
