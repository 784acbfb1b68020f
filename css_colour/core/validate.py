"""Channel validation and CSS number formatting shared by RGB and HSL."""

import math
import numbers
from decimal import Decimal
from typing import Any


def is_number(value: Any) -> bool:
    """True for any real number, numpy scalars included; False for bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_bad_num(value: Any, max_value: float) -> bool:
    """A channel is bad if it is not a number, NaN, below 0, or above max_value."""
    return not is_number(value) or math.isnan(value) or value < 0 or value > max_value


def format_number(value: float) -> str:
    """Print a channel the way CSS expects: 1.0 -> '1', 0.5 -> '0.5', 5e-05 -> '0.00005'."""
    if isinstance(value, numbers.Integral) or float(value).is_integer():
        return str(int(value))
    text = str(value)
    if 'e' in text or 'E' in text:
        return format(Decimal(text), 'f')
    return text


def join_args(args: tuple) -> str:
    return ', '.join(str(a) for a in args)
