# formatting.py
"""Rupee amounts with Indian digit grouping (lakh / crore), no decimals."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def format_inr(amount: Number) -> str:
    """Format ``amount`` as e.g. ``12,34,567``: last three digits, then pairs."""
    whole = int(Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP))
    sign = '-' if whole < 0 else ''
    digits = str(abs(whole))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ','.join(groups + [tail])


def format_rupees(amount: Number) -> str:
    return f"₹{format_inr(amount)}"
