"""
Display formatting helpers
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union


CURRENCY_SYMBOL = "₹"


def _group_indian(digits: str) -> str:
    """Group an integer string the en-IN way: 12,34,567"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_price(value: Union[Decimal, float, int, str, None]) -> str:
    """
    Format an amount in rupees with en-IN grouping and two decimals

    Example: 123456.7 -> "₹1,23,456.70"
    """
    amount = Decimal(str(value if value is not None else 0))
    amount = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    whole, fraction = f"{abs(amount):.2f}".split(".")
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(whole)}.{fraction}"
