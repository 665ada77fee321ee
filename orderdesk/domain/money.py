"""Money arithmetic for orders and invoices

All amounts are Decimal and rounded to cents with ROUND_HALF_UP
(half away from zero). Tax is computed from the unrounded subtotal and
each output is rounded independently.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable, Mapping

ZERO = Decimal("0")
CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class Totals:
    """Subtotal, tax and grand total of a set of line items"""

    subtotal: Decimal
    tax_amount: Decimal
    total_amount: Decimal


def to_decimal(value: Any) -> Decimal:
    """
    Coerce a loosely typed amount to Decimal

    Missing, boolean, non-numeric and non-finite values become 0.
    Floats go through str() so 0.1 stays 0.1.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            return ZERO
    else:
        return ZERO

    if not result.is_finite():
        return ZERO
    return result


def round_money(value: Any) -> Decimal:
    """Round to exactly two decimal places"""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def line_total(quantity: Any, unit_price: Any) -> Decimal:
    """quantity x unit_price, rounded to cents"""
    return round_money(to_decimal(quantity) * to_decimal(unit_price))


def _item_value(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def compute_totals(items: Iterable[Any], tax_rate: Any) -> Totals:
    """
    Compute order/invoice totals

    Args:
        items: Line items (entities or raw mappings) exposing
            quantity and unit_price
        tax_rate: Tax as a fraction (0.2 == 20%)

    Returns:
        Totals with each amount rounded independently
    """
    subtotal = ZERO
    for item in items:
        subtotal += to_decimal(_item_value(item, "quantity")) * to_decimal(
            _item_value(item, "unit_price")
        )

    tax_amount = round_money(subtotal * to_decimal(tax_rate))
    rounded_subtotal = round_money(subtotal)

    return Totals(
        subtotal=rounded_subtotal,
        tax_amount=tax_amount,
        total_amount=round_money(rounded_subtotal + tax_amount),
    )


def display_tax_rate(tax_rate: Any) -> Decimal:
    """
    Tax rate as a percentage for display

    Stored rates come in two shapes: fractions (0.2) and percentages (20).
    Anything above 1 is taken to already be a percentage.
    """
    rate = to_decimal(tax_rate)
    if rate > 1:
        return rate
    return rate * HUNDRED
