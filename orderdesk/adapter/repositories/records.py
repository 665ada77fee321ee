"""Record <-> entity conversion helpers

Documents come back from the store with whatever shape they were written
in. Defaults for missing fields are applied here, once, so use cases only
ever see fully-typed entities. Money is written as strings to keep Decimal
precision through JSON.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar
from orderdesk.domain.base import utcnow
from orderdesk.domain.line_item import LineItem
from orderdesk.domain.money import line_total, to_decimal

E = TypeVar("E", bound=Enum)


def text(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def optional_text(record: Mapping[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    return str(value) if value else None


def decimal_or(record: Mapping[str, Any], key: str, default: Decimal) -> Decimal:
    value = record.get(key)
    if value is None:
        return default
    return to_decimal(value)


def enum_or(enum_type: Type[E], value: Any, default: E) -> E:
    try:
        return enum_type(value)
    except ValueError:
        return default


def timestamp(value: Any) -> datetime:
    """Parse a stored timestamp into a naive UTC datetime; missing means now"""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return utcnow()
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return utcnow()


def money(value: Decimal) -> str:
    return str(value)


def items_to_fields(items: Iterable[LineItem]) -> List[Dict[str, str]]:
    return [
        {
            "description": item.description,
            "quantity": money(item.quantity),
            "unit_price": money(item.unit_price),
            "total_price": money(item.total_price),
        }
        for item in items
    ]


def items_from_record(raw_items: Any) -> List[LineItem]:
    """Negative quantities or prices read as 0 and the row total is re-derived"""
    items = []
    for raw in raw_items or []:
        if not isinstance(raw, Mapping):
            continue
        quantity = to_decimal(raw.get("quantity"))
        unit_price = to_decimal(raw.get("unit_price"))
        total = raw.get("total_price")
        if quantity < 0 or unit_price < 0:
            quantity = max(quantity, Decimal("0"))
            unit_price = max(unit_price, Decimal("0"))
            total = None
        items.append(
            LineItem(
                description=text(raw, "description"),
                quantity=quantity,
                unit_price=unit_price,
                total_price=(
                    line_total(quantity, unit_price) if total is None else to_decimal(total)
                ),
            )
        )
    return items
