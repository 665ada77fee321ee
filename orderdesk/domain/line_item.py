"""Line Item Value Object

One billable row on an order or invoice.
"""

from decimal import Decimal
from sqlmodel import Field
from orderdesk.domain.base import BaseModel
from orderdesk.domain.money import line_total


class LineItem(BaseModel):
    """
    Line Item - description, quantity and price of one billable row

    Domain Rules:
    - quantity and unit_price are non-negative
    - total_price = round(quantity * unit_price, 2), always derived
    - Invoices hold their own copies, never references to order items
    """

    description: str = Field(
        default="",
        description="Line item description (e.g., 'Widget')"
    )

    quantity: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Quantity (units, hours, ...)"
    )

    unit_price: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Price per unit"
    )

    total_price: Decimal = Field(
        default=Decimal("0"),
        description="Total price (quantity * unit_price, rounded to cents)"
    )

    @classmethod
    def priced(cls, description: str, quantity, unit_price) -> "LineItem":
        """Create a line item with its total derived from quantity and price"""
        return cls(
            description=description,
            quantity=quantity,
            unit_price=unit_price,
            total_price=line_total(quantity, unit_price),
        )

    def repriced(self) -> "LineItem":
        """Independent copy with total_price recomputed"""
        return LineItem.priced(self.description, self.quantity, self.unit_price)
