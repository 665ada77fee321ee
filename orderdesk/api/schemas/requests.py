"""Request schemas for the Orderdesk API

Pydantic models for validating incoming HTTP requests whose shape differs
from the use case commands.
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from orderdesk.app.use_cases.invoicing.dtos import LineItemInputDTO


class CreateOrderRequestSchema(BaseModel):
    """
    Request schema for creating an order

    Used for POST /clients/{client_id}/orders; the client comes from the path.
    """

    items: List[LineItemInputDTO] = Field(
        ...,
        min_length=1,
        description="Ordered line items (at least one)"
    )

    tax_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Tax rate as a fraction (0.2 = 20%); defaults to DEFAULT_TAX_RATE"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "items": [
                    {"description": "Widget", "quantity": "2", "unit_price": "10.00"},
                    {"description": "Installation", "quantity": "1", "unit_price": "45.50"}
                ]
            }
        }
