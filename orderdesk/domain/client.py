"""Client Domain Entity

A customer that orders are placed for and invoices are billed to.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field
from orderdesk.domain.base import BaseModel, utcnow


class ClientStatus(str, Enum):
    """Client status types"""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class ClientSnapshot(BaseModel):
    """Contact details copied onto an invoice at issue time"""

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""


class Client(BaseModel):
    """
    Client - business customer

    Domain Rules:
    - reference_code is the business identifier shown on documents
    - Orders reference a client by id; invoices snapshot it by value
    """

    id: Optional[str] = Field(
        default=None,
        description="Store-assigned identifier"
    )

    reference_code: str = Field(
        default="",
        description="Unique business identifier (e.g., 'CL-00042')"
    )

    name: str = Field(
        description="Client display name"
    )

    email: str = Field(default="", description="Contact email")

    phone: str = Field(default="", description="Contact phone")

    location: str = Field(default="", description="Postal address or city")

    status: ClientStatus = Field(
        default=ClientStatus.ACTIVE,
        description="Client status (Active, Inactive)"
    )

    created_at: datetime = Field(default_factory=utcnow)

    updated_at: datetime = Field(default_factory=utcnow)

    def snapshot(self) -> ClientSnapshot:
        return ClientSnapshot(
            name=self.name,
            email=self.email,
            phone=self.phone,
            location=self.location,
        )
