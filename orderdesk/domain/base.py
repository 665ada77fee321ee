"""Shared base for domain entities"""

import uuid
from datetime import datetime, timezone
from sqlmodel import SQLModel


def generate_uuid() -> str:
    """Generate a document identifier"""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what the store hands back"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseModel(SQLModel):
    """
    Base class for all domain entities

    Entities are validated value models. Persistence is handled by the
    document store, so none of them map to a table directly.
    """
