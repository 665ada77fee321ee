"""In-Memory Document Store Implementation

Dict-backed store for tests and local runs. Every call yields to the event
loop once, the way a network client would, so interleavings between
concurrent callers are the same as against a real backend.
"""

import asyncio
from collections import defaultdict
from copy import deepcopy
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional
from orderdesk.app.services.document_store import (
    DocumentNotFoundError,
    DocumentStore,
    Record,
)
from orderdesk.domain.base import generate_uuid, utcnow

RESERVED_FIELDS = ("id", "created_at", "updated_at")


class InMemoryDocumentStore(DocumentStore):
    """
    In-memory implementation of DocumentStore

    Timestamps are strictly increasing so created_at ordering matches
    insertion order. Records are deep-copied in and out.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self.clock = clock
        self._collections: Dict[str, Dict[str, Record]] = defaultdict(dict)
        self._last_timestamp: Optional[datetime] = None

    def _now(self) -> datetime:
        now = self.clock()
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    async def insert(self, collection: str, fields: Record) -> str:
        await asyncio.sleep(0)
        document_id = generate_uuid()
        now = self._now()
        record = {k: deepcopy(v) for k, v in fields.items() if k not in RESERVED_FIELDS}
        record.update(id=document_id, created_at=now, updated_at=now)
        self._collections[collection][document_id] = record
        return document_id

    async def get_all(
        self,
        collection: str,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Record]:
        await asyncio.sleep(0)
        rows = [deepcopy(record) for record in self._collections[collection].values()]
        if order_by:
            rows.sort(key=lambda row: _sort_key(row.get(order_by)), reverse=descending)
        return rows

    async def get_where(
        self,
        collection: str,
        field: str,
        equals: Any,
        field2: Optional[str] = None,
        equals2: Any = None,
    ) -> List[Record]:
        await asyncio.sleep(0)
        return [
            deepcopy(record)
            for record in self._collections[collection].values()
            if record.get(field) == equals
            and (field2 is None or record.get(field2) == equals2)
        ]

    async def get_by_id(self, collection: str, document_id: str) -> Optional[Record]:
        await asyncio.sleep(0)
        record = self._collections[collection].get(document_id)
        return deepcopy(record) if record is not None else None

    async def update_fields(
        self, collection: str, document_id: str, fields: Record
    ) -> None:
        await asyncio.sleep(0)
        record = self._collections[collection].get(document_id)
        if record is None:
            raise DocumentNotFoundError(collection, document_id)
        record.update(
            {k: deepcopy(v) for k, v in fields.items() if k not in RESERVED_FIELDS}
        )
        record["updated_at"] = self._now()

    async def delete(self, collection: str, document_id: str) -> None:
        await asyncio.sleep(0)
        self._collections[collection].pop(document_id, None)


def _sort_key(value: Any):
    # Missing values sort first; mixed types compare by their string form
    if value is None:
        return (0, "")
    if isinstance(value, datetime):
        return (1, value.isoformat())
    return (1, str(value))
