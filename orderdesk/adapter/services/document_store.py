"""SQLAlchemy Document Store Implementation

Stores every collection in one "documents" table with a JSON payload,
using an async SQLAlchemy engine. Each operation runs in its own session
and commits on its own; there are no multi-document transactions.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
from sqlalchemy import JSON, Column, DateTime, Index, String, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Field, SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from orderdesk.app.services.document_store import (
    DocumentNotFoundError,
    DocumentStore,
    Record,
    StoreError,
)
from orderdesk.domain.base import generate_uuid

logger = logging.getLogger(__name__)

TIMESTAMP_FIELDS = ("created_at", "updated_at")
RESERVED_FIELDS = ("id",) + TIMESTAMP_FIELDS


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _naive_utc(value: datetime) -> datetime:
    """Records carry naive UTC timestamps whatever the driver returns"""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class StoredDocument(SQLModel, table=True):
    """
    Stored Document - one document of one collection

    Domain Rules:
    - (collection, id) is unique
    - created_at/updated_at are owned by the store
    """

    __tablename__ = "documents"
    __table_args__ = (
        Index('ix_documents_collection_created_at', 'collection', 'created_at'),
    )

    collection: str = Field(
        sa_column=Column(String(64), primary_key=True),
        description="Collection name (clients, orders, invoices)"
    )

    id: str = Field(
        sa_column=Column(String(64), primary_key=True),
        description="Document identifier"
    )

    data: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
        description="Document fields"
    )

    created_at: datetime = Field(
        default_factory=_now,
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )

    updated_at: datetime = Field(
        default_factory=_now,
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )

    def to_record(self) -> Record:
        record = dict(self.data or {})
        record["id"] = self.id
        record["created_at"] = _naive_utc(self.created_at)
        record["updated_at"] = _naive_utc(self.updated_at)
        return record


def _payload(fields: Record) -> Record:
    return {key: value for key, value in fields.items() if key not in RESERVED_FIELDS}


class SqlAlchemyDocumentStore(DocumentStore):
    """
    SQLAlchemy implementation of DocumentStore

    Equality filters compare the string form of JSON values, which covers
    the identifiers and status names the application filters on.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory

    async def insert(self, collection: str, fields: Record) -> str:
        now = _now()
        document_id = generate_uuid()
        document = StoredDocument(
            collection=collection,
            id=document_id,
            data=_payload(fields),
            created_at=now,
            updated_at=now,
        )
        try:
            async with self.session_factory() as session:
                session.add(document)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Insert into {collection} failed: {e}")
            raise StoreError(f"Failed to insert document into {collection}") from e
        return document_id

    async def get_all(
        self,
        collection: str,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Record]:
        statement = select(StoredDocument).where(StoredDocument.collection == collection)
        if order_by:
            if order_by in TIMESTAMP_FIELDS:
                column = getattr(StoredDocument, order_by)
            else:
                column = StoredDocument.data[order_by].as_string()
            statement = statement.order_by(column.desc() if descending else column.asc())
        return await self._fetch(collection, statement)

    async def get_where(
        self,
        collection: str,
        field: str,
        equals: Any,
        field2: Optional[str] = None,
        equals2: Any = None,
    ) -> List[Record]:
        statement = (
            select(StoredDocument)
            .where(StoredDocument.collection == collection)
            .where(StoredDocument.data[field].as_string() == str(equals))
        )
        if field2 is not None:
            statement = statement.where(
                StoredDocument.data[field2].as_string() == str(equals2)
            )
        return await self._fetch(collection, statement)

    async def get_by_id(self, collection: str, document_id: str) -> Optional[Record]:
        try:
            async with self.session_factory() as session:
                document = await session.get(StoredDocument, (collection, document_id))
        except SQLAlchemyError as e:
            logger.error(f"Lookup of {collection}/{document_id} failed: {e}")
            raise StoreError(f"Failed to read document {document_id} from {collection}") from e
        return document.to_record() if document else None

    async def update_fields(
        self, collection: str, document_id: str, fields: Record
    ) -> None:
        try:
            async with self.session_factory() as session:
                document = await session.get(StoredDocument, (collection, document_id))
                if document is None:
                    raise DocumentNotFoundError(collection, document_id)
                # Reassign so the JSON column is flagged dirty
                document.data = {**(document.data or {}), **_payload(fields)}
                document.updated_at = _now()
                session.add(document)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Update of {collection}/{document_id} failed: {e}")
            raise StoreError(f"Failed to update document {document_id} in {collection}") from e

    async def delete(self, collection: str, document_id: str) -> None:
        statement = (
            delete(StoredDocument)
            .where(StoredDocument.collection == collection)
            .where(StoredDocument.id == document_id)
        )
        try:
            async with self.session_factory() as session:
                await session.execute(statement)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Delete of {collection}/{document_id} failed: {e}")
            raise StoreError(f"Failed to delete document {document_id} from {collection}") from e

    async def _fetch(self, collection: str, statement) -> List[Record]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(statement)
                documents = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Query on {collection} failed: {e}")
            raise StoreError(f"Failed to query {collection}") from e
        return [document.to_record() for document in documents]
