"""Document Store Client Repository Implementation"""

from typing import Any, Dict, List, Optional
from orderdesk.app.repositories.client_repository import ClientRepository
from orderdesk.app.services.document_store import CLIENTS, DocumentStore, Record
from orderdesk.domain.client import Client, ClientStatus
from . import records


class DocumentClientRepository(ClientRepository):
    """
    Document store implementation of ClientRepository
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create(self, client: Client) -> Client:
        client_id = await self.store.insert(CLIENTS, self._to_fields(client))
        return await self.get_by_id(client_id)

    async def get_by_id(self, client_id: str) -> Optional[Client]:
        record = await self.store.get_by_id(CLIENTS, client_id)
        return self._to_entity(record) if record else None

    async def list_all(self) -> List[Client]:
        rows = await self.store.get_all(CLIENTS, order_by="created_at", descending=True)
        return [self._to_entity(row) for row in rows]

    async def delete(self, client_id: str) -> None:
        await self.store.delete(CLIENTS, client_id)

    @staticmethod
    def _to_fields(client: Client) -> Dict[str, Any]:
        return {
            "reference_code": client.reference_code,
            "name": client.name,
            "email": client.email,
            "phone": client.phone,
            "location": client.location,
            "status": client.status.value,
        }

    @staticmethod
    def _to_entity(record: Record) -> Client:
        return Client(
            id=records.text(record, "id"),
            reference_code=records.text(record, "reference_code"),
            name=records.text(record, "name"),
            email=records.text(record, "email"),
            phone=records.text(record, "phone"),
            location=records.text(record, "location"),
            status=records.enum_or(ClientStatus, record.get("status"), ClientStatus.ACTIVE),
            created_at=records.timestamp(record.get("created_at")),
            updated_at=records.timestamp(record.get("updated_at")),
        )
