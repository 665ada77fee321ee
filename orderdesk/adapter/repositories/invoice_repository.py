"""Document Store Invoice Repository Implementation

Implements invoice persistence on top of the document store.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional
from orderdesk.app.repositories.invoice_repository import InvoiceRepository
from orderdesk.app.services.document_store import INVOICES, DocumentStore, Record
from orderdesk.domain.client import ClientSnapshot
from orderdesk.domain.invoice import Invoice, InvoiceStatus
from . import records


class DocumentInvoiceRepository(InvoiceRepository):
    """
    Document store implementation of InvoiceRepository

    Invoices are stored with their client and item snapshots embedded.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        The store assigns the id and the created/updated timestamps; the
        draft itself is not modified.

        Args:
            invoice: Invoice draft to persist

        Returns:
            Created Invoice with store-assigned id
        """
        invoice_id = await self.store.insert(INVOICES, self._to_fields(invoice))
        return await self.get_by_id(invoice_id)

    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        record = await self.store.get_by_id(INVOICES, invoice_id)
        return self._to_entity(record) if record else None

    async def list_all(self) -> List[Invoice]:
        rows = await self.store.get_all(INVOICES, order_by="created_at", descending=True)
        return [self._to_entity(row) for row in rows]

    async def update_status(self, invoice_id: str, status: InvoiceStatus) -> None:
        await self.store.update_fields(INVOICES, invoice_id, {"status": status.value})

    async def delete(self, invoice_id: str) -> None:
        await self.store.delete(INVOICES, invoice_id)

    @staticmethod
    def _to_fields(invoice: Invoice) -> Dict[str, Any]:
        return {
            "invoice_number": invoice.invoice_number,
            "order_id": invoice.order_id,
            "client_id": invoice.client_id,
            "client_reference_code": invoice.client_reference_code,
            "client": invoice.client.model_dump(),
            "items": records.items_to_fields(invoice.items),
            "subtotal": records.money(invoice.subtotal),
            "tax_rate": records.money(invoice.tax_rate),
            "tax_amount": records.money(invoice.tax_amount),
            "total_amount": records.money(invoice.total_amount),
            "issue_date": invoice.issue_date.isoformat(),
            "due_date": invoice.due_date.isoformat(),
            "status": invoice.status.value,
            "notes": invoice.notes,
        }

    @staticmethod
    def _to_entity(record: Record) -> Invoice:
        zero = Decimal("0")
        client = record.get("client") or {}
        issue_date = records.timestamp(record.get("issue_date"))
        due_date = records.timestamp(record.get("due_date"))
        return Invoice(
            id=records.text(record, "id"),
            invoice_number=records.text(record, "invoice_number"),
            order_id=records.text(record, "order_id"),
            client_id=records.text(record, "client_id"),
            client_reference_code=records.text(record, "client_reference_code"),
            client=ClientSnapshot(
                name=records.text(client, "name"),
                email=records.text(client, "email"),
                phone=records.text(client, "phone"),
                location=records.text(client, "location"),
            ),
            items=records.items_from_record(record.get("items")),
            subtotal=records.decimal_or(record, "subtotal", zero),
            tax_rate=records.decimal_or(record, "tax_rate", zero),
            tax_amount=records.decimal_or(record, "tax_amount", zero),
            total_amount=records.decimal_or(record, "total_amount", zero),
            issue_date=issue_date,
            due_date=max(due_date, issue_date),
            status=records.enum_or(InvoiceStatus, record.get("status"), InvoiceStatus.PENDING),
            notes=records.optional_text(record, "notes"),
            created_at=records.timestamp(record.get("created_at")),
            updated_at=records.timestamp(record.get("updated_at")),
        )
