"""Document Store Order Repository Implementation"""

from decimal import Decimal
from typing import Any, Dict, List, Optional
from orderdesk.app.repositories.order_repository import OrderRepository
from orderdesk.app.services.document_store import ORDERS, DocumentStore, Record
from orderdesk.domain.order import Order, OrderStatus
from . import records

# Orders written before tax rates were stored carry the standard rate
DEFAULT_ORDER_TAX_RATE = Decimal("0.2")


class DocumentOrderRepository(OrderRepository):
    """
    Document store implementation of OrderRepository
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create(self, order: Order) -> Order:
        order_id = await self.store.insert(ORDERS, self._to_fields(order))
        return await self.get_by_id(order_id)

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        record = await self.store.get_by_id(ORDERS, order_id)
        return self._to_entity(record) if record else None

    async def get_by_client(self, client_id: str) -> List[Order]:
        rows = await self.store.get_where(ORDERS, "client_id", client_id)
        return [self._to_entity(row) for row in rows]

    async def get_pending_by_client(self, client_id: str) -> List[Order]:
        rows = await self.store.get_where(
            ORDERS, "client_id", client_id, "status", OrderStatus.PENDING.value
        )
        return [self._to_entity(row) for row in rows]

    async def mark_completed(self, order_id: str, invoice_id: str) -> None:
        await self.store.update_fields(
            ORDERS,
            order_id,
            {"status": OrderStatus.COMPLETED.value, "invoice_id": invoice_id},
        )

    @staticmethod
    def _to_fields(order: Order) -> Dict[str, Any]:
        return {
            "client_id": order.client_id,
            "client_reference_code": order.client_reference_code,
            "client_name": order.client_name,
            "order_number": order.order_number,
            "items": records.items_to_fields(order.items),
            "subtotal": records.money(order.subtotal),
            "tax_rate": records.money(order.tax_rate),
            "tax_amount": records.money(order.tax_amount),
            "total_amount": records.money(order.total_amount),
            "status": order.status.value,
            "invoice_id": order.invoice_id,
        }

    @staticmethod
    def _to_entity(record: Record) -> Order:
        zero = Decimal("0")
        return Order(
            id=records.text(record, "id"),
            client_id=records.text(record, "client_id"),
            client_reference_code=records.text(record, "client_reference_code"),
            client_name=records.text(record, "client_name"),
            order_number=records.text(record, "order_number"),
            items=records.items_from_record(record.get("items")),
            subtotal=records.decimal_or(record, "subtotal", zero),
            tax_rate=records.decimal_or(record, "tax_rate", DEFAULT_ORDER_TAX_RATE),
            tax_amount=records.decimal_or(record, "tax_amount", zero),
            total_amount=records.decimal_or(record, "total_amount", zero),
            status=records.enum_or(OrderStatus, record.get("status"), OrderStatus.PENDING),
            created_at=records.timestamp(record.get("created_at")),
            updated_at=records.timestamp(record.get("updated_at")),
            invoice_id=records.optional_text(record, "invoice_id"),
        )
