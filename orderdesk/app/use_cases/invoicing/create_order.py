"""CreateOrder Use Case

Creates a pending order for a client with computed totals.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from orderdesk.app.repositories.client_repository import ClientRepository
from orderdesk.app.repositories.order_repository import OrderRepository
from orderdesk.app.services.invoice_number import InvoiceNumberGenerator
from orderdesk.domain.line_item import LineItem
from orderdesk.domain.money import compute_totals
from orderdesk.domain.order import Order, OrderStatus
from .dtos import CreateOrderCommandDTO, OrderDTO

logger = logging.getLogger(__name__)


class CreateOrder:
    """
    Use Case: Create order for a client

    Business Rules:
    1. Client must exist
    2. Each item's total_price is derived from quantity x unit_price
    3. Totals come from compute_totals with the command's tax rate, or
       the configured default rate when none is given
    4. Order starts as Pending with a generated order number

    Flow:
    1. Retrieve client
    2. Price items and compute totals
    3. Persist order
    4. Return response
    """

    def __init__(
        self,
        client_repo: ClientRepository,
        order_repo: OrderRepository,
        number_generator: InvoiceNumberGenerator,
        default_tax_rate: Decimal,
    ):
        self.client_repo = client_repo
        self.order_repo = order_repo
        self.number_generator = number_generator
        self.default_tax_rate = default_tax_rate

    async def execute(self, command: CreateOrderCommandDTO) -> Result[OrderDTO]:
        try:
            # Step 1: Retrieve client
            client = await self.client_repo.get_by_id(command.client_id)
            if not client:
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client with ID {command.client_id} not found",
                        reason="Client does not exist",
                    )
                )

            # Step 2: Price items and compute totals
            items = [
                LineItem.priced(item.description.strip(), item.quantity, item.unit_price)
                for item in command.items
            ]
            tax_rate = (
                command.tax_rate if command.tax_rate is not None else self.default_tax_rate
            )
            totals = compute_totals(items, tax_rate)

            # Step 3: Persist order
            order = await self.order_repo.create(
                Order(
                    client_id=client.id,
                    client_reference_code=client.reference_code,
                    client_name=client.name,
                    order_number=self.number_generator.order_number(),
                    items=items,
                    subtotal=totals.subtotal,
                    tax_rate=tax_rate,
                    tax_amount=totals.tax_amount,
                    total_amount=totals.total_amount,
                    status=OrderStatus.PENDING,
                )
            )

            logger.info(
                f"Order #{order.order_number} created for {client.reference_code} "
                f"(total {order.total_amount})"
            )
            return Return.ok(OrderDTO.from_entity(order))

        except Exception as e:
            logger.error(f"Creating order for client {command.client_id} failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_ORDER_FAILED",
                    message="Failed to create order",
                    reason=str(e),
                )
            )
