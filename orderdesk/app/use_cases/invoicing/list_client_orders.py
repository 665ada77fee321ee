"""ListClientOrders Use Case"""

from libs.result import Result, Return, Error
from orderdesk.app.repositories.client_repository import ClientRepository
from orderdesk.app.repositories.order_repository import OrderRepository
from .dtos import ListOrdersResponseDTO, OrderDTO


class ListClientOrders:
    """
    Use case: List every order of a client, newest first
    """

    def __init__(self, client_repo: ClientRepository, order_repo: OrderRepository):
        self.client_repo = client_repo
        self.order_repo = order_repo

    async def execute(self, client_id: str) -> Result[ListOrdersResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            if not client:
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client with ID {client_id} not found",
                        reason="Client does not exist",
                    )
                )
            orders = await self.order_repo.get_by_client(client_id)
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_ORDERS_FAILED",
                    message=f"Failed to load orders for client {client_id}",
                    reason=str(e),
                )
            )

        orders.sort(key=lambda order: order.created_at, reverse=True)
        return Return.ok(
            ListOrdersResponseDTO(
                orders=[OrderDTO.from_entity(order) for order in orders],
                total=len(orders),
            )
        )
