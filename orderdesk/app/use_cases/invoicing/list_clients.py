"""ListClients Use Case

Lists clients with their pending order counts.
"""

import asyncio
from enum import Enum
from libs.result import Result, Return, Error
from orderdesk.app.repositories.client_repository import ClientRepository
from orderdesk.app.repositories.order_repository import OrderRepository
from .dtos import ClientDTO, ListClientsResponseDTO


class ClientFilter(str, Enum):
    """Client list filters"""
    ALL = "All"
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    PENDING_ORDERS = "PendingOrders"


class ListClients:
    """
    Use case: List clients

    Clients are returned newest first, then stably re-sorted so that
    clients with pending orders come last.
    """

    def __init__(self, client_repo: ClientRepository, order_repo: OrderRepository):
        self.client_repo = client_repo
        self.order_repo = order_repo

    async def execute(
        self, client_filter: ClientFilter = ClientFilter.ALL
    ) -> Result[ListClientsResponseDTO]:
        try:
            clients = await self.client_repo.list_all()
            pending = await asyncio.gather(
                *(self.order_repo.get_pending_by_client(client.id) for client in clients)
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_CLIENTS_FAILED",
                    message="Failed to load clients",
                    reason=str(e),
                )
            )

        dtos = [
            ClientDTO.from_entity(client, pending_orders_count=len(orders))
            for client, orders in zip(clients, pending)
        ]

        if client_filter == ClientFilter.PENDING_ORDERS:
            dtos = [dto for dto in dtos if dto.pending_orders_count > 0]
        elif client_filter != ClientFilter.ALL:
            dtos = [dto for dto in dtos if dto.status == client_filter.value]

        dtos.sort(key=lambda dto: 1 if dto.pending_orders_count > 0 else 0)

        return Return.ok(ListClientsResponseDTO(clients=dtos, total=len(dtos)))
