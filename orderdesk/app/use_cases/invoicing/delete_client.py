"""DeleteClient Use Case"""

import logging
from libs.result import Result, Return, Error
from orderdesk.app.repositories.client_repository import ClientRepository
from .dtos import ClientDTO

logger = logging.getLogger(__name__)


class DeleteClient:
    """
    Use Case: Delete client

    Only the client document is removed. Its orders and invoices keep
    their own copies of the client's details.
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, client_id: str) -> Result[ClientDTO]:
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

            await self.client_repo.delete(client_id)
            logger.info(f"Client {client.reference_code} deleted")
            return Return.ok(ClientDTO.from_entity(client))

        except Exception as e:
            logger.error(f"Deleting client {client_id} failed: {e}")
            return Return.err(
                Error(
                    code="DELETE_CLIENT_FAILED",
                    message="Failed to delete client",
                    reason=str(e),
                )
            )
