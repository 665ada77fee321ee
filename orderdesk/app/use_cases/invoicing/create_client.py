"""CreateClient Use Case

Registers a new client.
"""

import logging
from libs.result import Result, Return, Error
from orderdesk.app.repositories.client_repository import ClientRepository
from orderdesk.domain.client import Client
from .dtos import ClientDTO, CreateClientCommandDTO

logger = logging.getLogger(__name__)


class CreateClient:
    """
    Use Case: Create client

    Business Rules:
    1. reference_code and name are required
    2. reference_code must not already be used by another client
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, command: CreateClientCommandDTO) -> Result[ClientDTO]:
        try:
            reference_code = command.reference_code.strip()
            existing = await self.client_repo.list_all()
            if any(c.reference_code.lower() == reference_code.lower() for c in existing):
                return Return.err(
                    Error(
                        code="CLIENT_ALREADY_EXISTS",
                        message=f"A client with reference code {reference_code} already exists",
                        reason="Duplicate reference code",
                    )
                )

            client = await self.client_repo.create(
                Client(
                    reference_code=reference_code,
                    name=command.name.strip(),
                    email=command.email.strip(),
                    phone=command.phone.strip(),
                    location=command.location.strip(),
                    status=command.status,
                )
            )
            logger.info(f"Client {client.reference_code} created")
            return Return.ok(ClientDTO.from_entity(client))

        except Exception as e:
            logger.error(f"Creating client {command.reference_code} failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_CLIENT_FAILED",
                    message="Failed to create client",
                    reason=str(e),
                )
            )
