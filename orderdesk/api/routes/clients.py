"""Client API Routes

FastAPI routes for client management and client orders.
"""

from decimal import Decimal
from fastapi import APIRouter, Depends, Query, status

from orderdesk.adapter.repositories import DocumentClientRepository, DocumentOrderRepository
from orderdesk.api.error import raise_for_error
from orderdesk.api.schemas.requests import CreateOrderRequestSchema
from orderdesk.app.services.document_store import DocumentStore
from orderdesk.app.services.invoice_number import InvoiceNumberGenerator
from orderdesk.app.use_cases.invoicing import (
    ClientDTO,
    ClientFilter,
    CreateClient,
    CreateClientCommandDTO,
    CreateOrder,
    CreateOrderCommandDTO,
    DeleteClient,
    ListClientOrders,
    ListClients,
    ListClientsResponseDTO,
    ListOrdersResponseDTO,
    OrderDTO,
)
from orderdesk.depends import get_config, get_document_store, get_number_generator

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post(
    "",
    response_model=ClientDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {
            "description": "Reference code already used",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "CLIENT_ALREADY_EXISTS",
                            "message": "A client with reference code CL-00042 already exists"
                        }
                    }
                }
            }
        }
    }
)
async def create_client(
    request: CreateClientCommandDTO,
    store: DocumentStore = Depends(get_document_store),
):
    """Register a new client."""
    use_case = CreateClient(DocumentClientRepository(store))
    result = await use_case.execute(request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=ListClientsResponseDTO)
async def list_clients(
    client_filter: ClientFilter = Query(ClientFilter.ALL, alias="status"),
    store: DocumentStore = Depends(get_document_store),
):
    """
    List clients newest first with their pending order counts.

    **Query parameters:**
    - `status`: All (default), Active, Inactive or PendingOrders

    Clients with pending orders are listed last.
    """
    use_case = ListClients(DocumentClientRepository(store), DocumentOrderRepository(store))
    result = await use_case.execute(client_filter)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{client_id}", response_model=ClientDTO)
async def delete_client(
    client_id: str,
    store: DocumentStore = Depends(get_document_store),
):
    """Delete a client. Its orders and invoices are kept."""
    use_case = DeleteClient(DocumentClientRepository(store))
    result = await use_case.execute(client_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{client_id}/orders",
    response_model=OrderDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    client_id: str,
    request: CreateOrderRequestSchema,
    store: DocumentStore = Depends(get_document_store),
    number_generator: InvoiceNumberGenerator = Depends(get_number_generator),
    config=Depends(get_config),
):
    """
    Create a pending order for a client.

    **Request body:**
    - `items` (required): at least one line with description, quantity > 0
      and unit_price >= 0
    - `tax_rate` (optional): fraction, defaults to the configured rate

    Subtotal, tax and total are computed server side.
    """
    command = CreateOrderCommandDTO(
        client_id=client_id,
        items=request.items,
        tax_rate=request.tax_rate,
    )

    use_case = CreateOrder(
        DocumentClientRepository(store),
        DocumentOrderRepository(store),
        number_generator,
        default_tax_rate=Decimal(str(config.DEFAULT_TAX_RATE)),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{client_id}/orders", response_model=ListOrdersResponseDTO)
async def list_client_orders(
    client_id: str,
    store: DocumentStore = Depends(get_document_store),
):
    """List a client's orders, newest first."""
    use_case = ListClientOrders(DocumentClientRepository(store), DocumentOrderRepository(store))
    result = await use_case.execute(client_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
