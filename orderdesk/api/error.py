"""API error handling

Use case errors are raised as ClientError and rendered as
{"error": {"code", "message", "reason", "details"}}.
"""

import logging
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"CLIENT_NOT_FOUND", "ORDER_NOT_FOUND", "INVOICE_NOT_FOUND"}
CONFLICT_CODES = {"ORDER_ALREADY_PROCESSED", "CLIENT_ALREADY_EXISTS"}
# The invoice was persisted but a later step failed
PARTIAL_FAILURE_CODES = {"ORDER_UPDATE_FAILED", "DOCUMENT_RENDER_FAILED"}


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def status_for(error: Error) -> int:
    if error.code in NOT_FOUND_CODES:
        return status.HTTP_404_NOT_FOUND
    if error.code in CONFLICT_CODES:
        return status.HTTP_409_CONFLICT
    if error.code in PARTIAL_FAILURE_CODES:
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_400_BAD_REQUEST


def raise_for_error(error: Error):
    raise ClientError(error, status_code=status_for(error))


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.error.code}: {exc.error.reason}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.error.to_dict()})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = Error(
        code="VALIDATION_ERROR",
        message="Invalid request parameters",
        details={"errors": jsonable_errors(exc)},
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": error.to_dict()})


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
