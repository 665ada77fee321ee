"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from orderdesk import __version__
from orderdesk.api.auth import require_session
from orderdesk.api.error import ClientError, client_error_handler, validation_error_handler
from orderdesk.api.routes import clients, invoices, orders
from orderdesk.depends import init_document_store


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_document_store(config)
        yield

    app = FastAPI(title="Orderdesk", version=__version__, lifespan=lifespan)
    app.state.config = config

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["Content-Disposition", "X-Invoice-Id", "X-Invoice-Number"],
        )

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    for module in (clients, orders, invoices):
        app.include_router(
            module.router,
            prefix=config.API_PREFIX,
            dependencies=[Depends(require_session)],
        )

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
