"""Entry point for the FastAPI application.

This module constructs the FastAPI app, includes all routers and
sets up startup and shutdown events. Run it with uvicorn:

```bash
uvicorn receipt_api.api.main:app --reload
```

Tests build isolated instances through ``create_app``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from receipt_api.core.config import settings
from receipt_api.core.observability import init_sentry
from receipt_api.api.error_handlers import register_exception_handlers
from receipt_api.api.endpoints.health import router as health_router
from receipt_api.api.routes.receipts import router as receipts_router
from receipt_api.api.routes.users import router as users_router
from receipt_api.api.routes.receipt_items import router as receipt_items_router
from receipt_api.api.routes.products import router as products_router
from receipt_api.api.routes.pdf import router as pdf_router

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting up %s (%s)...", settings.PROJECT_NAME, settings.ENVIRONMENT)
    if init_sentry("api"):
        logger.info("Sentry SDK initialized (api)")
    yield
    logger.info("Shutting down...")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    register_exception_handlers(app)

    prefix = settings.API_PREFIX
    app.include_router(receipts_router, prefix=prefix)
    app.include_router(users_router, prefix=prefix)
    app.include_router(receipt_items_router, prefix=prefix)
    app.include_router(products_router, prefix=prefix)
    app.include_router(pdf_router, prefix=prefix)
    app.include_router(health_router, prefix=prefix)
    return app


app = create_app()
