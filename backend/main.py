"""
Page store FastAPI application.

Entry point for the API server. Serve with any ASGI server, e.g.
`<server> backend.main:app`. Run `alembic upgrade head` against
DATABASE_URL before the first start.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend import db
from backend.config import settings
from backend.routes import pages as pages_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Opens the database pool on startup and closes it on shutdown.
    """
    await db.init_pool()
    logger.info("page store started (environment=%s)", settings.ENVIRONMENT)

    yield

    await db.close_pool()


app = FastAPI(
    title="Visual Builder",
    docs_url="/docs" if settings.ENVIRONMENT == "development" else None,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

# Register routes
app.include_router(pages_routes.router)


@app.get("/health")
async def health():
    """Health check endpoint for uptime monitoring."""
    return {"status": "ok"}
