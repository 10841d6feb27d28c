"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledgerboard import __version__
from ledgerboard.api.routers import (
    accounts_router,
    budgets_router,
    categories_router,
    dashboard_router,
    reports_router,
    transactions_router,
)
from ledgerboard.app_context import get_app_context
from ledgerboard.config.logging_config import setup_logging
from ledgerboard.config.settings import get_settings
from ledgerboard.core.exceptions import AppError, NotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    context = get_app_context()
    if not context.is_initialized:
        context.initialize()
    yield
    # Shutdown (snapshots are saved on every edit)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal finance ledger: accounts, budgets and reports",
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(accounts_router)
app.include_router(categories_router)
app.include_router(transactions_router)
app.include_router(budgets_router)
app.include_router(reports_router)
app.include_router(dashboard_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    if status_code == 400:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
