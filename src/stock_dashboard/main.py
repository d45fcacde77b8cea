"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stock_dashboard.api.deps import reset_dependencies
from stock_dashboard.api.routers import dashboard_router, quotes_router
from stock_dashboard.config.logging_config import setup_logging
from stock_dashboard.config.settings import get_settings
from stock_dashboard.core.exceptions import AppError
from stock_dashboard.repositories.sqlalchemy.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    if get_settings().quote_cache_backend == "sqlite":
        init_db()
    yield
    # Shutdown: close the provider HTTP client
    reset_dependencies()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Portfolio valuation from a holdings file and Alpha Vantage quotes",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(dashboard_router)
app.include_router(quotes_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
