"""Employee Directory Facade API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map DirectoryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One shared httpx.AsyncClient opened on startup and closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - EmployeeDirectory stored on app.state: immutable after startup, read by
      api/dependencies.get_directory
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from directory_facade.api.error_handlers import register_error_handlers
from directory_facade.api.routes import employees, health
from directory_facade.config import get_settings
from directory_facade.infrastructure.employee_api_client import (
    EmployeeApiClient, build_http_client,
)
from directory_facade.infrastructure.observability import setup_logging
from directory_facade.services.employee_directory import EmployeeDirectory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    http_client = build_http_client(settings.http_timeout_seconds)
    app.state.directory = EmployeeDirectory(
        EmployeeApiClient(http_client, settings.employee_api_base_url),
    )
    logger.info(
        f"Employee directory facade started (upstream: {settings.employee_api_base_url})",
    )
    yield
    app.state.directory = None
    await http_client.aclose()
    logger.info("Employee directory facade shutting down")


app = FastAPI(
    title="Employee Directory Facade", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(employees.router)

register_error_handlers(app)
