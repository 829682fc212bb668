"""
Tavola - restaurant reservation API
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from tavola.config import settings
from tavola.errors import register_exception_handlers
from tavola.schemas.common import ErrorResponse
from tavola.services.notifier import Notifier
from tavola.api import auth, reservations, tables, schedule, waitlist, menu, events
from tavola.api import settings as settings_api

VERSION = "1.0.0"

# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer() if settings.log_format == "console" else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Tavola API", version=VERSION, environment=settings.environment)
    yield
    await app.state.notifier.drain()
    logger.info("Shutting down Tavola API")


# Create FastAPI application
app = FastAPI(
    title="Tavola",
    description="Restaurant reservations, tables and waitlist",
    version=VERSION,
    lifespan=lifespan,
)

# One notifier per process, shared by every request through app.state
app.state.notifier = Notifier()

register_exception_handlers(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoints
@app.get("/health")
async def health():
    """Basic health check"""
    return {"status": "healthy", "service": "api", "version": VERSION}


@app.get("/health/ready")
async def ready():
    """Readiness check with dependency verification"""
    from sqlalchemy import text
    from tavola.database import SessionLocal

    checks = {}

    try:
        async with SessionLocal() as db:
            await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception as e:
        checks["database"] = f"failed: {str(e)}"

    try:
        from tavola.jobs.celery_app import celery_app
        celery_app.control.ping(timeout=1)
        checks["redis"] = "ok"
    except Exception as e:
        checks["redis"] = f"failed: {str(e)}"

    all_ok = all(v == "ok" for v in checks.values())

    return {
        "status": "ready" if all_ok else "not_ready",
        "checks": checks,
        "listeners": app.state.notifier.connection_count,
    }


# Error envelope documented on every API route
ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (400, 401, 403, 404, 409)}

# Include API routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"], responses=ERROR_RESPONSES)
app.include_router(reservations.router, prefix="/api/reservations", tags=["Reservations"], responses=ERROR_RESPONSES)
app.include_router(tables.router, prefix="/api/tables", tags=["Tables"], responses=ERROR_RESPONSES)
app.include_router(tables.areas_router, prefix="/api/dining-areas", tags=["Tables"], responses=ERROR_RESPONSES)
app.include_router(schedule.time_slots_router, prefix="/api/time-slots", tags=["Schedule"], responses=ERROR_RESPONSES)
app.include_router(schedule.events_router, prefix="/api/special-events", tags=["Schedule"], responses=ERROR_RESPONSES)
app.include_router(waitlist.router, prefix="/api/waitlist", tags=["Waitlist"], responses=ERROR_RESPONSES)
app.include_router(menu.router, prefix="/api/menu", tags=["Menu"], responses=ERROR_RESPONSES)
app.include_router(settings_api.router, prefix="/api/settings", tags=["Settings"], responses=ERROR_RESPONSES)

# Include event channel
app.include_router(events.router, tags=["Events"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tavola.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
