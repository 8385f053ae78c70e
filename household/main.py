import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from household.config import get_settings
from household.core.exceptions import (
    ResourceNotFoundError,
    DuplicateResourceError,
    SnapshotError,
)
from household.api.v1.router import api_router
from household.db.session import init_db

settings = get_settings()

# Configure logging - suppress noisy third-party loggers
logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
logger = logging.getLogger(__name__)

# Silence noisy third-party libraries
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Household Expenses Backend...")
    await init_db()
    yield
    # Shutdown
    logger.info("Shutting down Household Expenses Backend...")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="""
## Household Expenses API

Track recurring and one-off household costs, split them between two people
and follow how they develop over the years.

### Features
- **Expenses**: Fixed costs billed monthly to yearly, one-off variable costs and income
- **Categories**: Named, coloured groups for the category breakdown
- **Split**: Percentage split of the monthly total between two people
- **Analytics**: Monthly totals, 12-month trend, category split and year-over-year fixed-cost trend
- **History**: Yearly snapshots of fixed costs and JSON backups
""",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "expenses", "description": "Manage expenses and income"},
        {"name": "categories", "description": "Manage expense categories"},
        {"name": "split-settings", "description": "Two-person cost split"},
        {"name": "analytics", "description": "Dashboard analytics"},
        {"name": "historical", "description": "Yearly fixed-cost snapshots"},
        {"name": "database", "description": "Backup, restore and reset"},
        {"name": "health", "description": "Health checks"},
    ],
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request validation failures as 400 with per-field messages."""
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "error": "validation_error",
            "message": "Request validation failed",
            "details": details,
        },
    )


@app.exception_handler(ResourceNotFoundError)
async def not_found_exception_handler(request: Request, exc: ResourceNotFoundError):
    return JSONResponse(
        status_code=404,
        content={
            "error": "not_found",
            "message": exc.message,
        },
    )


@app.exception_handler(DuplicateResourceError)
async def duplicate_exception_handler(request: Request, exc: DuplicateResourceError):
    return JSONResponse(
        status_code=409,
        content={
            "error": "conflict",
            "message": exc.message,
        },
    )


@app.exception_handler(SnapshotError)
async def snapshot_exception_handler(request: Request, exc: SnapshotError):
    logger.error(f"SnapshotError: {exc.message} (details={exc.details})")

    content = {
        "error": "snapshot_error",
        "message": "Could not preserve historical data, the change was not saved",
    }

    # Include detailed error info in debug mode
    if settings.DEBUG:
        content["debug"] = {"message": exc.message, "details": exc.details}

    return JSONResponse(status_code=500, content=content)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle FastAPI HTTPExceptions with consistent format."""
    error_type = {
        400: "bad_request",
        404: "not_found",
        409: "conflict",
        422: "validation_error",
    }.get(exc.status_code, "http_error")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": error_type,
            "message": exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        },
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error occurred")
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
        },
    )


# Include API routers
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


# Root health check
@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": settings.APP_NAME}
