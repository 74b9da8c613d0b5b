"""FoodieFrame API — FastAPI application for the recipe-sharing platform."""
from __future__ import annotations

import logging

from src.logging_config import setup_logging
setup_logging()
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from src.db.engine import engine, get_session
from src.db.tables import Base
from src.middleware.request_id import RequestIDMiddleware

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# ── Sentry Error Tracking ────────────────────────
if settings.SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
    from sentry_sdk.integrations.logging import LoggingIntegration

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            SqlalchemyIntegration(),
            LoggingIntegration(level=logging.WARNING, event_level=logging.ERROR),
        ],
        send_default_pii=False,
    )
    logger.info("Sentry initialized (env=%s)", settings.SENTRY_ENVIRONMENT)


def import_tables() -> None:
    """Register every table module with Base.metadata."""
    import src.db.user_tables  # noqa: F401
    import src.db.social_tables  # noqa: F401
    import src.db.comment_tables  # noqa: F401
    import src.db.group_tables  # noqa: F401


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate settings and create tables on startup; drain the pool on shutdown."""
    from src.startup_checks import validate_settings
    validate_settings()

    import_tables()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")

    yield

    logger.info("Shutting down — draining connections...")
    await engine.dispose()
    logger.info("Shutdown complete")


app = FastAPI(
    title="FoodieFrame API",
    version=VERSION,
    description="Recipe sharing: posts, events, friends, groups and saved recipes",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDMiddleware)


# ── Routers ───────────────────────────────────────────────────────────────────
from src.api.users import router as users_router
from src.api.posts import router as posts_router
from src.api.events import router as events_router
from src.api.categories import router as categories_router
from src.api.comments import router as comments_router
from src.api.friends import router as friends_router
from src.api.interactions import router as interactions_router
from src.api.recipe_groups import router as recipe_groups_router
from src.api.saved_recipes import router as saved_recipes_router
from src.api.maintenance import router as maintenance_router

app.include_router(users_router)
app.include_router(posts_router)
app.include_router(events_router)
app.include_router(categories_router)
app.include_router(comments_router)
app.include_router(friends_router)
app.include_router(interactions_router)
app.include_router(recipe_groups_router)
app.include_router(saved_recipes_router)
app.include_router(maintenance_router)


@app.get("/health")
async def health(session: AsyncSession = Depends(get_session)):
    """Deep health check — validates DB connectivity."""
    try:
        await session.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError:
        logger.warning("Health check could not reach the database", exc_info=True)
        db_status = "error"
    status = "ok" if db_status == "connected" else "degraded"
    return {"status": status, "db": db_status, "version": VERSION}


@app.get("/ready")
async def readiness(session: AsyncSession = Depends(get_session)):
    """Readiness probe — 503 until the database answers."""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        return JSONResponse(status_code=503, content={"ready": False, "reason": "database unavailable"})
    return {"ready": True}


# ── Structured Error Responses ────────────────────────────────────────────────

_ERROR_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    500: "internal_error",
}


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed input is a 400, with one entry per offending field."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "form")]
        errors.append({"field": ".".join(loc) or "request", "message": err["msg"]})
    return JSONResponse(status_code=400, content={
        "error": "validation_error",
        "message": "; ".join(f"{e['field']}: {e['message']}" for e in errors) or "Invalid request data",
        "details": errors,
    })


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Consistent error envelope; list details are accumulated validation messages."""
    content = {"error": _ERROR_CODES.get(exc.status_code, "error")}
    if isinstance(exc.detail, list):
        content["message"] = " ".join(str(d) for d in exc.detail)
        content["details"] = exc.detail
    else:
        content["message"] = exc.detail
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.info("Conflict on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=400, content={
        "error": "conflict",
        "message": "The request conflicts with existing data",
    })


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={
        "error": "internal_error",
        "message": str(exc) or exc.__class__.__name__,
    })


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.api.main:app", host=settings.API_HOST, port=settings.API_PORT)
