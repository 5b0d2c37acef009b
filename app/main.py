"""FastAPI application factory and startup configuration.

Rotas públicas (feed, detalhe, catálogo de tipos, /health) e rotas
autenticadas convivem nos mesmos routers; a autorização é feita por
endpoint através das dependencies em app/api/deps.py.
"""
import time
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.exceptions import AppException, ValidationError
from app.core.logging import get_logger, set_correlation_id, setup_logging
from app.api.v1.admin import router as admin_router
from app.api.v1.auth import router as auth_router
from app.api.v1.properties import router as properties_router
from app.api.v1.property_types import router as property_types_router
from app.api.responses import fail, ok

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    setup_logging()
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)

    if settings.auto_create_schema:
        from app.database import create_schema
        await create_schema()
        logger.info("Database schema ensured")

    if settings.seed_demo_data:
        from app.database import async_session_factory
        from app.services.seed_service import seed_demo_data

        async with async_session_factory() as session:
            await seed_demo_data(session)
            await session.commit()

    yield

    logger.info("Shutting down %s", settings.app_name)


def _field_errors(exc: RequestValidationError) -> dict:
    """Collapse FastAPI's error list into {field: message}, first message per field."""
    errors = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.setdefault(".".join(loc) or "body", error.get("msg", "Valor inválido"))
    return errors


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Real estate classifieds API — listings, paid publication lifecycle, accounts and admin back-office.",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def add_trace_id(request: Request, call_next):
        request.state.trace_id = set_correlation_id(str(uuid4()))
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request handled",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        response.headers["X-Trace-Id"] = request.state.trace_id
        return response

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        trace_id = getattr(request.state, "trace_id", None)
        logger.exception("Unhandled exception [trace_id=%s]", trace_id, exc_info=exc)
        return fail(500, "Erro interno", request, errors=["Internal server error"])

    @application.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return fail(exc.status_code, exc.message, request, errors=exc.errors)

    @application.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        if exc.status_code >= 500:
            logger.error("Application error: %s", exc.message, extra={"path": request.url.path})
        return fail(exc.status_code, exc.message, request)

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return fail(422, "Dados inválidos.", request, errors=_field_errors(exc))

    application.include_router(auth_router, prefix="/api/v1/auth", tags=["auth"])
    application.include_router(properties_router, prefix="/api/v1/properties", tags=["properties"])
    application.include_router(property_types_router, prefix="/api/v1/property-types", tags=["property-types"])
    application.include_router(admin_router, prefix="/api/v1/admin", tags=["admin"])

    @application.get("/health", tags=["system"])
    async def health_check(request: Request):
        from sqlalchemy import text
        from app.database import async_session_factory

        db_status = "ok"
        try:
            async with async_session_factory() as session:
                await session.execute(text("SELECT 1"))
        except Exception as e:
            db_status = f"error: {str(e)}"

        return ok(
            {
                "status": "healthy" if db_status == "ok" else "unhealthy",
                "version": settings.app_version,
                "database": db_status,
            },
            "Health check completed",
            request,
        )

    return application


app = create_app()
