"""Blog List Backend - shared blog links with owners, likes and comments."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from bloglist.configs import settings
from bloglist.db import engine
from bloglist.errors import (
    AuthFailure,
    DatabaseError,
    Forbidden,
    PasswordHashingError,
    ValidationError,
    app_validation_exception_handler,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.monitoring import get_logger
from bloglist.routes import auth_router, blog_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str

logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog List Backend API",
    version="1.0.0",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)


routes = [
    blog_router,
    user_router,
    auth_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (ValidationError, app_validation_exception_handler),
    (AuthFailure, auth_exception_handler),
    (Forbidden, auth_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> ORJSONResponse:
    """
    Health check endpoint with database connectivity.

    Returns
    -------
    ORJSONResponse
        Health status; 503 when the database cannot be reached.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        database, status_code = "connected", 200
    except (SQLAlchemyError, OSError):
        logger.exception("Health check database ping failed")
        database, status_code = "unavailable", HTTP_503_SERVICE_UNAVAILABLE

    health = HealthCheckResponse(
        version=app.version,
        status="ok" if status_code == 200 else "degraded",
        timestamp=today_str(),
        database=database,
    )
    return ORJSONResponse(content=health.model_dump(), status_code=status_code)
