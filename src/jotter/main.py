# Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import auth_router, health_router, notes_router
from .config import get_settings
from .core.exceptions import JotterError, UnauthenticatedError, UnexpectedError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse
from .database import create_tables, dispose_engine

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Jotter application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "identity_mode": settings.identity_mode,
        },
    )
    if settings.identity_mode == "header":
        logger.warning(
            f"Identity taken from the unverified {settings.identity_header} header; demo mode only"
        )

    if settings.db_create_tables:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise
    else:
        logger.info("Skipping DB table creation (db_create_tables=false)")

    yield

    logger.info("Shutting down Jotter application")
    await dispose_engine()


def _error_response(exc: JotterError) -> JSONResponse:
    # internal context stays in the logs for server-side failures
    details = None if isinstance(exc, UnexpectedError) else (exc.context or None)
    body = ErrorResponse(error=exc.error_code, message=exc.message, details=details)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthenticatedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map application exceptions onto the shared error envelope."""

    @app.exception_handler(JotterError)
    async def handle_app_error(request: Request, exc: JotterError):
        if exc.status_code >= 500:
            logger.error(
                f"{exc.error_code}: {exc.message}",
                exc_info=exc.__cause__ or exc,
                extra={"path": request.url.path, "context": exc.context},
            )
        else:
            logger.info(
                f"{exc.error_code}: {exc.message}",
                extra={"path": request.url.path},
            )
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        body = ErrorResponse(
            error="validation_failed",
            message="Invalid request data",
            details={
                "errors": [
                    {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
                    for err in exc.errors()
                ]
            },
        )
        return JSONResponse(status_code=422, content=jsonable_encoder(body))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error(
            "Unhandled error", exc_info=exc, extra={"path": request.url.path}
        )
        return _error_response(UnexpectedError())


app = FastAPI(
    title="Jotter",
    description="Personal notes API",
    version=settings.app_version,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(health_router, prefix="/api")


@app.get("/")
async def root():
    return {"message": "Jotter API"}


# Liveness probe without touching the database
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("jotter.main:app", host=settings.host, port=settings.port, reload=settings.reload)
