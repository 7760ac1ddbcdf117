import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from .config import ALLOWED_ORIGINS, LOG_LEVEL, missing_database_settings
from .database import check_connection, create_db_engine, create_session_factory
from .domain.schedules import router as schedules_router
from .errors import DatabaseUnavailableError, ScheduleAPIError

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CONNECTION_HINT = (
    "Please ensure your .env file is correctly configured with "
    "DB_HOST, DB_USER, DB_PASSWORD, DB_NAME (or DATABASE_URL)."
)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the API application.

    The connection pool belongs to the application: it is created (or taken
    from ``engine``) and verified during startup, and disposed on shutdown.
    Startup fails with DatabaseUnavailableError when no connection can be
    acquired, so the server never starts listening without a database.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting up...")

        db_engine = engine
        if db_engine is None:
            missing = missing_database_settings()
            if missing:
                logger.error(f"❌ Missing database settings: {', '.join(missing)}")
                logger.error(CONNECTION_HINT)
                raise DatabaseUnavailableError(f"Missing database settings: {', '.join(missing)}")
            db_engine = create_db_engine()

        try:
            check_connection(db_engine)
        except DatabaseUnavailableError as e:
            logger.error(f"❌ Error connecting to database: {e}")
            logger.error(CONNECTION_HINT)
            db_engine.dispose()
            raise
        logger.info("✅ Successfully connected to database")

        app.state.engine = db_engine
        app.state.session_factory = create_session_factory(db_engine)

        yield

        logger.info("Application shutting down...")
        db_engine.dispose()
        logger.info("Database connections closed")

    app = FastAPI(title="Vendor Schedules API", version="1.0.0", lifespan=lifespan)

    @app.exception_handler(ScheduleAPIError)
    async def schedule_error_handler(request: Request, exc: ScheduleAPIError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"❌ {request.method} {request.url.path} - Unhandled error: {exc}", exc_info=exc)
        error = ScheduleAPIError()
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report malformed bodies and path parameters as 400 validation errors"""
        details = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg", ""),
            }
            for error in exc.errors()
        ]
        logger.warning(f"Validation error for {request.method} {request.url.path}: {details}")
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "code": "validation_error", "details": details},
        )

    # CORS Configuration - no credentials, so a wildcard origin is allowed
    logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(schedules_router)

    @app.get("/")
    def root():
        return {"message": "Vendor Schedules API is running"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
