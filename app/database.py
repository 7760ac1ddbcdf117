import logging
import os
import time

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from . import config
from .errors import DatabaseUnavailableError

logger = logging.getLogger(__name__)

# Get environment-specific pool settings
POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "300"))
ENABLE_QUERY_LOGGING = os.getenv("DB_LOG_SLOW_QUERIES", "true").lower() == "true"
SLOW_QUERY_THRESHOLD = float(os.getenv("DB_SLOW_QUERY_THRESHOLD", "1.0"))

Base = declarative_base()


def build_database_url() -> URL | str:
    """DATABASE_URL when set, otherwise a MySQL URL from the DB_* settings"""
    if config.DATABASE_URL:
        return config.DATABASE_URL
    return URL.create(
        "mysql+pymysql",
        username=config.DB_USER,
        password=config.DB_PASSWORD,
        host=config.DB_HOST,
        port=config.DB_PORT,
        database=config.DB_NAME,
    )


def install_slow_query_logging(engine: Engine, threshold: float = SLOW_QUERY_THRESHOLD) -> None:
    """Warn about statements slower than ``threshold`` seconds"""

    @event.listens_for(engine, "before_cursor_execute")
    def before_cursor_execute(conn, _cursor, statement, _parameters, context, _executemany):
        conn.info.setdefault("query_start_time", []).append(time.time())

    @event.listens_for(engine, "after_cursor_execute")
    def after_cursor_execute(conn, _cursor, statement, _parameters, context, _executemany):
        total = time.time() - conn.info["query_start_time"].pop(-1)
        if total > threshold:
            logger.warning(f"🐌 Slow query ({total:.2f}s): {statement[:200]}...")


def create_db_engine(url: URL | str | None = None) -> Engine:
    """
    Create the process-wide engine and its bounded connection pool.

    The pool never opens more than POOL_SIZE connections; requests beyond that
    wait in the pool queue for up to POOL_TIMEOUT seconds.
    """
    engine = create_engine(
        url if url is not None else build_database_url(),
        poolclass=QueuePool,
        pool_pre_ping=True,  # Test connections before using
        pool_recycle=POOL_RECYCLE,
        pool_size=POOL_SIZE,
        max_overflow=0,
        pool_timeout=POOL_TIMEOUT,
        echo=False,  # Don't log all SQL (use slow query logging instead)
    )
    logger.info(f"📊 Connection pool: size={POOL_SIZE}, timeout={POOL_TIMEOUT}s")

    if ENABLE_QUERY_LOGGING:
        install_slow_query_logging(engine)
        logger.info(f"📊 Slow query logging enabled (threshold: {SLOW_QUERY_THRESHOLD}s)")

    return engine


def check_connection(engine: Engine) -> None:
    """Acquire one pooled connection and release it, or raise DatabaseUnavailableError"""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise DatabaseUnavailableError(str(e)) from e


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """Yield a session bound to the pool owned by the running application"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
