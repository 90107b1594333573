"""
Conexión a base de datos

SQLAlchemy engine, session factory and declarative Base shared by the ORM
models and repositories. PostgreSQL (psycopg2 driver) in production, SQLite
is accepted for local runs and tests.

Author: TM3
Updated: 2025-11-28
"""
import time
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict:
    """
    Engine keyword arguments for the given URL

    SQLite does not take pool sizing; an in-memory SQLite database must share
    a single connection or every session would see an empty schema.
    """
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,  # Verificar conexión antes de usar
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }


def build_engine(database_url: str):
    """Create an engine with the options that suit the backend"""
    return create_engine(database_url, **_engine_options(database_url))


# ============================================================================
# SQLAlchemy Configuration
# ============================================================================

engine = build_engine(settings.DATABASE_URL)

# Session Factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para modelos
Base = declarative_base()


def get_db():
    """
    FastAPI dependency para obtener sesión de SQLAlchemy

    Usage:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """Create every table registered on Base (no-op for existing ones)"""
    # Import models so they register on Base.metadata
    from storefront import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# ============================================================================
# Connection probe with Retry Logic
# ============================================================================

def check_database_connection(bind=None, max_retries=3, retry_delay=1.0) -> float:
    """
    Run SELECT 1 against the database, retrying on connection failures

    Handles intermittent connection issues by:
    - Retrying failed connections up to max_retries times
    - Adding exponential backoff between retries
    - Logging connection attempts for debugging

    Args:
        bind: Engine to probe (default: application engine)
        max_retries: Maximum number of connection attempts (default: 3)
        retry_delay: Initial delay between retries in seconds (default: 1.0)

    Returns:
        Latency of the successful probe in milliseconds

    Raises:
        sqlalchemy.exc.OperationalError: If all retry attempts fail
    """
    bind = bind or engine
    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            start = time.time()
            with bind.connect() as conn:
                conn.execute(text("SELECT 1"))
            latency_ms = round((time.time() - start) * 1000, 2)

            logger.debug(f"Database connection successful on attempt {attempt}")
            return latency_ms

        except OperationalError as e:
            last_error = e
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            # Don't retry on last attempt
            if attempt < max_retries:
                # Exponential backoff
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)
            else:
                logger.error(f"All {max_retries} connection attempts failed")

    raise last_error
