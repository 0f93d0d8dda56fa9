"""
Database connection management.

One engine per process, one session per request (see get_db).
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker

from chirpy_app.config import settings

logger = logging.getLogger(__name__)


def _connect_args(database_url: str) -> dict:
    # SQLite connections are shared with FastAPI's worker threads
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.db_url,
    connect_args=_connect_args(settings.db_url),
    pool_pre_ping=True,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a database session and close it when the request is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection(bind=None) -> None:
    """
    Make sure the database is reachable.

    Raises whatever the driver raises; callers treat that as fatal.
    """
    bind = bind or engine
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Database connection OK (%s)", bind.url.get_backend_name())


def init_db() -> None:
    """Create all tables registered on Base."""
    # Import models so they are registered with Base
    from chirpy_app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
