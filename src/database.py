"""Database engine and per-request sessions for the storefront tables."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import get_settings


def build_engine(url: str) -> Engine:
    """Create an engine suited to the backend named in `url`.

    SQLite connections are shared across the threadpool that serves sync
    routes; server databases get a small pre-pinged pool.
    """
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True, pool_size=5, max_overflow=10)


engine = build_engine(get_settings().database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Yield a session for one request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create the products and users tables if they are missing."""
    # Models register themselves on Base.metadata when imported
    from src import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
