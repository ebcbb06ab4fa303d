"""Database engine, session factory and the FastAPI ``get_db`` dependency."""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from user_sessions.config import settings

Base = declarative_base()


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine with a pre-pinged connection pool."""
    kwargs = {"echo": echo, "pool_pre_ping": True}

    # SQLite connections are shared with the threadpool FastAPI runs endpoints in.
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}

    return create_engine(url, **kwargs)


engine = build_engine(settings.database_url, settings.database_echo)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def configure_engine(url: str, echo: bool = False) -> Engine:
    """Point the session factory at a different database."""
    global engine
    engine = build_engine(url, echo)
    SessionLocal.configure(bind=engine)
    return engine


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for the duration of one request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_database(bind: Engine | None = None) -> None:
    """Create tables for local/dev usage."""
    import user_sessions.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
