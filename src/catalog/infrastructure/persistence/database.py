"""SQLAlchemy engine and session plumbing."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def make_engine(db_url: str, **kwargs) -> Engine:
    """Create a SQLAlchemy engine with the given URL and options.

    In-memory SQLite is pinned to a single shared connection, otherwise
    every session would open its own empty database.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
        if url.database in (None, "", ":memory:"):
            kwargs.setdefault("poolclass", StaticPool)
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(url, **kwargs)


def make_sessionmaker(engine: Engine) -> sessionmaker:
    # Repositories hand back domain objects, never ORM rows, so nothing
    # needs to stay loaded after commit.
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=True)


def create_schema(engine: Engine) -> None:
    """Create every table registered on Base (no-op for existing ones)."""
    # Registers ProductModel on Base.metadata
    from catalog.infrastructure.persistence import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_schema(engine: Engine) -> None:
    Base.metadata.drop_all(bind=engine)
