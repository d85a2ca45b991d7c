"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.database import (
    create_schema,
    make_engine,
    make_sessionmaker,
)
from catalog.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


@contextmanager
def product_repository(
    settings: Settings | None = None,
) -> Iterator[SqlAlchemyProductRepository]:
    """Yield a repository against the configured database.

    The schema is created on first use; the engine is disposed on exit.
    """
    settings = settings or get_settings()
    engine = make_engine(settings.database_url, echo=settings.database_echo)
    try:
        create_schema(engine)
        yield SqlAlchemyProductRepository(make_sessionmaker(engine))
    finally:
        engine.dispose()
