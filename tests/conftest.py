"""Shared fixtures: a fresh in-memory SQLite database per test."""

import pytest

from catalog.infrastructure.persistence.database import (
    create_schema,
    drop_schema,
    make_engine,
    make_sessionmaker,
)
from catalog.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


@pytest.fixture
def engine():
    engine = make_engine("sqlite:///:memory:")
    create_schema(engine)
    yield engine
    drop_schema(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_sessionmaker(engine)


@pytest.fixture
def product_repository(session_factory):
    return SqlAlchemyProductRepository(session_factory)
