"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from decimal import Decimal

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.domain.exceptions import NotFoundError, PersistenceError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.models import ProductModel

logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(ProductRepository):
    """Each call runs in its own session and commits before returning."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> None:
        logger.debug("Inserting product %s", product.id)
        with self._session() as session:
            session.add(self._to_model(product))

    def update(self, product: Product) -> None:
        logger.debug("Updating product %s", product.id)
        with self._session() as session:
            row = self._get_row(session, product.id)
            if row is None:
                raise NotFoundError(f"Product with ID '{product.id}' not found")
            row.name = product.name
            row.price = str(product.price)

    def find(self, product_id: str) -> Product:
        with self._session() as session:
            row = self._get_row(session, product_id)
            if row is None:
                raise NotFoundError(f"Product with ID '{product_id}' not found")
            return self._to_domain(row)

    def find_all(self) -> list[Product]:
        with self._session() as session:
            rows = session.query(ProductModel).order_by(ProductModel.pk).all()
            return [self._to_domain(row) for row in rows]

    # --- Session helpers ------------------------------------------------------

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """Unit of work: commit on success, roll back on any error.

        Storage errors are re-raised as PersistenceError; domain errors
        pass through untouched.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            raise PersistenceError(f"Constraint violated: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Storage failure: %s", exc)
            raise PersistenceError(f"Storage failure: {exc}") from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @staticmethod
    def _get_row(session: Session, product_id: str) -> ProductModel | None:
        return (
            session.query(ProductModel)
            .filter(ProductModel.id == product_id)
            .first()
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_model(product: Product) -> ProductModel:
        return ProductModel(id=product.id, name=product.name, price=str(product.price))

    @staticmethod
    def _to_domain(row: ProductModel) -> Product:
        return Product(id=row.id, name=row.name, price=Decimal(row.price))
