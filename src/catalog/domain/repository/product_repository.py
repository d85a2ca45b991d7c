"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> None:
        """Persist a new product.

        Raises PersistenceError if a product with the same id exists.
        """

    @abstractmethod
    def update(self, product: Product) -> None:
        """Overwrite the stored product with the same id.

        Raises NotFoundError if no such product has been created.
        """

    @abstractmethod
    def find(self, product_id: str) -> Product:
        """Return a product by its ID. Raises NotFoundError if absent."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product, in the order they were created."""
