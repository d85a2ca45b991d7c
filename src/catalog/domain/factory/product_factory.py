"""Factory for new Product entities."""

from __future__ import annotations

import uuid
from decimal import Decimal

from catalog.domain.model.product import Product


class ProductFactory:

    @staticmethod
    def create_new_product(name: str, price: Decimal | int | float | str) -> Product:
        """Build a brand-new product with a freshly generated id.

        Raises ValidationError if name or price is invalid.
        """
        return Product(id=str(uuid.uuid4()), name=name, price=price)
