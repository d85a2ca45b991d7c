"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import AddProductInput, ProductOutput
from catalog.domain.factory.product_factory import ProductFactory
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, command: AddProductInput) -> ProductOutput:
        """Add a new product to the catalog."""
        product = ProductFactory.create_new_product(command.name, command.price)
        self._product_repo.create(product)

        logger.info("Added product %s '%s'", product.id, product.name)
        return ProductOutput.from_entity(product)
