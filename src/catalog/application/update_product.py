"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductOutput, UpdateProductInput
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, command: UpdateProductInput) -> ProductOutput:
        """Rename and reprice an existing product.

        Both values are validated on the entity before anything is
        written, so an invalid name or price leaves storage untouched.
        """
        product = self._product_repo.find(command.id)

        product.change_name(command.name)
        product.change_price(command.price)
        self._product_repo.update(product)

        logger.info("Updated product %s", product.id)
        return ProductOutput.from_entity(product)
