"""Application service: List Products use case (query)."""

from __future__ import annotations

import logging

from catalog.application.dto import ListProductsInput, ListProductsOutput, ProductOutput
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: ListProductsInput | None = None) -> ListProductsOutput:
        products = self._product_repo.find_all()
        logger.debug("Listing %d products", len(products))
        return ListProductsOutput(
            products=[ProductOutput.from_entity(p) for p in products]
        )
