"""Application service: Find Product use case (query)."""

from __future__ import annotations

import logging

from catalog.application.dto import FindProductInput, ProductOutput
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class FindProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: FindProductInput) -> ProductOutput:
        """Look up a single product. NotFoundError propagates unchanged."""
        logger.debug("Finding product %s", query.id)
        product = self._product_repo.find(query.id)
        return ProductOutput.from_entity(product)
