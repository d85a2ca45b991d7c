"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain entities to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class AddProductInput:
    name: str
    price: Decimal | int | float | str


@dataclass(frozen=True)
class FindProductInput:
    id: str


@dataclass(frozen=True)
class UpdateProductInput:
    id: str
    name: str
    price: Decimal | int | float | str


@dataclass(frozen=True)
class ListProductsInput:
    """The list query takes no parameters."""


@dataclass(frozen=True)
class ProductOutput:
    """Output: a single product as seen outside the domain."""

    id: str
    name: str
    price: Decimal

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutput:
        return cls(id=product.id, name=product.name, price=product.price)


@dataclass(frozen=True)
class ListProductsOutput:
    products: list[ProductOutput] = field(default_factory=list)
