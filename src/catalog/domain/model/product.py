"""Product entity.

A product has an identity assigned once by the factory, a name and a
price. Name and price may change over its lifetime, but only through
``change_name`` / ``change_price``, which re-validate before mutating.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from catalog.domain.exceptions import ValidationError


def _validated_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name is required")
    return name.strip()


def _validated_price(price: Any) -> Decimal:
    # bool is an int subclass; True is not a price
    if isinstance(price, bool):
        raise ValidationError(f"Invalid product price: {price!r}")
    try:
        amount = price if isinstance(price, Decimal) else Decimal(str(price))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid product price: {price!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid product price: {price!r}")
    if amount < Decimal("0"):
        raise ValidationError(f"Product price cannot be negative, got {amount}")
    return amount


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because renaming and repricing are
    legitimate mutations. ``id`` is the exception: it is fixed at
    construction.

    Invariants:
    - ``name`` is never empty
    - ``price`` is never negative
    """

    id: str
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise ValidationError("Product id is required")
        self.name = _validated_name(self.name)
        self.price = _validated_price(self.price)

    def __setattr__(self, attr: str, value: Any) -> None:
        if attr == "id" and "id" in self.__dict__:
            raise AttributeError("Product id cannot be changed")
        super().__setattr__(attr, value)

    def change_name(self, new_name: str) -> None:
        self.name = _validated_name(new_name)

    def change_price(self, new_price: Decimal | int | float | str) -> None:
        """Change the product price.

        The new value is validated before assignment, so a rejected
        price leaves the current one in place.
        """
        self.price = _validated_price(new_price)
