"""ORM models: the stored-row side of the domain entities."""

from __future__ import annotations

from sqlalchemy import Column, Integer, String

from catalog.infrastructure.persistence.database import Base


class ProductModel(Base):
    """Flat row for a Product.

    ``pk`` is a surrogate key whose only job is to preserve insertion
    order; the domain identity lives in ``id``. ``price`` holds the
    Decimal as text so every digit survives a round trip.
    """

    __tablename__ = "products"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(String(64), nullable=False)
