"""Tests for the ListProducts use case."""

from decimal import Decimal

from catalog.application.dto import ListProductsInput, ListProductsOutput, ProductOutput
from catalog.application.list_products import ListProductsHandler
from catalog.domain.factory.product_factory import ProductFactory
from tests.fakes import FakeProductRepository


class TestListProducts:

    def test_empty_catalog(self):
        output = ListProductsHandler(FakeProductRepository()).handle(ListProductsInput())
        assert output == ListProductsOutput(products=[])

    def test_products_listed_in_creation_order(self, product_repository):
        product_a = ProductFactory.create_new_product("Product A", 123)
        product_b = ProductFactory.create_new_product("Product B", 456)
        product_repository.create(product_a)
        product_repository.create(product_b)

        output = ListProductsHandler(product_repository).handle(ListProductsInput())

        assert output.products == [
            ProductOutput(id=product_a.id, name="Product A", price=Decimal("123")),
            ProductOutput(id=product_b.id, name="Product B", price=Decimal("456")),
        ]

    def test_input_is_optional(self):
        product = ProductFactory.create_new_product("Widget", 5)
        output = ListProductsHandler(FakeProductRepository([product])).handle()
        assert [p.id for p in output.products] == [product.id]
