"""CLI commands for the Product entity."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import (
    AddProductInput,
    FindProductInput,
    ListProductsInput,
    UpdateProductInput,
)
from catalog.application.find_product import FindProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
def product_add(name: str, price: str) -> None:
    """Add a new product to the catalog."""
    try:
        with product_repository() as repo:
            product = AddProductHandler(product_repo=repo).handle(
                AddProductInput(name=name, price=price)
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at ${product.price:.2f}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    try:
        with product_repository() as repo:
            product = FindProductHandler(product_repo=repo).handle(
                FindProductInput(id=product_id)
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"ID:    {product.id}")
    click.echo(f"Name:  {product.name}")
    click.echo(f"Price: ${product.price:.2f}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    try:
        with product_repository() as repo:
            output = ListProductsHandler(product_repo=repo).handle(ListProductsInput())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not output.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10}")
    click.echo("-" * 68)
    for p in output.products:
        click.echo(f"{p.id:<36} {p.name:<20} {'$' + format(p.price, '.2f'):>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(product_id: str, name: str, price: str) -> None:
    """Rename and reprice a product."""
    try:
        with product_repository() as repo:
            product = UpdateProductHandler(product_repo=repo).handle(
                UpdateProductInput(id=product_id, name=name, price=price)
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated: '{product.name}' at ${product.price:.2f}")
