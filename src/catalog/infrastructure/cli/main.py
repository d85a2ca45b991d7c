import logging

import click

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
    product_update,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Catalog — product catalog management"""
    logging.basicConfig(format="%(asctime)s %(levelname)-8s %(name)s: %(message)s")
    # basicConfig is a no-op when root already has handlers
    logging.getLogger("catalog").setLevel(logging.DEBUG if verbose else logging.WARNING)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
