import logging
from pathlib import Path

import click

from orderstore.infrastructure.bootstrap import store_repository
from orderstore.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_list,
)
from orderstore.infrastructure.cli.demo_command import demo
from orderstore.infrastructure.cli.order_commands import (
    order_create,
    order_find,
    order_invoice,
    order_list,
)
from orderstore.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON file holding the store (default: data/order_management_data.json).",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, verbose: bool) -> None:
    """Order Store: customers, products and orders"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = store_repository(data_file)


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
customer.add_command(customer_add)
customer.add_command(customer_delete)
customer.add_command(customer_list)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
order.add_command(order_create)
order.add_command(order_find)
order.add_command(order_invoice)
order.add_command(order_list)
cli.add_command(demo)
