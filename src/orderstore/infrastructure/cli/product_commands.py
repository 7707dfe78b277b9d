"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from orderstore.application.add_product import AddProductHandler
from orderstore.application.update_product import UpdateProductPriceHandler
from orderstore.domain.exceptions import DomainException
from orderstore.domain.repository.store_repository import StoreRepository


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def product_add(repo: StoreRepository, product_id: str, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(store_repo=repo)

    try:
        product = handler.handle(product_id=product_id, name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.id}' '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(repo: StoreRepository) -> None:
    """List all products in the catalog."""
    try:
        products = repo.load().list_products()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Price':>10}")
    click.echo("-" * 42)
    for p in products:
        click.echo(f"{p.id:<10} {p.name:<20} {str(p.price):>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(repo: StoreRepository, product_id: str, price: str) -> None:
    """Update a product's price (existing orders are repriced)."""
    handler = UpdateProductPriceHandler(store_repo=repo)

    try:
        update = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{update.product_id}' price updated to {update.price}")
    if update.repriced_order_ids:
        click.echo(f"Repriced orders: {', '.join(update.repriced_order_ids)}")
