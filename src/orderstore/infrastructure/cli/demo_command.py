"""CLI command running the sample scenario against a fresh store."""

from __future__ import annotations

import click

from orderstore.domain.exceptions import DomainException
from orderstore.domain.model.customer import Customer
from orderstore.domain.model.order import Order
from orderstore.domain.model.product import Product
from orderstore.domain.model.value_objects import Money
from orderstore.domain.repository.store_repository import StoreRepository
from orderstore.domain.service.order_store import OrderStore


def _echo_orders(title: str, orders: list[Order]) -> None:
    click.echo()
    click.echo(title)
    for o in orders:
        click.echo(f"  {o}")


def seed_demo_store() -> OrderStore:
    """Build the sample store: two customers, three products, two orders."""
    store = OrderStore()
    store.add_customer(Customer("cust1", "John Doe", "john@example.com", "1234567890"))
    store.add_customer(Customer("cust2", "Jane Smith", "jane@example.com", "0987654321"))

    store.add_product(Product("prod1", "Laptop", Money.of("999.99")))
    store.add_product(Product("prod2", "Phone", Money.of("699.99")))
    store.add_product(Product("prod3", "Headphones", Money.of("149.99")))

    store.add_order("order1", "cust1", [("prod1", 1), ("prod3", 2)])
    store.add_order("order2", "cust2", [("prod2", 1)])
    return store


@click.command("demo")
@click.option(
    "--save/--no-save",
    default=False,
    help="Write the resulting store to the data file (replaces its contents).",
)
@click.pass_obj
def demo(repo: StoreRepository, save: bool) -> None:
    """Walk through the sample scenario on a fresh in-memory store."""
    try:
        store = seed_demo_store()

        _echo_orders("All orders:", store.list_all_orders())
        _echo_orders(
            "Orders for john@example.com:",
            store.find_orders_by_customer_email("john@example.com"),
        )

        store.update_product_price("prod1", Money.of("899.99"))
        _echo_orders("After price update:", store.list_all_orders())

        _echo_orders(
            "Orders with total > 500:",
            store.find_orders_where_total_greater_than(500),
        )

        click.echo()
        click.echo("Invoice for order1:")
        click.echo(store.generate_order_invoice("order1"))

        store.delete_customer("cust2")
        _echo_orders("After deleting customer cust2:", store.list_all_orders())

        if save:
            repo.save(store)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if save:
        click.echo()
        click.echo("Store saved.")
