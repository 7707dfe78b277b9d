"""CLI commands for customers."""

from __future__ import annotations

import click

from orderstore.application.add_customer import AddCustomerHandler
from orderstore.application.delete_customer import DeleteCustomerHandler
from orderstore.domain.exceptions import DomainException
from orderstore.domain.repository.store_repository import StoreRepository


@click.command("add")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Email address (must be unique).")
@click.option("--phone", required=True, help="Phone number (must be unique).")
@click.pass_obj
def customer_add(
    repo: StoreRepository, customer_id: str, name: str, email: str, phone: str
) -> None:
    """Register a new customer."""
    handler = AddCustomerHandler(store_repo=repo)

    try:
        customer = handler.handle(customer_id, name, email, phone)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer '{customer.id}' ({customer.name}) added")


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID to delete.")
@click.pass_obj
def customer_delete(repo: StoreRepository, customer_id: str) -> None:
    """Delete a customer together with all of their orders."""
    handler = DeleteCustomerHandler(store_repo=repo)

    try:
        removed = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer '{customer_id}' deleted ({len(removed)} order(s) removed)")
    for order_id in removed:
        click.echo(f"  - {order_id}")


@click.command("list")
@click.pass_obj
def customer_list(repo: StoreRepository) -> None:
    """List all customers."""
    try:
        customers = repo.load().list_customers()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Email':<25} {'Phone':<15}")
    click.echo("-" * 73)
    for c in customers:
        click.echo(f"{c.id:<10} {c.name:<20} {c.email:<25} {c.phone:<15}")
