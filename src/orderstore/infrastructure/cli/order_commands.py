"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderstore.application.create_order import CreateOrderHandler
from orderstore.application.dto import OrderDTO, OrderItemSpec
from orderstore.application.find_orders import FindOrdersHandler
from orderstore.application.show_invoice import ShowInvoiceHandler
from orderstore.domain.exceptions import DomainException
from orderstore.domain.repository.store_repository import StoreRepository


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'prod1:3,prod2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}")
    click.echo(f"Customer: {dto.customer_name} ({dto.customer_id})")
    click.echo(f"Date:     {dto.order_date}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


def _display_summary(dtos: list[OrderDTO]) -> None:
    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<10} {'Customer':<20} {'Date':<21} {'Items':>5} {'Total':>12}")
    click.echo("-" * 72)
    for dto in dtos:
        click.echo(
            f"{dto.id:<10} {dto.customer_name:<20} {dto.order_date:<21} "
            f"{len(dto.items):>5} {dto.total:>12}"
        )


@click.command("create")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.pass_obj
def order_create(repo: StoreRepository, order_id: str, customer_id: str, items: str) -> None:
    """Create a new order."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(store_repo=repo)

    try:
        dto = handler.handle(order_id=order_id, customer_id=customer_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order created")
    _display_order(dto)


@click.command("list")
@click.pass_obj
def order_list(repo: StoreRepository) -> None:
    """List all orders."""
    try:
        dtos = FindOrdersHandler(store_repo=repo).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(dtos)


@click.command("find")
@click.option("--email", default=None, help="Orders of the customer with this email.")
@click.option("--phone", default=None, help="Orders of the customer with this phone.")
@click.option("--min-total", default=None, help="Orders whose total exceeds this amount.")
@click.pass_obj
def order_find(
    repo: StoreRepository,
    email: str | None,
    phone: str | None,
    min_total: str | None,
) -> None:
    """Find orders by customer contact or by total."""
    handler = FindOrdersHandler(store_repo=repo)

    try:
        dtos = handler.handle(email=email, phone=phone, min_total=min_total)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(dtos)


@click.command("invoice")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.pass_obj
def order_invoice(repo: StoreRepository, order_id: str) -> None:
    """Print the invoice for an order."""
    handler = ShowInvoiceHandler(store_repo=repo)

    try:
        invoice = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(invoice)
