"""Data Transfer Objects, plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderstore.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    customer_name: str
    items: list[OrderLineItemDTO]
    total: str
    order_date: str


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer.id,
        customer_name=order.customer.name,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product.name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.subtotal),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        order_date=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
    )


@dataclass(frozen=True)
class PriceUpdateDTO:
    """Output: a product's stored price and the orders repriced with it."""

    product_id: str
    price: str  # formatted, e.g. "$899.99"
    repriced_order_ids: list[str]
