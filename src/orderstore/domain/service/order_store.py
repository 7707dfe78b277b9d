"""Domain service: the Order Store.

Owns the three primary collections (customers via the index, products,
orders) and is the only code that mutates them. Every mutation follows
the same two-phase approach:

  Phase 1, validate: resolve every referenced entity and check every
            value. Fails fast before any mutation.
  Phase 2, mutate: apply the change, including its cascade.

so a failed call leaves the store exactly as it was.

Cross-entity rules live here and nowhere else:
- a product price update is propagated into the product snapshots of
  every order holding that product, and those orders' totals recomputed;
- deleting a customer deletes every order placed by that customer.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal, InvalidOperation

from orderstore.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    ValidationError,
)
from orderstore.domain.index.customer_index import CustomerIndex
from orderstore.domain.model.customer import Customer
from orderstore.domain.model.order import Order, OrderItem
from orderstore.domain.model.product import Product
from orderstore.domain.model.value_objects import Money, Quantity
from orderstore.domain.service.invoice import render_invoice


class OrderStore:

    def __init__(self) -> None:
        self._customers = CustomerIndex()
        self._products: dict[str, Product] = {}
        self._orders: dict[str, Order] = {}

    # --- Customers ------------------------------------------------------------

    def add_customer(self, customer: Customer) -> None:
        self._customers.add(customer)

    def delete_customer(self, customer_id: str) -> list[Order]:
        """Remove a customer and every order placed by them.

        Returns the removed orders. Raises EntityNotFoundError, leaving
        the store untouched, if the customer does not exist.
        """
        self._customers.remove(customer_id)

        removed = [o for o in self._orders.values() if o.customer_id == customer_id]
        for order in removed:
            del self._orders[order.id]
        return removed

    def get_customer(self, customer_id: str) -> Customer | None:
        return self._customers.get_by_id(customer_id)

    def list_customers(self) -> list[Customer]:
        return self._customers.list_all()

    # --- Products -------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        if product.id in self._products:
            raise DuplicateKeyError(f"Product ID '{product.id}' already exists")
        self._products[product.id] = product

    def update_product_price(
        self, product_id: str, new_price: Money | Decimal | float | int | str
    ) -> list[Order]:
        """Change a product's price and propagate it into existing orders.

        Every order item holding a snapshot of *product_id* gets the new
        price and a recomputed subtotal; each such order gets its total
        recomputed from all of its items. Orders without the product are
        not touched. Returns the affected orders.

        Raises EntityNotFoundError for an unknown product and
        InvalidPriceError for an invalid price, in that order. A price that
        would push any affected order's total out of range is rejected the
        same way, before anything changes.
        """
        # Phase 1: validate the price and every total it would produce
        product = self._products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        price = new_price if isinstance(new_price, Money) else Money.of(new_price)

        affected = [
            order
            for order in self._orders.values()
            if order.repriced_total(product_id, price) is not None
        ]

        # Phase 2: mutate
        product.update_price(price)
        for order in affected:
            order.reprice_product(product_id, price)
        return affected

    def get_product(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def list_products(self) -> list[Product]:
        return list(self._products.values())

    # --- Orders ---------------------------------------------------------------

    def add_order(
        self,
        order_id: str,
        customer_id: str,
        items: Iterable[tuple[str, int]],
        order_date: datetime | None = None,
    ) -> Order:
        """Create an order from ``(product_id, quantity)`` pairs.

        The customer and products are copied into the order by value, so
        later changes to the live records (other than a price update made
        through this store) do not reach it.
        """
        # Phase 1: validate everything
        if order_id in self._orders:
            raise DuplicateKeyError(f"Order ID '{order_id}' already exists")

        customer = self._customers.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        resolved: list[tuple[Product, Quantity]] = []
        for product_id, qty in items:
            product = self._products.get(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            resolved.append((product, Quantity(qty)))

        # Phase 2: build and store
        order = Order.create(
            order_id=order_id,
            customer=customer,
            items=[OrderItem.for_product(p, q) for p, q in resolved],
            order_date=order_date,
        )
        self._orders[order.id] = order
        return order

    def restore_order(self, order: Order) -> None:
        """Insert an already-built order as-is, e.g. when loading a snapshot.

        Nothing is resolved or recomputed: the order's snapshots and
        total are trusted.
        """
        if order.id in self._orders:
            raise DuplicateKeyError(f"Order ID '{order.id}' already exists")
        self._orders[order.id] = order

    def get_order(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    def list_all_orders(self) -> list[Order]:
        return list(self._orders.values())

    def find_orders_by_customer_email(self, email: str) -> list[Order]:
        return self._orders_for(self._customers.get_by_email(email))

    def find_orders_by_customer_phone(self, phone: str) -> list[Order]:
        return self._orders_for(self._customers.get_by_phone(phone))

    def find_orders_where_total_greater_than(
        self, amount: Money | Decimal | float | int | str
    ) -> list[Order]:
        """Orders whose total is strictly greater than *amount*.

        Any finite number is accepted, negative ones included. Raises
        ValidationError for anything else.
        """
        if isinstance(amount, Money):
            threshold = amount.amount
        else:
            threshold = _parse_threshold(amount)
        return [o for o in self._orders.values() if o.total_amount.amount > threshold]

    def generate_order_invoice(self, order_id: str) -> str | None:
        """Render the invoice for *order_id*, or None if there is no such order."""
        order = self._orders.get(order_id)
        if order is None:
            return None
        return render_invoice(order)

    # --- Internal helpers -----------------------------------------------------

    def _orders_for(self, customer: Customer | None) -> list[Order]:
        if customer is None:
            return []
        return [o for o in self._orders.values() if o.customer_id == customer.id]


def _parse_threshold(amount: Decimal | float | int | str) -> Decimal:
    if isinstance(amount, bool):
        raise ValidationError(f"Invalid amount: {amount!r}")
    try:
        threshold = Decimal(str(amount).strip())
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid amount: {amount!r}") from exc
    if not threshold.is_finite():
        raise ValidationError(f"Amount must be finite, got {amount!r}")
    return threshold
