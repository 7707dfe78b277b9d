"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items. Each item holds
a by-value snapshot of the product it was created from, and the order
holds a snapshot of its customer. The only way a snapshot changes after
creation is ``reprice_product()``, driven by a catalog price update.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from orderstore.domain.model.customer import Customer
from orderstore.domain.model.product import Product
from orderstore.domain.model.value_objects import Money, Quantity


def normalize_order_date(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime truncated to milliseconds.

    Orders are persisted with epoch-millisecond dates, so anything finer
    would not survive a save/load round trip. Naive values are taken as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


@dataclass
class OrderItem:
    """One line of an order.

    ``product`` is a private copy of the catalog product. ``subtotal`` is
    stored rather than derived so a persisted value can be restored
    verbatim; ``reprice()`` keeps it equal to ``price * quantity``.
    """

    product: Product
    quantity: Quantity
    subtotal: Money

    @staticmethod
    def for_product(product: Product, quantity: Quantity) -> OrderItem:
        snapshot = replace(product)
        return OrderItem(
            product=snapshot,
            quantity=quantity,
            subtotal=snapshot.price * quantity.value,
        )

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def unit_price(self) -> Money:
        return self.product.price

    def reprice(self, new_price: Money) -> None:
        self.product = replace(self.product, price=new_price)
        self.subtotal = new_price * self.quantity.value

    def __str__(self) -> str:
        return f"{self.product.name} x{self.quantity} = {self.subtotal}"


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders. It snapshots the
    customer and computes the total. The plain ``__init__`` lets the codec
    reconstitute persisted orders, including their
    stored total, without recomputing anything.
    """

    id: str
    customer: Customer
    items: list[OrderItem]
    order_date: datetime
    total_amount: Money

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer: Customer,
        items: list[OrderItem],
        order_date: datetime | None = None,
    ) -> Order:
        if order_date is None:
            order_date = datetime.now(timezone.utc)
        order = Order(
            id=order_id,
            customer=replace(customer),
            items=list(items),
            order_date=normalize_order_date(order_date),
            total_amount=Money.zero(),
        )
        order.recompute_total()
        return order

    # --- Price propagation ----------------------------------------------------

    def reprice_product(self, product_id: str, new_price: Money) -> bool:
        """Apply a catalog price change to every item for *product_id*.

        Returns True if the order held the product, in which case the
        total is recomputed from all items. Otherwise nothing is touched.
        """
        matched = False
        for item in self.items:
            if item.product_id == product_id:
                item.reprice(new_price)
                matched = True
        if matched:
            self.recompute_total()
        return matched

    def repriced_total(self, product_id: str, new_price: Money) -> Money | None:
        """Total this order would have after ``reprice_product()``.

        Returns None if the order does not hold the product. Raises
        InvalidPriceError if a subtotal or the total would be out of range.
        """
        if not any(item.product_id == product_id for item in self.items):
            return None
        total = Money.zero()
        for item in self.items:
            if item.product_id == product_id:
                total = total + new_price * item.quantity.value
            else:
                total = total + item.subtotal
        return total

    def recompute_total(self) -> None:
        total = Money.zero()
        for item in self.items:
            total = total + item.subtotal
        self.total_amount = total

    # --- Queries --------------------------------------------------------------

    @property
    def customer_id(self) -> str:
        return self.customer.id

    def __str__(self) -> str:
        return (
            f"Order {self.id}: {self.customer.name}, "
            f"{self.order_date:%Y-%m-%d}, {len(self.items)} item(s), "
            f"total {self.total_amount}"
        )
