"""Product aggregate.

Products live independently of orders. Their price is the only field
that changes after creation, and a price change is propagated into the
product snapshots held by existing orders (see ``OrderStore``).
"""

from __future__ import annotations

from dataclasses import dataclass

from orderstore.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price updates are a legitimate
    mutation on the aggregate. ``Money`` already rejects negative amounts,
    so a zero price is the lowest one allowed.
    """

    id: str
    name: str
    price: Money

    def update_price(self, new_price: Money) -> None:
        self.price = new_price

    def __str__(self) -> str:
        return f"Product {self.id}: {self.name} @ {self.price}"
