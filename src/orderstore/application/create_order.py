"""Application service: Create Order use case.

Orchestrates the flow between the store repository and the store: load
the current snapshot, let the store resolve the customer and products
and build the order, then persist the whole snapshot again.
"""

from __future__ import annotations

from datetime import datetime

from orderstore.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from orderstore.domain.exceptions import ValidationError
from orderstore.domain.repository.store_repository import StoreRepository


class CreateOrderHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(
        self,
        order_id: str,
        customer_id: str,
        item_specs: list[OrderItemSpec],
        order_date: datetime | None = None,
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Load the store.
        2. Let the store resolve the customer and each product (fail if
           any is missing) and snapshot them with their *current* prices.
        3. Persist and return a DTO.
        """
        if not order_id or not order_id.strip():
            raise ValidationError("Order ID is required")

        store = self._store_repo.load()
        order = store.add_order(
            order_id=order_id.strip(),
            customer_id=customer_id.strip(),
            items=[(spec.product_id, spec.quantity) for spec in item_specs],
            order_date=order_date,
        )
        self._store_repo.save(store)

        return order_to_dto(order)
