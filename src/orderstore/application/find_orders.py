"""Application service: Find Orders use case (query)."""

from __future__ import annotations

from orderstore.application.dto import OrderDTO, order_to_dto
from orderstore.domain.exceptions import ValidationError
from orderstore.domain.repository.store_repository import StoreRepository


class FindOrdersHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(
        self,
        email: str | None = None,
        phone: str | None = None,
        min_total: str | None = None,
    ) -> list[OrderDTO]:
        """Return orders matching at most one filter, or all orders.

        An unknown email or phone yields an empty list, not an error.
        ``min_total`` is exclusive: only orders strictly above it match.
        """
        given = [f for f in (email, phone, min_total) if f is not None]
        if len(given) > 1:
            raise ValidationError("Use only one of email, phone or min_total")

        store = self._store_repo.load()
        if email is not None:
            orders = store.find_orders_by_customer_email(email)
        elif phone is not None:
            orders = store.find_orders_by_customer_phone(phone)
        elif min_total is not None:
            orders = store.find_orders_where_total_greater_than(min_total)
        else:
            orders = store.list_all_orders()

        return [order_to_dto(order) for order in orders]
