"""Application service: Show Invoice use case (query)."""

from __future__ import annotations

from orderstore.domain.exceptions import EntityNotFoundError
from orderstore.domain.repository.store_repository import StoreRepository


class ShowInvoiceHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, order_id: str) -> str:
        invoice = self._store_repo.load().generate_order_invoice(order_id)
        if invoice is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")
        return invoice
