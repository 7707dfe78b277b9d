"""Application service: Delete Customer use case.

Deleting a customer also deletes every order they placed. The store does
both in one call; if the customer does not exist nothing is saved.
"""

from __future__ import annotations

from orderstore.domain.repository.store_repository import StoreRepository


class DeleteCustomerHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, customer_id: str) -> list[str]:
        """Delete *customer_id*; return the IDs of the orders removed with it."""
        store = self._store_repo.load()
        removed = store.delete_customer(customer_id)
        self._store_repo.save(store)
        return [order.id for order in removed]
