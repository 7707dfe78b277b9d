"""Abstract repository for the whole OrderStore.

The store is persisted as one snapshot, so the repository deals in whole
stores rather than single entities. Defined in the domain layer so the
domain never depends on infrastructure; the JSON file implementation
lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderstore.domain.service.order_store import OrderStore


class StoreRepository(ABC):

    @abstractmethod
    def load(self) -> OrderStore:
        """Return the persisted store, or a fresh empty one if none exists."""

    @abstractmethod
    def save(self, store: OrderStore) -> None:
        """Persist the full state of *store*, replacing what was there."""
