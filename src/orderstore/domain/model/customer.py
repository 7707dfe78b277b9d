"""Customer aggregate."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """A customer of the store.

    Frozen: the id is the primary key and email/phone are secondary
    keys in the customer index, so none of them may change in place.
    Orders hold their own snapshot of the customer they were placed by.
    """

    id: str
    name: str
    email: str
    phone: str

    def __str__(self) -> str:
        return f"Customer {self.id}: {self.name} <{self.email}>, {self.phone}"
