"""Customer index: primary and secondary keys kept in lockstep.

The index owns three maps (id, email, phone) over the same set of live
customers. Every insert and removal touches all three, so a customer is
either reachable by all of its keys or by none of them.
"""

from __future__ import annotations

from orderstore.domain.exceptions import DuplicateKeyError, EntityNotFoundError
from orderstore.domain.model.customer import Customer


class CustomerIndex:

    def __init__(self) -> None:
        self._by_id: dict[str, Customer] = {}
        self._by_email: dict[str, Customer] = {}
        self._by_phone: dict[str, Customer] = {}

    def add(self, customer: Customer) -> None:
        """Insert *customer* under its id, email and phone.

        All three keys are checked before anything is written.
        """
        if customer.id in self._by_id:
            raise DuplicateKeyError(f"Customer ID '{customer.id}' already exists")
        if customer.email in self._by_email:
            raise DuplicateKeyError(
                f"Email '{customer.email}' is already used by customer "
                f"'{self._by_email[customer.email].id}'"
            )
        if customer.phone in self._by_phone:
            raise DuplicateKeyError(
                f"Phone '{customer.phone}' is already used by customer "
                f"'{self._by_phone[customer.phone].id}'"
            )

        self._by_id[customer.id] = customer
        self._by_email[customer.email] = customer
        self._by_phone[customer.phone] = customer

    def remove(self, customer_id: str) -> Customer:
        customer = self._by_id.get(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        del self._by_id[customer_id]
        del self._by_email[customer.email]
        del self._by_phone[customer.phone]
        return customer

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._by_id.get(customer_id)

    def get_by_email(self, email: str) -> Customer | None:
        return self._by_email.get(email)

    def get_by_phone(self, phone: str) -> Customer | None:
        return self._by_phone.get(phone)

    def list_all(self) -> list[Customer]:
        return list(self._by_id.values())

    def __contains__(self, customer_id: object) -> bool:
        return customer_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)
