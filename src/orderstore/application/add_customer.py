"""Application service: Add Customer use case."""

from __future__ import annotations

from orderstore.domain.exceptions import ValidationError
from orderstore.domain.model.customer import Customer
from orderstore.domain.repository.store_repository import StoreRepository


class AddCustomerHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, customer_id: str, name: str, email: str, phone: str) -> Customer:
        """Register a new customer.

        The id, email and phone must all be unused; the customer index
        raises DuplicateKeyError otherwise.
        """
        for label, value in (("ID", customer_id), ("name", name),
                             ("email", email), ("phone", phone)):
            if not value or not value.strip():
                raise ValidationError(f"Customer {label} is required")

        customer = Customer(
            id=customer_id.strip(),
            name=name.strip(),
            email=email.strip(),
            phone=phone.strip(),
        )

        store = self._store_repo.load()
        store.add_customer(customer)
        self._store_repo.save(store)
        return customer
