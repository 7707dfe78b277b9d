"""Application service: Add Product use case."""

from __future__ import annotations

from orderstore.domain.exceptions import ValidationError
from orderstore.domain.model.product import Product
from orderstore.domain.model.value_objects import Money
from orderstore.domain.repository.store_repository import StoreRepository


class AddProductHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, product_id: str, name: str, price: str) -> Product:
        """Add a new product to the catalog."""
        if not product_id or not product_id.strip():
            raise ValidationError("Product ID is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = Product(id=product_id.strip(), name=name.strip(), price=Money.of(price))

        store = self._store_repo.load()
        store.add_product(product)
        self._store_repo.save(store)
        return product
