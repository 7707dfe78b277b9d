"""Application service: Update Product Price use case."""

from __future__ import annotations

from orderstore.application.dto import PriceUpdateDTO
from orderstore.domain.repository.store_repository import StoreRepository


class UpdateProductPriceHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, product_id: str, new_price: str) -> PriceUpdateDTO:
        """Update a product's price.

        Existing orders holding the product are repriced too. The result
        carries the price as stored and the IDs of the orders whose totals
        were recomputed.
        """
        store = self._store_repo.load()
        affected = store.update_product_price(product_id, new_price)
        self._store_repo.save(store)
        return PriceUpdateDTO(
            product_id=product_id,
            price=str(store.get_product(product_id).price),
            repriced_order_ids=[order.id for order in affected],
        )
