"""Persistence codec: OrderStore <-> JSON-compatible document.

Document layout::

    {
      "customers": [{"id", "name", "email", "phone"}],
      "products":  [{"id", "name", "price"}],
      "orders": [{
        "id",
        "customer": {"id", "name", "email", "phone"},
        "items": [{"product": {"id", "name", "price"}, "quantity", "subtotal"}],
        "orderDate": <epoch millis>,
        "totalAmount": <number>
      }]
    }

Orders carry their own customer and product snapshots. On load those are
read straight from the order record, never looked up in the live
collections, and item subtotals and order totals are restored as stored.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from orderstore.domain.exceptions import CorruptDataError, DomainException
from orderstore.domain.model.customer import Customer
from orderstore.domain.model.order import Order, OrderItem
from orderstore.domain.model.product import Product
from orderstore.domain.model.value_objects import Money, Quantity
from orderstore.domain.service.order_store import OrderStore

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


# --- Encoding -----------------------------------------------------------------


def dump_store(store: OrderStore) -> dict:
    return {
        "customers": [_customer_to_raw(c) for c in store.list_customers()],
        "products": [_product_to_raw(p) for p in store.list_products()],
        "orders": [_order_to_raw(o) for o in store.list_all_orders()],
    }


def _customer_to_raw(customer: Customer) -> dict:
    return {
        "id": customer.id,
        "name": customer.name,
        "email": customer.email,
        "phone": customer.phone,
    }


def _product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": float(product.price),
    }


def _order_to_raw(order: Order) -> dict:
    return {
        "id": order.id,
        "customer": _customer_to_raw(order.customer),
        "items": [
            {
                "product": _product_to_raw(item.product),
                "quantity": item.quantity.value,
                "subtotal": float(item.subtotal),
            }
            for item in order.items
        ],
        "orderDate": (order.order_date - _EPOCH) // _ONE_MS,
        "totalAmount": float(order.total_amount),
    }


# --- Decoding -----------------------------------------------------------------


def load_store(document: Any) -> OrderStore:
    """Build a fresh OrderStore from *document*.

    Raises CorruptDataError naming the offending record if any field is
    missing, has the wrong type, or breaks a domain rule (negative money,
    non-positive quantity, duplicate key).
    """
    doc = _expect_mapping(document, "document")
    store = OrderStore()

    for i, raw in enumerate(_expect_list(doc, "customers", "document")):
        where = f"customers[{i}]"
        _guarded(where, store.add_customer, _customer_from_raw(raw, where))

    for i, raw in enumerate(_expect_list(doc, "products", "document")):
        where = f"products[{i}]"
        _guarded(where, store.add_product, _product_from_raw(raw, where))

    for i, raw in enumerate(_expect_list(doc, "orders", "document")):
        where = f"orders[{i}]"
        _guarded(where, store.restore_order, _order_from_raw(raw, where))

    return store


def _customer_from_raw(raw: Any, where: str) -> Customer:
    rec = _expect_mapping(raw, where)
    return Customer(
        id=_expect_str(rec, "id", where),
        name=_expect_str(rec, "name", where),
        email=_expect_str(rec, "email", where),
        phone=_expect_str(rec, "phone", where),
    )


def _product_from_raw(raw: Any, where: str) -> Product:
    rec = _expect_mapping(raw, where)
    return Product(
        id=_expect_str(rec, "id", where),
        name=_expect_str(rec, "name", where),
        price=_expect_money(rec, "price", where),
    )


def _order_from_raw(raw: Any, where: str) -> Order:
    rec = _expect_mapping(raw, where)
    items: list[OrderItem] = []
    for i, raw_item in enumerate(_expect_list(rec, "items", where)):
        item_where = f"{where}.items[{i}]"
        item = _expect_mapping(raw_item, item_where)
        items.append(
            OrderItem(
                product=_product_from_raw(
                    _field(item, "product", item_where), f"{item_where}.product"
                ),
                quantity=_guarded(
                    item_where, Quantity, _expect_int(item, "quantity", item_where)
                ),
                subtotal=_expect_money(item, "subtotal", item_where),
            )
        )

    return Order(
        id=_expect_str(rec, "id", where),
        customer=_customer_from_raw(_field(rec, "customer", where), f"{where}.customer"),
        items=items,
        order_date=_expect_timestamp(rec, "orderDate", where),
        total_amount=_expect_money(rec, "totalAmount", where),
    )


# --- Field helpers ------------------------------------------------------------


def _guarded(where: str, func, *args):
    """Call *func*, reporting any domain rule it raises as corrupt data."""
    try:
        return func(*args)
    except DomainException as exc:
        raise CorruptDataError(f"{where}: {exc}") from exc


def _field(rec: dict, key: str, where: str) -> Any:
    if key not in rec:
        raise CorruptDataError(f"{where}: missing field '{key}'")
    return rec[key]


def _expect_mapping(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise CorruptDataError(
            f"{where}: expected an object, got {type(value).__name__}"
        )
    return value


def _expect_list(rec: dict, key: str, where: str) -> list:
    value = _field(rec, key, where)
    if not isinstance(value, list):
        raise CorruptDataError(
            f"{where}: field '{key}' must be a list, got {type(value).__name__}"
        )
    return value


def _expect_str(rec: dict, key: str, where: str) -> str:
    value = _field(rec, key, where)
    if not isinstance(value, str):
        raise CorruptDataError(
            f"{where}: field '{key}' must be a string, got {type(value).__name__}"
        )
    return value


def _expect_int(rec: dict, key: str, where: str) -> int:
    value = _field(rec, key, where)
    if not isinstance(value, int) or isinstance(value, bool):
        raise CorruptDataError(
            f"{where}: field '{key}' must be an integer, got {type(value).__name__}"
        )
    return value


def _expect_timestamp(rec: dict, key: str, where: str) -> datetime:
    millis = _expect_int(rec, key, where)
    try:
        return _EPOCH + millis * _ONE_MS
    except OverflowError as exc:
        raise CorruptDataError(
            f"{where}: field '{key}' is out of range ({millis})"
        ) from exc


def _expect_money(rec: dict, key: str, where: str) -> Money:
    value = _field(rec, key, where)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise CorruptDataError(
            f"{where}: field '{key}' must be a number, got {type(value).__name__}"
        )
    return _guarded(where, Money.of, value)
