"""Unit tests for the Order aggregate and its line items."""

from datetime import datetime, timedelta, timezone

from orderstore.domain.model.customer import Customer
from orderstore.domain.model.order import Order, OrderItem, normalize_order_date
from orderstore.domain.model.product import Product
from orderstore.domain.model.value_objects import Money, Quantity

JOHN = Customer("cust1", "John Doe", "john@example.com", "111")


def _make_item(pid: str = "p1", name: str = "Widget", qty: int = 1, price: str = "15.00") -> OrderItem:
    """Helper to build a valid line item."""
    return OrderItem.for_product(Product(pid, name, Money.of(price)), Quantity(qty))


class TestOrderItem:

    def test_subtotal_calculation(self):
        item = _make_item(qty=3, price="15.00")
        assert item.subtotal == Money.of("45.00")

    def test_product_is_snapshot(self):
        """The item holds its own product copy, unaffected by later changes."""
        product = Product("p1", "Widget", Money.of("15.00"))
        item = OrderItem.for_product(product, Quantity(2))

        product.update_price(Money.of("99.00"))
        product.name = "Renamed"

        assert item.product is not product
        assert item.unit_price == Money.of("15.00")
        assert item.product.name == "Widget"
        assert item.subtotal == Money.of("30.00")

    def test_reprice_updates_price_and_subtotal(self):
        item = _make_item(qty=4, price="10.00")
        item.reprice(Money.of("2.50"))
        assert item.unit_price == Money.of("2.50")
        assert item.subtotal == Money.of("10.00")


class TestOrderCreation:

    def test_total_is_sum_of_subtotals(self):
        order = Order.create("o1", JOHN, [
            _make_item("p1", qty=3, price="15.00"),
            _make_item("p2", qty=5, price="25.00"),
        ])
        assert order.total_amount == Money.of("170.00")

    def test_empty_order_has_zero_total(self):
        order = Order.create("o1", JOHN, [])
        assert order.total_amount == Money.zero()

    def test_customer_is_copied(self):
        order = Order.create("o1", JOHN, [_make_item()])
        assert order.customer == JOHN
        assert order.customer is not JOHN

    def test_items_keep_insertion_order(self):
        items = [_make_item("p3"), _make_item("p1"), _make_item("p2")]
        order = Order.create("o1", JOHN, items)
        assert [i.product_id for i in order.items] == ["p3", "p1", "p2"]

    def test_default_date_is_now_utc(self):
        before = datetime.now(timezone.utc) - timedelta(seconds=1)
        order = Order.create("o1", JOHN, [_make_item()])
        assert order.order_date.tzinfo == timezone.utc
        assert order.order_date >= before

    def test_str(self):
        order = Order.create(
            "order1", JOHN, [_make_item()],
            order_date=datetime(2024, 1, 5, 10, 30, tzinfo=timezone.utc),
        )
        assert str(order) == "Order order1: John Doe, 2024-01-05, 1 item(s), total $15.00"


class TestOrderDateNormalization:

    def test_truncates_to_milliseconds(self):
        value = datetime(2024, 1, 5, 10, 30, 0, 123456, tzinfo=timezone.utc)
        assert normalize_order_date(value).microsecond == 123000

    def test_naive_taken_as_utc(self):
        value = normalize_order_date(datetime(2024, 1, 5, 10, 30))
        assert value == datetime(2024, 1, 5, 10, 30, tzinfo=timezone.utc)

    def test_other_zone_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        value = normalize_order_date(datetime(2024, 1, 5, 12, 0, tzinfo=plus_two))
        assert value.tzinfo == timezone.utc
        assert value.hour == 10


class TestRepriceProduct:

    def test_matching_items_repriced_and_total_recomputed(self):
        order = Order.create("o1", JOHN, [
            _make_item("p1", qty=1, price="999.99"),
            _make_item("p3", qty=2, price="149.99"),
        ])
        assert order.reprice_product("p1", Money.of("899.99")) is True
        assert order.items[0].subtotal == Money.of("899.99")
        assert order.items[1].subtotal == Money.of("299.98")
        assert order.total_amount == Money.of("1199.97")

    def test_every_item_for_the_product_is_repriced(self):
        order = Order.create("o1", JOHN, [
            _make_item("p1", qty=1, price="10.00"),
            _make_item("p1", qty=2, price="10.00"),
        ])
        order.reprice_product("p1", Money.of("1.00"))
        assert [i.subtotal for i in order.items] == [Money.of("1.00"), Money.of("2.00")]
        assert order.total_amount == Money.of("3.00")

    def test_non_matching_order_untouched(self):
        order = Order.create("o1", JOHN, [_make_item("p1", qty=1, price="10.00")])
        # A stale total stays stale when the order does not hold the product.
        order.total_amount = Money.of("123.45")

        assert order.reprice_product("p9", Money.of("1.00")) is False
        assert order.total_amount == Money.of("123.45")
        assert order.items[0].unit_price == Money.of("10.00")
