"""Plain-text invoice rendering for a single order."""

from __future__ import annotations

from orderstore.domain.model.order import Order

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def render_invoice(order: Order) -> str:
    """Lay out *order* as a printable invoice. Items keep their order."""
    customer = order.customer
    lines = [
        "INVOICE",
        f"Order ID: {order.id}",
        f"Date: {order.order_date.strftime(DATE_FORMAT)}",
        "",
        "Customer:",
        f"  Name: {customer.name}",
        f"  Email: {customer.email}",
        f"  Phone: {customer.phone}",
        "",
        "Items:",
    ]
    for item in order.items:
        lines.append(
            f"  {item.product.name:<20} {item.quantity.value:>3} x "
            f"${item.unit_price.amount:<8.2f} ${item.subtotal.amount:.2f}"
        )
    lines.append("")
    lines.append(f"Total Amount: {order.total_amount}")
    return "\n".join(lines)
