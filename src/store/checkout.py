from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from store.cart import Cart
from store.models import Order, User
from utils.logger import get_logger

_logger = get_logger(__name__)

EMPTY_CART_REASON = "Your cart is empty!"


@dataclass(frozen=True)
class CheckoutResult:
    """
    Outcome of a checkout attempt: the placed order, or the reason none was
    placed.
    """

    order: Optional[Order] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.order is not None

    @property
    def order_id(self) -> Optional[str]:
        return self.order.order_id if self.order else None


def checkout(user: User, cart: Cart, when: Optional[datetime] = None) -> CheckoutResult:
    """
    Turn the cart into a pending order for user, then empty the cart.
    An empty cart places nothing and changes nothing.
    """
    if cart.is_empty:
        return CheckoutResult(reason=EMPTY_CART_REASON)

    order = Order.create(user, cart.snapshot(), cart.get_total(), when)
    user.add_order(order)
    cart.clear()
    _logger.info(
        f"Order {order.order_id} placed by {user.uid}: "
        f"{len(order.items)} line(s), total {order.total:.2f}"
    )
    return CheckoutResult(order=order)
