# provide dataclass models
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Literal, Optional, Tuple

from utils.logger import get_logger
from utils.pure import PAGE_SIZE, paginate

_logger = get_logger(__name__)

OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled"]
ORDER_STATUSES: Tuple[OrderStatus, ...] = (
    "pending",
    "processing",
    "shipped",
    "delivered",
    "cancelled",
)


@dataclass(frozen=True)
class Product:
    pid: str
    name: str
    price: float
    descr: str
    image: str
    stock: int  # upper bound on sellable quantity


@dataclass
class CartLine:
    product: Product  # reference into the catalog, not a copy
    qty: int

    @property
    def line_total(self) -> float:
        return self.product.price * self.qty


@dataclass(frozen=True)
class OrderLine:
    product: Product
    qty: int
    uprice: float  # unit price at time of order

    @property
    def line_total(self) -> float:
        return self.uprice * self.qty

    @classmethod
    def from_cart_line(cls, line: CartLine) -> OrderLine:
        return cls(product=line.product, qty=line.qty, uprice=line.product.price)


@dataclass(eq=False)
class User:
    uid: str
    name: str
    email: str
    address: str
    order_history: List[Order] = field(default_factory=list)

    def add_order(self, order: Order) -> None:
        """Append only, history is never reordered or pruned."""
        self.order_history.append(order)
        _logger.debug(f"Order {order.order_id} recorded for user {self.uid}")

    def list_orders(
        self, page: int, page_size: int = PAGE_SIZE
    ) -> Tuple[List[Order], int]:
        """
        List past orders newest first, paginated.
        Return (orders_for_page, total_count).
        """
        newest_first = sorted(
            self.order_history, key=lambda o: o.odate, reverse=True
        )
        return paginate(newest_first, page, page_size)

    def get_order(self, order_id: str) -> Optional[Order]:
        for order in self.order_history:
            if order.order_id == order_id:
                return order
        return None


@dataclass(eq=False)
class Order:
    order_id: str
    user: User = field(repr=False)
    items: Tuple[OrderLine, ...]
    total: float
    odate: datetime
    status: OrderStatus = "pending"

    @classmethod
    def create(
        cls,
        user: User,
        items: Iterable[CartLine | OrderLine],
        total: float,
        when: Optional[datetime] = None,
    ) -> Order:
        """
        Build a new pending order.

        Cart lines are copied into frozen OrderLine records so later edits to
        the cart never show up on the order.
        """
        snapshot = tuple(
            OrderLine.from_cart_line(i) if isinstance(i, CartLine) else i
            for i in items
        )
        return cls(
            order_id=uuid.uuid4().hex,
            user=user,
            items=snapshot,
            total=total,
            odate=when or datetime.now(),
        )

    def update_status(self, new_status: str) -> bool:
        """
        Overwrite the status with any known state, no transition table.
        Unknown values are rejected and leave the status untouched.
        """
        if new_status not in ORDER_STATUSES:
            _logger.warning(
                f"Rejected unknown status {new_status!r} for order {self.order_id}"
            )
            return False
        _logger.debug(f"Order {self.order_id}: {self.status} -> {new_status}")
        self.status = new_status
        return True
