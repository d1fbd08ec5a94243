from typing import List, Optional, Tuple

from store.models import CartLine, OrderLine, Product
from utils.logger import get_logger

_logger = get_logger(__name__)


class Cart:
    """
    The current shopper's line items, at most one line per product.

    Every mutation is checked against the product's stock, so a line's qty
    never exceeds product.stock. Failed mutations return False and leave the
    cart as it was.
    """

    def __init__(self) -> None:
        self._lines: List[CartLine] = []

    @property
    def items(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def get_line(self, pid: str) -> Optional[CartLine]:
        for line in self._lines:
            if line.product.pid == pid:
                return line
        return None

    def add_item(self, product: Product, qty: int = 1) -> bool:
        """
        Add qty of product, merging into the existing line if there is one.
        Returns False if qty is not a positive integer or the resulting
        quantity would exceed stock.
        """
        if not isinstance(qty, int) or isinstance(qty, bool) or qty < 1:
            return False

        existing = self.get_line(product.pid)
        if existing:
            if existing.qty + qty > product.stock:
                _logger.debug(
                    f"Cannot add {qty} x {product.pid}: "
                    f"{existing.qty} in cart, {product.stock} in stock"
                )
                return False
            existing.qty += qty
        else:
            if qty > product.stock:
                _logger.debug(
                    f"Cannot add {qty} x {product.pid}: {product.stock} in stock"
                )
                return False
            self._lines.append(CartLine(product=product, qty=qty))

        _logger.debug(f"Added {qty} x {product.pid} to cart")
        return True

    def remove_item(self, pid: str) -> None:
        self._lines = [line for line in self._lines if line.product.pid != pid]

    def update_quantity(self, pid: str, qty: int) -> bool:
        """
        Set the quantity of an existing line.
        Zero removes the line; negative values, non-integers or values above
        stock fail.
        """
        if not isinstance(qty, int) or isinstance(qty, bool):
            return False
        line = self.get_line(pid)
        if line is None or qty < 0 or qty > line.product.stock:
            return False
        if qty == 0:
            self.remove_item(pid)
            return True
        line.qty = qty
        _logger.debug(f"Cart quantity of {pid} set to {qty}")
        return True

    def get_total(self) -> float:
        return sum((line.line_total for line in self._lines), 0.0)

    def snapshot(self) -> Tuple[OrderLine, ...]:
        """Frozen copy of the current lines, safe to keep after the cart changes."""
        return tuple(OrderLine.from_cart_line(line) for line in self._lines)

    def clear(self) -> None:
        self._lines = []
