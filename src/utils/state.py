from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from store import seed
from store.cart import Cart
from store.catalog import Catalog
from store.checkout import CheckoutResult, checkout
from store.models import User


@dataclass
class ShopState:
    """
    Centralized application state shared by screens.

    Fields:
      - catalog: products on sale
      - user: the shopper for this session, owns the order history
      - cart: the shopper's current cart, one per session
    """

    catalog: Catalog
    user: User
    cart: Cart = field(default_factory=Cart)

    @classmethod
    def demo(cls) -> ShopState:
        """State with the sample catalog and demo shopper loaded."""
        return cls(catalog=seed.load_catalog(), user=seed.demo_user())

    def place_order(self, when: Optional[datetime] = None) -> CheckoutResult:
        return checkout(self.user, self.cart, when)
