from typing import Iterator, List, Optional, Tuple

from store.models import Product
from utils.logger import get_logger

_logger = get_logger(__name__)


class Catalog:
    """
    The set of sellable products, kept in insertion order and keyed by pid.
    """

    def __init__(self) -> None:
        self._products: List[Product] = []

    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, pid: object) -> bool:
        return any(p.pid == pid for p in self._products)

    def add_product(self, product: Product) -> bool:
        """Append a product. A pid already in the catalog is rejected."""
        if product.pid in self:
            _logger.warning(f"Product {product.pid} already in catalog, not added")
            return False
        self._products.append(product)
        _logger.debug(f"Product {product.pid} ({product.name}) added to catalog")
        return True

    def remove_product(self, pid: str) -> None:
        """Remove every product with this pid; does nothing if there is none."""
        before = len(self._products)
        self._products = [p for p in self._products if p.pid != pid]
        if len(self._products) != before:
            _logger.debug(f"Product {pid} removed from catalog")

    def get_product(self, pid: str) -> Optional[Product]:
        for product in self._products:
            if product.pid == pid:
                return product
        return None

    def search_products(self, query: str) -> Iterator[Product]:
        """
        Case-insensitive substring match over name and descr.
        An empty query matches everything.
        """
        needle = query.lower()
        return (
            p
            for p in self._products
            if needle in p.name.lower() or needle in p.descr.lower()
        )

    def filter_by_price(self, min_price: float, max_price: float) -> Iterator[Product]:
        """Products priced within [min_price, max_price], both ends inclusive."""
        return (p for p in self._products if min_price <= p.price <= max_price)
