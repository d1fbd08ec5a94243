import types
import unittest

from store import seed
from store.catalog import Catalog
from store.models import Product


class CatalogTestCase(unittest.TestCase):
    def setUp(self):
        self.catalog = seed.load_catalog()

    def pids(self, products):
        return [p.pid for p in products]

    # ---------- add / remove ----------

    def test_seed_loaded_in_order(self):
        self.assertEqual(self.pids(self.catalog.products), ["1", "2", "3", "4", "5"])
        self.assertEqual(len(self.catalog), 5)
        self.assertIn("1", self.catalog)

    def test_add_product(self):
        lamp = Product("6", "Desk Lamp", 25.0, "LED lamp with dimmer", "lamp.jpg", 12)
        self.assertTrue(self.catalog.add_product(lamp))
        self.assertIs(self.catalog.get_product("6"), lamp)
        self.assertEqual(self.catalog.products[-1], lamp)

    def test_duplicate_pid_rejected(self):
        clash = Product("1", "Knock-off", 1.0, "", "", 1)
        self.assertFalse(self.catalog.add_product(clash))
        self.assertEqual(len(self.catalog), 5)
        self.assertEqual(self.catalog.get_product("1").name, "Wireless Headphones")

    def test_remove_product(self):
        self.catalog.remove_product("2")
        self.assertNotIn("2", self.catalog)
        self.assertIsNone(self.catalog.get_product("2"))
        self.assertEqual(len(self.catalog), 4)

    def test_remove_missing_is_noop(self):
        self.catalog.remove_product("404")
        self.assertEqual(len(self.catalog), 5)

    def test_get_product_missing(self):
        self.assertIsNone(self.catalog.get_product("404"))

    # ---------- search ----------

    def test_search_is_lazy(self):
        self.assertIsInstance(self.catalog.search_products("watch"), types.GeneratorType)

    def test_search_by_name(self):
        self.assertEqual(self.pids(self.catalog.search_products("watch")), ["2"])

    def test_search_by_description(self):
        self.assertEqual(
            self.pids(self.catalog.search_products("noise cancellation")), ["1"]
        )

    def test_search_is_case_insensitive(self):
        upper = self.pids(self.catalog.search_products("HEADPHONES"))
        lower = self.pids(self.catalog.search_products("headphones"))
        self.assertEqual(upper, lower)
        self.assertEqual(upper, ["1"])

    def test_empty_query_matches_everything(self):
        self.assertEqual(
            self.pids(self.catalog.search_products("")),
            self.pids(self.catalog.products),
        )

    def test_search_without_match(self):
        self.assertEqual(list(self.catalog.search_products("toaster")), [])

    def test_search_does_not_mutate(self):
        before = self.catalog.products
        list(self.catalog.search_products("a"))
        self.assertEqual(self.catalog.products, before)

    # ---------- price filter ----------

    def test_filter_by_price_is_inclusive(self):
        self.assertEqual(
            self.pids(self.catalog.filter_by_price(99.99, 199.99)), ["1", "2"]
        )

    def test_filter_by_price_single_point(self):
        self.assertEqual(self.pids(self.catalog.filter_by_price(9.99, 9.99)), ["4"])

    def test_filter_by_price_empty_range(self):
        self.assertEqual(list(self.catalog.filter_by_price(200, 100)), [])

    def test_filter_on_empty_catalog(self):
        self.assertEqual(list(Catalog().filter_by_price(0, 1000)), [])
        self.assertEqual(list(Catalog().search_products("")), [])


if __name__ == "__main__":
    unittest.main()
