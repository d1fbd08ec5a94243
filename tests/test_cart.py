import itertools
import unittest

from store.cart import Cart
from store.models import Product


def make_product(pid="1", price=99.99, stock=50, name="Wireless Headphones"):
    return Product(
        pid=pid,
        name=name,
        price=price,
        descr="High-quality wireless headphones with noise cancellation",
        image="headphones.jpg",
        stock=stock,
    )


class CartTestCase(unittest.TestCase):
    def setUp(self):
        self.cart = Cart()
        self.p1 = make_product()
        self.p2 = make_product(pid="2", price=199.99, stock=30, name="Smart Watch")

    # ---------- add_item ----------

    def test_add_more_than_stock_to_empty_cart_fails(self):
        self.assertFalse(self.cart.add_item(self.p1, 51))
        self.assertTrue(self.cart.is_empty)
        self.assertEqual(self.cart.items, ())

    def test_add_up_to_stock_succeeds(self):
        self.assertTrue(self.cart.add_item(self.p1, 50))
        self.assertEqual(self.cart.get_line("1").qty, 50)

    def test_add_merges_into_existing_line(self):
        self.assertTrue(self.cart.add_item(self.p1, 10))
        self.assertTrue(self.cart.add_item(self.p1, 5))
        self.assertEqual(len(self.cart), 1)
        self.assertEqual(self.cart.get_line("1").qty, 15)

    def test_merge_beyond_stock_fails_and_keeps_quantity(self):
        self.assertTrue(self.cart.add_item(self.p1, 10))
        self.assertFalse(self.cart.add_item(self.p1, 45))  # 10 + 45 > 50
        self.assertEqual(self.cart.get_line("1").qty, 10)

    def test_default_quantity_is_one(self):
        self.assertTrue(self.cart.add_item(self.p1))
        self.assertEqual(self.cart.get_line("1").qty, 1)

    def test_non_positive_or_non_integer_quantity_rejected(self):
        for qty in (0, -1, 1.5, True, "2"):
            with self.subTest(qty=qty):
                self.assertFalse(self.cart.add_item(self.p1, qty))
        self.assertTrue(self.cart.is_empty)
        self.assertEqual(self.cart.get_total(), 0.0)

    def test_out_of_stock_product_cannot_be_added(self):
        sold_out = make_product(pid="9", stock=0)
        self.assertFalse(self.cart.add_item(sold_out, 1))
        self.assertIsNone(self.cart.get_line("9"))

    def test_lines_keep_insertion_order(self):
        self.cart.add_item(self.p2, 1)
        self.cart.add_item(self.p1, 1)
        self.assertEqual([line.product.pid for line in self.cart.items], ["2", "1"])

    def test_line_references_catalog_product(self):
        self.cart.add_item(self.p1, 1)
        self.assertIs(self.cart.get_line("1").product, self.p1)

    # ---------- remove_item ----------

    def test_remove_item(self):
        self.cart.add_item(self.p1, 2)
        self.cart.add_item(self.p2, 1)
        self.cart.remove_item("1")
        self.assertIsNone(self.cart.get_line("1"))
        self.assertEqual(len(self.cart), 1)

    def test_remove_is_idempotent(self):
        self.cart.add_item(self.p1, 2)
        self.cart.add_item(self.p2, 1)
        self.cart.remove_item("2")
        once = [(line.product.pid, line.qty) for line in self.cart.items]
        self.cart.remove_item("2")
        twice = [(line.product.pid, line.qty) for line in self.cart.items]
        self.assertEqual(once, twice)

    def test_remove_missing_is_noop(self):
        self.cart.add_item(self.p1, 2)
        self.assertIsNone(self.cart.remove_item("404"))
        self.assertEqual(self.cart.get_line("1").qty, 2)

    # ---------- update_quantity ----------

    def test_update_quantity_within_stock(self):
        self.cart.add_item(self.p1, 2)
        self.assertTrue(self.cart.update_quantity("1", 40))
        self.assertEqual(self.cart.get_line("1").qty, 40)

    def test_update_quantity_above_stock_fails(self):
        self.cart.add_item(self.p1, 2)
        self.assertFalse(self.cart.update_quantity("1", 51))
        self.assertEqual(self.cart.get_line("1").qty, 2)

    def test_update_quantity_of_missing_line_fails(self):
        self.assertFalse(self.cart.update_quantity("1", 1))
        self.assertTrue(self.cart.is_empty)

    def test_update_quantity_to_zero_removes_line(self):
        self.cart.add_item(self.p1, 2)
        self.assertTrue(self.cart.update_quantity("1", 0))
        self.assertIsNone(self.cart.get_line("1"))
        self.assertTrue(self.cart.is_empty)

    def test_update_quantity_negative_rejected(self):
        self.cart.add_item(self.p1, 2)
        self.assertFalse(self.cart.update_quantity("1", -3))
        self.assertEqual(self.cart.get_line("1").qty, 2)

    def test_update_quantity_non_integer_rejected(self):
        self.cart.add_item(self.p1, 2)
        for qty in (1.5, True, "3", None):
            with self.subTest(qty=qty):
                self.assertFalse(self.cart.update_quantity("1", qty))
                line = self.cart.get_line("1")
                self.assertEqual(line.qty, 2)
                self.assertIs(type(line.qty), int)

    # ---------- totals ----------

    def test_total_of_ten_headphones(self):
        self.cart.add_item(self.p1, 10)
        self.assertAlmostEqual(self.cart.get_total(), 999.90, places=2)

    def test_total_sums_all_lines(self):
        self.cart.add_item(self.p1, 2)
        self.cart.add_item(self.p2, 3)
        expected = sum(line.product.price * line.qty for line in self.cart.items)
        self.assertAlmostEqual(self.cart.get_total(), expected)
        self.assertAlmostEqual(self.cart.get_total(), 2 * 99.99 + 3 * 199.99)

    def test_empty_cart_total_is_zero(self):
        self.assertEqual(self.cart.get_total(), 0.0)

    def test_clear(self):
        self.cart.add_item(self.p1, 2)
        self.cart.add_item(self.p2, 1)
        self.cart.clear()
        self.assertTrue(self.cart.is_empty)
        self.assertEqual(self.cart.get_total(), 0.0)

    # ---------- invariants ----------

    def test_quantity_never_exceeds_stock(self):
        small = make_product(pid="3", stock=4, price=1.0)
        quantities = [-1, 0, 1, 2, 3, 5]
        ops = [("add", q) for q in quantities] + [("set", q) for q in quantities]
        for sequence in itertools.product(ops, repeat=3):
            cart = Cart()
            for op, qty in sequence:
                if op == "add":
                    cart.add_item(small, qty)
                else:
                    cart.update_quantity("3", qty)
                line = cart.get_line("3")
                if line is not None:
                    self.assertGreaterEqual(line.qty, 1, sequence)
                    self.assertLessEqual(line.qty, small.stock, sequence)

    def test_items_view_is_read_only(self):
        self.cart.add_item(self.p1, 1)
        items = self.cart.items
        self.assertIsInstance(items, tuple)
        self.cart.clear()
        self.assertEqual(len(items), 1)

    def test_snapshot_is_detached_from_cart(self):
        self.cart.add_item(self.p1, 2)
        snap = self.cart.snapshot()
        self.cart.update_quantity("1", 7)
        self.cart.add_item(self.p2, 1)
        self.assertEqual(len(snap), 1)
        self.assertEqual(snap[0].qty, 2)
        self.assertAlmostEqual(snap[0].uprice, 99.99)


if __name__ == "__main__":
    unittest.main()
