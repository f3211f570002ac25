import unittest
from symbol_table import VariableStore


class TestVariableStore(unittest.TestCase):
    def setUp(self):
        self.store = VariableStore()

    def test_absent_variable_reads_default(self):
        """Unknown names read as 0 and are not created by reading."""
        self.assertEqual(self.store.get("x"), 0)
        self.assertNotIn("x", self.store)
        self.assertEqual(len(self.store), 0)

    def test_increment_and_decrement_count(self):
        """Final value equals increments minus decrements."""
        for op in ["incr", "incr", "decr", "incr", "decr", "incr"]:
            if op == "incr":
                self.store.increment("x")
            else:
                self.store.decrement("x")
        self.assertEqual(self.store.get("x"), 2)

    def test_decrement_below_zero(self):
        """There is no floor at zero."""
        self.assertEqual(self.store.decrement("x"), -1)
        self.assertEqual(self.store.decrement("x"), -2)
        self.assertEqual(self.store.increment("x"), -1)

    def test_clear_removes_variable(self):
        for _ in range(7):
            self.store.increment("x")
        self.store.clear("x")
        self.assertEqual(self.store.get("x"), 0)
        self.assertNotIn("x", self.store)
        # Clearing an absent variable is harmless
        self.store.clear("never_set")

    def test_ensure_does_not_overwrite(self):
        self.store.ensure("x")
        self.assertIn("x", self.store)
        self.assertEqual(self.store.get("x"), 0)
        self.store.increment("x")
        self.store.ensure("x")
        self.assertEqual(self.store.get("x"), 1)

    def test_format_lines_in_insertion_order(self):
        self.store.increment("b")
        self.store.ensure("a")
        self.store.decrement("c")
        self.assertEqual(self.store.format_lines(), ["b= 1", "a= 0", "c= -1"])

    def test_snapshot_is_a_copy(self):
        self.store.increment("x")
        snap = self.store.snapshot()
        snap["x"] = 100
        self.assertEqual(self.store.get("x"), 1)

    def test_reset(self):
        self.store.increment("x")
        self.store.increment("y")
        self.store.reset()
        self.assertEqual(self.store.snapshot(), {})


if __name__ == '__main__':
    unittest.main()
