import unittest

from drawtable.table.iterators import EntryHandle
from drawtable.table.weighted import WeightedTable


class WeightedTableIterationTests(unittest.TestCase):
    @staticmethod
    def _table():
        return WeightedTable([(1, 10), (2, 20)])

    def test_iter_yields_pairs_in_insertion_order(self):
        iterator = self._table().iter()

        self.assertEqual(next(iterator), (1, 10))
        self.assertEqual(next(iterator), (2, 20))
        with self.assertRaises(StopIteration):
            next(iterator)

    def test_iter_does_not_consume(self):
        table = self._table()
        self.assertEqual(list(table.iter()), [(1, 10), (2, 20)])
        self.assertEqual(list(table.iter()), [(1, 10), (2, 20)])
        self.assertEqual(len(table), 2)

    def test_iter_is_single_pass(self):
        iterator = self._table().iter()
        self.assertEqual(len(list(iterator)), 2)
        self.assertEqual(list(iterator), [])
        self.assertIs(iter(iterator), iterator)

    def test_iter_mut_yields_handles(self):
        iterator = self._table().iter_mut()

        first = next(iterator)
        self.assertIsInstance(first, EntryHandle)
        self.assertEqual(first, (1, 10))
        self.assertEqual(next(iterator), (2, 20))
        with self.assertRaises(StopIteration):
            next(iterator)

    def test_iter_mut_changes_underlying_table_without_reordering(self):
        table = WeightedTable([("a", 10), ("b", 20)])

        for entry in table.iter_mut():
            entry.value = entry.value.upper()
            entry.weight += 10

        self.assertEqual(table.get_entry(0), ("A", 20))
        self.assertEqual(table.get_entry(1), ("B", 30))
        self.assertEqual(table.total_weight, 30)
        table.resync_total_weight()
        self.assertEqual(table.total_weight, 50)

    def test_iter_mut_handles_unpack_like_pairs(self):
        table = WeightedTable([("a", 1)])
        for value, weight in table.iter_mut():
            self.assertEqual(value, "a")
            self.assertEqual(weight, 1)

    def test_structural_change_during_iteration_raises(self):
        table = self._table()
        iterator = table.iter()
        next(iterator)
        table.insert(3, 30)
        with self.assertRaises(RuntimeError):
            next(iterator)

        mut_iterator = table.iter_mut()
        table.remove(1)
        with self.assertRaises(RuntimeError):
            next(mut_iterator)

    def test_weight_update_during_iteration_is_allowed(self):
        table = self._table()
        seen = []
        for value, weight in table.iter():
            seen.append(value)
            table.insert(value, weight + 1)
        self.assertEqual(seen, [1, 2])
        self.assertEqual(table.weights(), [11, 21])

    def test_plain_iteration_yields_values(self):
        table = self._table()
        self.assertEqual(list(table), [1, 2])
        self.assertEqual(len(table), 2)

    def test_into_iter_consumes_table(self):
        table = self._table()
        iterator = table.into_iter()

        self.assertEqual(len(table), 0)
        self.assertEqual(table.total_weight, 0)
        self.assertEqual(iterator.__length_hint__(), 2)
        self.assertEqual(list(iterator), [1, 2])
        self.assertEqual(list(iterator), [])

    def test_into_iter_is_unaffected_by_later_table_use(self):
        table = self._table()
        iterator = table.into_iter()
        table.insert(9, 1)
        self.assertEqual(list(iterator), [1, 2])
        self.assertEqual(table.values(), [9])

    def test_all_modes_agree_on_order(self):
        pairs = [("c", 3), ("a", 1), ("b", 2), ("a", 4)]
        table = WeightedTable.from_sequence(pairs)

        borrowed = [value for value, _weight in table.iter()]
        mutable = [entry.value for entry in table.iter_mut()]
        owned = list(table.into_iter())

        self.assertEqual(borrowed, ["c", "a", "b"])
        self.assertEqual(mutable, borrowed)
        self.assertEqual(owned, borrowed)


if __name__ == "__main__":
    unittest.main()
