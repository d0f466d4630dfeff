import random
import unittest
from collections import Counter

from linesort.sorter import bubble_sort, is_sorted


class TestBubbleSort(unittest.TestCase):
    def test_scenario_a(self):
        records = ["banana", "apple", "cherry"]
        bubble_sort(records)
        self.assertEqual(records, ["apple", "banana", "cherry"])

    def test_scenario_b_single_record(self):
        records = ["x"]
        stats = bubble_sort(records)
        self.assertEqual(records, ["x"])
        self.assertEqual(stats.swaps, 0)
        self.assertEqual(stats.passes, 1)
        self.assertEqual(stats.comparisons, 0)

    def test_scenario_e_duplicates(self):
        records = ["b", "a", "b"]
        bubble_sort(records)
        self.assertEqual(records, ["a", "b", "b"])

    def test_sorts_in_place(self):
        records = ["c", "b", "a"]
        same = records
        bubble_sort(records)
        self.assertIs(records, same)
        self.assertEqual(same, ["a", "b", "c"])

    def test_already_sorted_stops_after_one_pass(self):
        records = ["a", "b", "c", "d"]
        stats = bubble_sort(records)
        self.assertEqual(stats.passes, 1)
        self.assertEqual(stats.comparisons, 3)
        self.assertEqual(stats.swaps, 0)

    def test_reversed_input_swap_count(self):
        records = ["e", "d", "c", "b", "a"]
        stats = bubble_sort(records)
        self.assertEqual(records, ["a", "b", "c", "d", "e"])
        # Every pair is inverted
        self.assertEqual(stats.swaps, 10)

    def test_ordinal_not_locale_order(self):
        records = ["b", "B", "a", "A", "é", "e"]
        bubble_sort(records)
        self.assertEqual(records, ["A", "B", "a", "b", "e", "é"])

    def test_order_matches_utf8_bytes(self):
        records = ["ü", "z", "日本", "Z", "~", ""]
        bubble_sort(records)
        self.assertEqual(records, sorted(records, key=lambda s: s.encode("utf-8")))

    def test_empty_record_set(self):
        records = []
        stats = bubble_sort(records)
        self.assertEqual(records, [])
        self.assertEqual(stats.swaps, 0)

    def test_random_inputs_are_sorted_permutations(self):
        rng = random.Random(1234)
        alphabet = "abcAB xyz09"
        for _ in range(50):
            records = [
                "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 6)))
                for _ in range(rng.randint(1, 30))
            ]
            original = list(records)
            bubble_sort(records)

            self.assertEqual(Counter(records), Counter(original))
            self.assertTrue(is_sorted(records))
            self.assertEqual(records, sorted(original))

            again = list(records)
            stats = bubble_sort(again)
            self.assertEqual(again, records)
            self.assertEqual(stats.swaps, 0)


class TestIsSorted(unittest.TestCase):
    def test_is_sorted(self):
        self.assertTrue(is_sorted([]))
        self.assertTrue(is_sorted(["a"]))
        self.assertTrue(is_sorted(["a", "a", "b"]))
        self.assertFalse(is_sorted(["b", "a"]))


if __name__ == "__main__":
    unittest.main()
