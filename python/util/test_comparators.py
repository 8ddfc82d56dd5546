import unittest

import numpy as np

from comparators import CountingComparator, by_key, cmp, reverse


class TestComparators(unittest.TestCase):
    def test_cmp(self) -> None:
        self.assertEqual(cmp(1, 2), -1)
        self.assertEqual(cmp(2, 2), 0)
        self.assertEqual(cmp("b", "a"), 1)
        self.assertEqual(cmp(np.int64(3), np.int64(7)), -1)

    def test_reverse(self) -> None:
        self.assertEqual(reverse()(1, 2), 1)
        self.assertEqual(reverse(reverse())(1, 2), -1)

    def test_by_key(self) -> None:
        self.assertEqual(by_key(len)("abc", "de"), 1)
        self.assertEqual(by_key(len, reverse())("abc", "de"), -1)
        self.assertEqual(by_key(abs)(-3, 3), 0)

    def test_counting_comparator(self) -> None:
        counter = CountingComparator()
        self.assertEqual(counter(1, 2), -1)
        self.assertEqual(counter(2, 1), 1)
        self.assertEqual(counter.calls, 2)
        counter.reset()
        self.assertEqual(counter.calls, 0)
        self.assertEqual(CountingComparator(reverse())(1, 2), 1)
