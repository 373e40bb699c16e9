from __future__ import annotations

import unittest

from core.sequences import unique_ints


class UniqueIntsTests(unittest.TestCase):
    def test_unsorted_keeps_first_occurrence_order(self) -> None:
        cases = [
            ([], []),
            ([1, 1, 1, 1, 1], [1]),
            ([1, 2, 1, 2, 3, 4], [1, 2, 3, 4]),
            ([4, 3, 4, 3, 2, 2], [4, 3, 2]),
            ([8, 3, 8, 4, 6, 1], [8, 3, 4, 6, 1]),
        ]
        for values, expected in cases:
            with self.subTest(values=values):
                self.assertEqual(unique_ints(values, False), expected)

    def test_sorted(self) -> None:
        cases = [
            ([], []),
            ([1, 1, 1, 1, 1], [1]),
            ([1, 2, 1, 2, 3, 4], [1, 2, 3, 4]),
            ([4, 3, 4, 3, 2, 2], [2, 3, 4]),
            ([8, 3, 8, 4, 6, 1], [1, 3, 4, 6, 8]),
            ([0, -5, 3, -5], [-5, 0, 3]),
        ]
        for values, expected in cases:
            with self.subTest(values=values):
                self.assertEqual(unique_ints(values, sort=True), expected)

    def test_accepts_any_iterable(self) -> None:
        self.assertEqual(unique_ints(iter([2, 2, 1])), [2, 1])

    def test_input_is_not_modified(self) -> None:
        values = [3, 1, 3]
        unique_ints(values, sort=True)
        self.assertEqual(values, [3, 1, 3])


if __name__ == "__main__":
    unittest.main()
