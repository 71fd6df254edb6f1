import unittest

from seqtools import for_each, map_each, filter_by, flatten


class TestForEach(unittest.TestCase):
    def test_visits_in_order(self):
        seen = []
        self.assertIsNone(for_each([3, 1, 2], seen.append))
        self.assertEqual(seen, [3, 1, 2])

    def test_error_propagates_after_partial_traversal(self):
        seen = []
        def f(x):
            if x == 2:
                raise ValueError("stop")
            seen.append(x)
        with self.assertRaises(ValueError):
            for_each([1, 2, 3], f)
        self.assertEqual(seen, [1])


class TestMap(unittest.TestCase):
    def test_square_integers(self):
        self.assertEqual(map_each([1, 2, 3], lambda i: i * i), [1, 4, 9])

    def test_type_change_and_empty(self):
        self.assertEqual(map_each([1, 22], str), ["1", "22"])
        self.assertEqual(map_each([], str), [])


class TestFilter(unittest.TestCase):
    def test_keep_non_empty_strings(self):
        self.assertEqual(filter_by(["", "foo", "bar", "", "baz"], lambda s: len(s) > 0), ["foo", "bar", "baz"])

    def test_returns_new_list(self):
        src = [1, 2, 3]
        out = filter_by(src, lambda x: True)
        self.assertEqual(out, src)
        self.assertIsNot(out, src)


class TestFlatten(unittest.TestCase):
    def test_one_empty_nested(self):
        self.assertEqual(flatten([[1, 2, 3], [], [4, 5, 6]]), [1, 2, 3, 4, 5, 6])

    def test_empty_outer_and_mixed_inner_types(self):
        self.assertEqual(flatten([]), [])
        self.assertEqual(flatten([(1,), [2, 3], ()]), [1, 2, 3])
