import unittest

from seqtools import Seq, InvalidArgument


class TestSeq(unittest.TestCase):
    def test_chain_ops(self):
        s = Seq.of(1, 2, 3).map(lambda x: x + 1).filter(lambda x: x % 2 == 0)
        self.assertEqual(s.to_list(), [2, 4])
        self.assertEqual(Seq.from_iterable(range(3)).flat_map(lambda x: [x] * x).to_list(), [1, 2, 2])

    def test_scans(self):
        s = Seq.of(1, 0, 2, 0)
        self.assertEqual(s.count(0), 2)
        self.assertTrue(s.any(lambda x: x == 0))
        self.assertFalse(s.all(lambda x: x > 0))

    def test_partitioning(self):
        s = Seq.of("foo", "bar", "aba", "z", "45")
        self.assertEqual(s.take_while(lambda w: len(w) == 3).to_list(), ["foo", "bar", "aba"])
        self.assertEqual(s.skip_while(lambda w: len(w) == 3).to_list(), ["z", "45"])

    def test_chunk_and_group_by(self):
        r = Seq.of(1, 2, 3, 4, 5).chunk(2)
        self.assertEqual(r.chunks, [[1, 2], [3, 4], [5]])
        self.assertEqual(r.remainder, 1)
        with self.assertRaises(InvalidArgument):
            Seq.of(1).chunk(0)
        g = Seq.of("a", "aa", "b").group_by(len)
        self.assertEqual(g[1], Seq.of("a", "b"))
        self.assertEqual(g[2].to_list(), ["aa"])

    def test_sequence_protocol(self):
        s = Seq.of(4, 5, 6)
        self.assertEqual(len(s), 3)
        self.assertEqual(s[1], 5)
        self.assertEqual(s[1:], Seq.of(5, 6))
        seen = []
        s.for_each(seen.append)
        self.assertEqual(seen, [4, 5, 6])
