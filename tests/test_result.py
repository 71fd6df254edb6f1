import unittest

from seqtools import Result, Ok, Err, attempt, InvalidArgument, SeqToolsError


class TestResult(unittest.TestCase):
    def test_result_map_and_then(self):
        r: Result[str, int] = Ok(2).map(lambda x: x + 1)
        self.assertTrue(isinstance(r, Ok))
        self.assertEqual(r.value, 3)
        r2 = r.and_then(lambda x: Ok(x * 2))
        self.assertEqual(r2.value, 6)
        e: Result[str, int] = Err("e").map(lambda x: x + 1)
        self.assertTrue(isinstance(e, Err))
        self.assertEqual(e.get_or_else(7), 7)

    def test_map_err(self):
        self.assertEqual(Err("e").map_err(str.upper).error, "E")
        self.assertEqual(Ok(1).map_err(str.upper).value, 1)

    def test_unwrap(self):
        self.assertEqual(Ok(5).unwrap(), 5)
        with self.assertRaises(ValueError):
            Err("plain").unwrap()

    def test_attempt_captures_library_errors_only(self):
        def bad():
            raise InvalidArgument("chunk size", -1)
        r = attempt(bad)
        self.assertTrue(r.is_err())
        self.assertIsInstance(r.error, SeqToolsError)

        def other():
            raise KeyError("k")
        with self.assertRaises(KeyError):
            attempt(other)
