import os
import tempfile
import unittest

from figsearch.errors import InvalidImage
from figsearch.io import load_bitmap, parse_bitmap, validate_file


class TestParseBitmap(unittest.TestCase):
    def test_parse(self):
        bmp = parse_bitmap("2 3\n1 0 1\n0 1 1\n")
        self.assertEqual(bmp.shape, (2, 3))
        self.assertEqual(bmp.to_rows(), [[1, 0, 1], [0, 1, 1]])

    def test_leading_zeros_are_decimal(self):
        self.assertEqual(parse_bitmap("01 2\n00 01\n").to_rows(), [[0, 1]])

    def test_line_breaks_do_not_matter(self):
        self.assertEqual(parse_bitmap("2 2 1 0 0 1"), parse_bitmap("2 2\n1 0\n0 1\n"))

    def test_rejects_malformed(self):
        bad = [
            "",
            "3",
            "a 2\n0 0",
            "0 2\n",
            "2 -1\n",
            "2 2\n1 0\n0\n",
            "2 2\n1 0\n0 1 1\n",
            "2 2\n1 0\n0 2\n",
            "2 2\n1 0\n0 x\n",
            "1 1\n-1\n",
            "1 1\n+1\n",
            "1 2\n0_1 0\n",
            "1 1\n\u0661\n",
            "+1 1\n1\n",
        ]
        for text in bad:
            with self.assertRaises(InvalidImage, msg=repr(text)):
                parse_bitmap(text)


class TestLoadBitmap(unittest.TestCase):
    def test_load_and_validate(self):
        with tempfile.TemporaryDirectory() as td:
            good = os.path.join(td, "good.txt")
            with open(good, "w") as f:
                f.write("3 3\n1 1 1\n1 1 1\n1 1 1\n")
            bad = os.path.join(td, "bad.txt")
            with open(bad, "w") as f:
                f.write("3 3\n1 1 1\n1 1 1\n")

            self.assertEqual(load_bitmap(good).count(), 9)
            self.assertTrue(validate_file(good))
            self.assertFalse(validate_file(bad))
            with self.assertRaises(InvalidImage):
                load_bitmap(bad)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as td:
            path = os.path.join(td, "missing.txt")
            self.assertFalse(validate_file(path))
            with self.assertRaises(InvalidImage):
                load_bitmap(path)


if __name__ == "__main__":
    unittest.main()
