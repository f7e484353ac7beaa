import unittest

from figsearch.format import NOT_FOUND, format_line, format_result, format_square, line_coordinates
from figsearch.lines import LineRun, Orientation, Point
from figsearch.squares import Square


class TestFormat(unittest.TestCase):
    def test_horizontal_line(self):
        run = LineRun(Point(2, 1), 4, Orientation.HORIZONTAL)
        self.assertEqual(line_coordinates(run), (2, 1, 2, 4))
        self.assertEqual(format_line(run), "2 1 2 4")

    def test_vertical_line(self):
        run = LineRun(Point(2, 1), 4, Orientation.VERTICAL)
        self.assertEqual(format_result(run), "2 1 5 1")

    def test_square(self):
        sq = Square(Point(1, 3), Point(3, 5))
        self.assertEqual(format_square(sq), "1 3 3 5")
        self.assertEqual(format_result(sq), "1 3 3 5")

    def test_not_found(self):
        self.assertEqual(format_result(None), NOT_FOUND)
        self.assertEqual(format_line(None), "Not found")
        self.assertEqual(format_square(None), "Not found")

    def test_unknown_figure(self):
        with self.assertRaises(TypeError):
            format_result(Point(0, 0))


if __name__ == "__main__":
    unittest.main()
