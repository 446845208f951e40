import io
import unittest
from contextlib import redirect_stdout

from vecpath.core.pathfunctions import PATH_FUNCTIONS
from vecpath.main import convert_argument, format_result, run
from vecpath.tools.segments import L, M, Z


def console(*argv):
    out = io.StringIO()
    with redirect_stdout(out):
        code = run(["-X", *argv])
    return code, out.getvalue()


class TestConvert(unittest.TestCase):
    def test_number(self):
        self.assertEqual(convert_argument("2.5"), 2.5)

    def test_vector(self):
        self.assertEqual(convert_argument("3,4"), (3.0, 4.0))

    def test_path(self):
        self.assertEqual(convert_argument("M 0 0 L 1 1 Z"), [M, 0, 0, L, 1, 1, Z])

    def test_format(self):
        self.assertEqual(format_result(True), "true")
        self.assertEqual(format_result(40.0), "40")
        self.assertEqual(format_result((5.0, 0.0)), "5 0")
        self.assertEqual(format_result([M, 0, 0, L, 1.25, 0]), "M 0 0 L 1.25 0")
        self.assertEqual(
            format_result([(M, 0.0, 0.0), (Z,)]), "M 0 0\nZ"
        )


class TestConsole(unittest.TestCase):
    def test_length(self):
        code, out = console("path/length", "M 0 0 L 10 0 L 10 10 L 0 10 Z")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "40")

    def test_position(self):
        code, out = console("path/position-at-length", "5", "M 0 0 L 10 0 L 10 10 L 0 10 Z")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "5 0")

    def test_trim(self):
        code, out = console("path/trim-by-length", "10", "10", "M 0 0 L 10 0 L 10 10 L 0 10 Z")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "M 10 0 L 10 10 L 0 10")

    def test_precision(self):
        code, out = console("-p", "2", "arc", "0,0", "1", "0", "1.5707963267948966")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "M 1 0 C 1 0.55 0.55 1 0 1")

    def test_list(self):
        code, out = console()
        self.assertEqual(code, 0)
        self.assertEqual(out.split(), list(PATH_FUNCTIONS))

    def test_unknown(self):
        code, out = console("path/nothing")
        self.assertEqual(code, 1)
        self.assertIn("Unknown", out)

    def test_error(self):
        code, out = console("path/length", "M 0")
        self.assertEqual(code, 1)
        self.assertIn("Error", out)

    def test_bad_arguments(self):
        code, out = console("path/length")
        self.assertEqual(code, 1)

    def test_version(self):
        code, out = console("-V")
        self.assertEqual(code, 0)
        self.assertIn("vecpath", out)


if __name__ == "__main__":
    unittest.main()
