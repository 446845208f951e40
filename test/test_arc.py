import math
import unittest

from vecpath.tools.arc import KAPPA, arc
from vecpath.tools.bezier import CubicBezier
from vecpath.tools.segments import C, M, iterate_curve


def cubics(path):
    return [
        CubicBezier.from_coords(curve[1:])
        for curve in iterate_curve(path)
        if curve[0] is C
    ]


class TestArc(unittest.TestCase):
    def assertOnCircle(self, path, center, r, tolerance):
        for bezier in cubics(path):
            for i in range(11):
                p = bezier.point(i / 10)
                self.assertAlmostEqual(abs(p - center), r, delta=tolerance * r)

    def test_quarter(self):
        path = arc((0, 0), 10, 0, math.pi / 2)
        expected = [M, 10, 0, C, 10, 10 * KAPPA, 10 * KAPPA, 10, 0, 10]
        self.assertEqual(len(path), len(expected))
        self.assertIs(path[0], M)
        self.assertIs(path[3], C)
        for a, b in zip(path[1:3] + path[4:], expected[1:3] + expected[4:]):
            self.assertAlmostEqual(a, b)

    def test_full_circle(self):
        center = complex(5, -3)
        path = arc((5, -3), 2, 0, math.tau)
        self.assertEqual(len(path), 3 + 4 * 7)
        self.assertAlmostEqual(path[1], 7)
        self.assertAlmostEqual(path[2], -3)
        self.assertAlmostEqual(path[-2], 7)
        self.assertAlmostEqual(path[-1], -3)
        # The standard quarter circle cubic strays up to 0.027% from the circle.
        self.assertOnCircle(path, center, 2, 3e-4)

    def test_full_circle_any_start(self):
        path = arc((0, 0), 10, 0.3, 0.3 + math.tau)
        self.assertEqual(len(path), 3 + 5 * 7)
        self.assertOnCircle(path, 0j, 10, 5e-3)

    def test_reversed(self):
        path = arc((0, 0), 10, math.pi / 2, 0)
        self.assertAlmostEqual(path[1], 0)
        self.assertAlmostEqual(path[2], 10)
        self.assertAlmostEqual(path[-2], 10)
        self.assertAlmostEqual(path[-1], 0)

    def test_partial_ends(self):
        path = arc((0, 0), 10, 0.3, 2.0)
        self.assertEqual(len(path), 3 + 2 * 7)
        self.assertAlmostEqual(path[1], 10 * math.cos(0.3))
        self.assertAlmostEqual(path[2], 10 * math.sin(0.3))
        self.assertAlmostEqual(path[-2], 10 * math.cos(2.0), delta=0.1)
        self.assertAlmostEqual(path[-1], 10 * math.sin(2.0), delta=0.1)
        self.assertOnCircle(path, 0j, 10, 5e-3)

    def test_within_quadrant(self):
        path = arc((1, 1), 10, 0.2, 0.4)
        self.assertEqual(len(path), 3 + 7)
        self.assertAlmostEqual(path[1], 1 + 10 * math.cos(0.2))
        self.assertAlmostEqual(path[2], 1 + 10 * math.sin(0.2))
        self.assertOnCircle(path, 1 + 1j, 10, 5e-3)

    def test_negative_angles(self):
        path = arc((0, 0), 5, -math.pi, 0)
        self.assertEqual(len(path), 3 + 2 * 7)
        self.assertAlmostEqual(path[1], -5)
        self.assertAlmostEqual(path[2], 0)
        # Passes through the bottom of the circle.
        self.assertAlmostEqual(path[8], 0)
        self.assertAlmostEqual(path[9], -5)
        self.assertAlmostEqual(path[-2], 5)
        self.assertAlmostEqual(path[-1], 0)


if __name__ == "__main__":
    unittest.main()
