"""
Cubic bezier numerics. Points are complex numbers, x in the real part and y
in the imaginary part.

The parallel curve of a cubic is not itself a cubic. The offset here follows
the usual reduce-and-scale approximation: the curve is cut at its extrema
and then into "simple" pieces, pieces whose control points lie on one side
of the chord and whose end normals differ by less than 60 degrees. Each
simple piece is scaled about the point where its end normals meet, which
keeps the offset piece close to a true parallel curve.
"""
import math

import numpy as np

from vecpath.core.exceptions import InvalidPointCountError

ERROR = 1e-5
MIN_DEPTH = 5
REDUCE_STEP = 0.01
LINEAR_TOLERANCE = 1e-4


def _line_intersection(p1, p2, p3, p4):
    """
    Intersection of the infinite line through p1, p2 with the one through
    p3, p4. None if they are parallel.
    """
    d12 = p2 - p1
    d34 = p4 - p3
    denom = d12.real * d34.imag - d12.imag * d34.real
    if abs(denom) < 1e-12:
        return None
    d13 = p3 - p1
    ua = (d13.real * d34.imag - d13.imag * d34.real) / denom
    return p1 + ua * d12


def _signed_angle(origin, v1, v2):
    d1 = v1 - origin
    d2 = v2 - origin
    return math.atan2(
        d1.real * d2.imag - d1.imag * d2.real, d1.real * d2.real + d1.imag * d2.imag
    )


def _polyroots(coeffs):
    """
    Real roots of the polynomial within [0, 1].
    """
    roots = np.roots(coeffs)
    return [float(r.real) for r in roots if np.isclose(r.imag, 0) and 0 <= r.real <= 1]


class CubicBezier:
    """Cubic bezier of four complex points."""

    def __init__(self, start, control1, control2, end):
        self.start = complex(start)
        self.control1 = complex(control1)
        self.control2 = complex(control2)
        self.end = complex(end)

    @classmethod
    def from_coords(cls, coords):
        """
        Build from a flat run of coordinates: x0 y0 x1 y1 x2 y2 x3 y3.
        """
        if len(coords) != 8:
            raise InvalidPointCountError("Invalid point count for cubic bezier")
        x0, y0, x1, y1, x2, y2, x3, y3 = coords
        return cls(complex(x0, y0), complex(x1, y1), complex(x2, y2), complex(x3, y3))

    def __repr__(self):
        return f"CubicBezier(start={self.start}, control1={self.control1}, control2={self.control2}, end={self.end})"

    def __eq__(self, other):
        if not isinstance(other, CubicBezier):
            return NotImplemented
        return self.points == other.points

    def __len__(self):
        return 4

    def __getitem__(self, item):
        return self.points[item]

    @property
    def points(self):
        return self.start, self.control1, self.control2, self.end

    def coords(self):
        """
        The control points as a flat tuple of floats.
        """
        result = []
        for p in self.points:
            result.append(p.real)
            result.append(p.imag)
        return tuple(result)

    def point(self, position):
        """Calculate the complex position at t"""
        n_pos = 1 - position
        return (
            n_pos * n_pos * n_pos * self.start
            + 3 * (n_pos * n_pos * position * self.control1 + n_pos * position * position * self.control2)
            + position * position * position * self.end
        )

    def derivative(self, t, n=1):
        start, control, control2, end = self.points
        if n == 1:
            return (
                3 * (control - start) * (1 - t) ** 2
                + 6 * (control2 - control) * (1 - t) * t
                + 3 * (end - control2) * t**2
            )
        elif n == 2:
            return 6 * ((1 - t) * (control2 - 2 * control + start) + t * (end - 2 * control2 + control))
        elif n == 3:
            return 6 * (end - 3 * (control2 - control) - start)
        return 0

    def tangent(self, t):
        """
        Unit tangent at t. Where the derivative vanishes, as it does at an end
        whose control point sits on top of it, the direction is taken from the
        neighbouring positions instead.
        """
        dseg = self.derivative(t)
        if abs(dseg) < 1e-12:
            h = 1e-4
            dseg = self.point(min(t + h, 1.0)) - self.point(max(t - h, 0.0))
            if abs(dseg) < 1e-12:
                return 0j
        return dseg / abs(dseg)

    def normal(self, t):
        """
        Unit tangent rotated by +90 degrees.
        """
        return self.tangent(t) * 1j

    def split_at(self, t):
        """
        Performs deCasteljau's algorithm unrolled.
        """
        start, control, control2, end = self.points
        r1_0 = t * (control - start) + start
        r1_1 = t * (control2 - control) + control
        r1_2 = t * (end - control2) + control2
        r2_0 = t * (r1_1 - r1_0) + r1_0
        r2_1 = t * (r1_2 - r1_1) + r1_1
        r3 = t * (r2_1 - r2_0) + r2_0
        return CubicBezier(start, r1_0, r2_0, r3), CubicBezier(r3, r2_1, r1_2, end)

    def split(self, t0, t1):
        """
        The part of the curve between t0 and t1.
        """
        if t0 <= 0 and t1 >= 1:
            return CubicBezier(*self.points)
        if t0 <= 0:
            return self.split_at(t1)[0]
        if t1 >= 1:
            return self.split_at(t0)[1]
        right = self.split_at(t0)[1]
        return right.split_at((t1 - t0) / (1 - t0))[0]

    def translate(self, delta):
        return CubicBezier(*(p + delta for p in self.points))

    def length(self, error=ERROR, min_depth=MIN_DEPTH):
        return self.segment_length(0.0, 1.0, error=error, min_depth=min_depth)

    def segment_length(
        self,
        start=0.0,
        end=1.0,
        start_point=None,
        end_point=None,
        error=ERROR,
        min_depth=MIN_DEPTH,
        depth=0,
    ):
        """
        Recursively approximates the length by straight lines.

        The error bound is shared between the two halves of every split, so
        it holds for the whole span rather than for each leaf. A chord falls
        short of its arc by a cubic power of the span, which lets each leaf
        extrapolate from the chord and the two half chords.
        """
        if start_point is None:
            start_point = self.point(start)
        if end_point is None:
            end_point = self.point(end)
        mid = (start + end) / 2
        mid_point = self.point(mid)
        length = abs(end_point - start_point)
        first_half = abs(mid_point - start_point)
        second_half = abs(end_point - mid_point)

        length2 = first_half + second_half
        if (length2 - length > error) or (depth < min_depth):
            depth += 1
            error /= 2
            return self.segment_length(
                start, mid, start_point, mid_point, error, min_depth, depth
            ) + self.segment_length(mid, end, mid_point, end_point, error, min_depth, depth)
        return length2 + (length2 - length) / 3

    def poly(self):
        """
        Returns the curve as a complex numpy polynomial in t.
        """
        p0, p1, p2, p3 = self.points
        return np.poly1d(
            (
                -p0 + 3 * (p1 - p2) + p3,
                3 * (p0 - 2 * p1 + p2),
                3 * (-p0 + p1),
                p0,
            )
        )

    def extrema(self):
        """
        Sorted t values where either coordinate or its slope peaks.
        """
        poly = self.poly()
        roots = set()
        for part in (np.real, np.imag):
            axis = np.poly1d(part(poly.coeffs))
            roots.update(_polyroots(axis.deriv().coeffs))
            roots.update(_polyroots(axis.deriv(2).coeffs))
        return sorted(roots)

    def is_linear(self):
        chord = self.end - self.start
        if abs(chord) < 1e-12:
            return all(abs(p - self.start) < LINEAR_TOLERANCE for p in self.points)
        unit = chord / abs(chord)
        for p in (self.control1, self.control2):
            if abs(((p - self.start) / unit).imag) >= LINEAR_TOLERANCE:
                return False
        return True

    def is_simple(self):
        a1 = _signed_angle(self.start, self.end, self.control1)
        a2 = _signed_angle(self.start, self.end, self.control2)
        if (a1 > 0 > a2) or (a1 < 0 < a2):
            return False
        n1 = self.normal(0)
        n2 = self.normal(1)
        s = n1.real * n2.real + n1.imag * n2.imag
        return abs(math.acos(max(-1.0, min(1.0, s)))) < math.pi / 3

    def reduce(self):
        """
        Cuts the curve into simple pieces.

        @return: list of CubicBezier
        """
        extrema = self.extrema()
        if not extrema or extrema[0] > 1e-9:
            extrema.insert(0, 0.0)
        if extrema[-1] < 1 - 1e-9:
            extrema.append(1.0)
        pass1 = []
        for t1, t2 in zip(extrema, extrema[1:]):
            if t2 - t1 > 1e-9:
                pass1.append(self.split(t1, t2))

        pass2 = []
        for piece in pass1:
            t1 = 0.0
            while t1 < 1.0:
                t2 = t1 + REDUCE_STEP
                while t2 < 1.0 and piece.split(t1, t2 + REDUCE_STEP).is_simple():
                    t2 += REDUCE_STEP
                t2 = min(t2, 1.0)
                if 1.0 - t2 < REDUCE_STEP / 2:
                    t2 = 1.0
                pass2.append(piece.split(t1, t2))
                t1 = t2
        return pass2

    def scale(self, d):
        """
        Moves the curve d along its normals.
        """
        n0 = self.normal(0)
        n1 = self.normal(1)
        origin = _line_intersection(self.start, self.start + n0, self.end, self.end + n1)
        if origin is None:
            return self.translate(n0 * d)
        start = self.start + d * n0
        end = self.end + d * n1
        control1 = _line_intersection(start, start + self.derivative(0), origin, self.control1)
        if control1 is None:
            control1 = self.control1 + d * n0
        control2 = _line_intersection(end, end + self.derivative(1), origin, self.control2)
        if control2 is None:
            control2 = self.control2 + d * n1
        return CubicBezier(start, control1, control2, end)

    def offset(self, d):
        """
        Approximates the curve parallel to this one at distance d.

        @param d: signed distance along the +90 degree normal
        @return: list of CubicBezier, joined end to start
        """
        if self.is_linear():
            return [self.translate(self.normal(0) * d)]
        return [
            piece.translate(piece.normal(0) * d) if piece.is_linear() else piece.scale(d)
            for piece in self.reduce()
        ]
