"""Two-dimensional line segments."""

from __future__ import annotations

import numpy as np

from gridslam.geometry import EPSILON, cross, normalized_or_zero


def _point(value) -> np.ndarray:
    vec = np.asarray(value, dtype=float).reshape(-1)
    if vec.shape != (2,):
        raise ValueError("expected a two-component point")
    return vec.copy()


class Line:
    """A segment from ``p0`` to ``p1``."""

    __slots__ = ("p0", "p1")

    def __init__(self, p0=(0.0, 0.0), p1=(0.0, 0.0)):
        self.p0 = _point(p0)
        self.p1 = _point(p1)

    @classmethod
    def from_coords(cls, x0, y0, x1, y1):
        """Build a segment from its end-point coordinates."""
        return cls((x0, y0), (x1, y1))

    def __repr__(self):
        return f"Line({self.p0.tolist()}, {self.p1.tolist()})"

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return bool(np.array_equal(self.p0, other.p0) and np.array_equal(self.p1, other.p1))

    __hash__ = None

    def set(self, p0, p1):
        """Replace both end points."""
        self.p0 = _point(p0)
        self.p1 = _point(p1)

    def length(self):
        """Length of the segment."""
        return float(np.linalg.norm(self.p0 - self.p1))

    def sq_length(self):
        """Squared length of the segment."""
        d = self.p0 - self.p1
        return float(d @ d)

    def direction(self):
        """Unit vector from ``p0`` to ``p1`` (zero for a degenerate segment)."""
        return normalized_or_zero(self.p1 - self.p0)

    def unit_normal(self):
        """Unit normal, the direction rotated counter-clockwise."""
        d = self.direction()
        return np.array([-d[1], d[0]])

    def closest_approach(self, p2, p3):
        """Closest approach of segment p2-p3 to this line, as in a sweep test."""
        p2, p3 = _point(p2), _point(p3)
        d = self.direction()
        length = self.length()
        p20 = p2 - self.p0
        p30 = p3 - self.p0
        p2d = float(d @ p20)
        p3d = float(d @ p30)
        if p2d <= 0 and p3d <= 0:
            return float(min(np.linalg.norm(p20), np.linalg.norm(p30)))
        if p2d >= length and p3d >= length:
            return float(min(np.linalg.norm(p2 - self.p1), np.linalg.norm(p3 - self.p1)))
        n = self.unit_normal()
        return float(min(abs(n @ p20), abs(n @ p30)))

    def closest_approach_line(self, other):
        """Closest approach of another segment."""
        return self.closest_approach(other.p0, other.p1)

    def _boxes_overlap(self, p2, p3):
        p0, p1 = self.p0, self.p1
        if min(p0[0], p1[0]) > max(p2[0], p3[0]):
            return False
        if max(p0[0], p1[0]) < min(p2[0], p3[0]):
            return False
        if min(p0[1], p1[1]) > max(p2[1], p3[1]):
            return False
        if max(p0[1], p1[1]) < min(p2[1], p3[1]):
            return False
        return True

    def closer_than(self, p2, p3, margin):
        """Whether segment p2-p3 comes within ``margin`` of this segment."""
        p2, p3 = _point(p2), _point(p3)
        p0, p1 = self.p0, self.p1
        if (
            min(p0[0], p1[0]) > max(p2[0], p3[0]) + margin
            or max(p0[0], p1[0]) < min(p2[0], p3[0]) - margin
            or min(p0[1], p1[1]) > max(p2[1], p3[1]) + margin
            or max(p0[1], p1[1]) < min(p2[1], p3[1]) - margin
        ):
            return False
        if self.intersects(p2, p3):
            return True
        return self.closest_approach(p2, p3) < margin

    def crosses(self, p2, p3):
        """Whether segment p2-p3 strictly crosses this one (touching excluded)."""
        p2, p3 = _point(p2), _point(p3)
        if not self._boxes_overlap(p2, p3):
            return False
        d1 = self.p1 - self.p0
        d2 = p3 - p2
        return (
            cross(d1, p3 - self.p0) * cross(d1, p2 - self.p0) < -EPSILON
            and cross(d2, self.p1 - p2) * cross(d2, self.p0 - p2) < -EPSILON
        )

    def _straddles(self, p2, p3):
        if not self._boxes_overlap(p2, p3):
            return False
        d1 = self.p1 - self.p0
        d2 = p3 - p2
        if cross(d1, p3 - self.p0) * cross(d1, p2 - self.p0) > 0.0:
            return False
        if cross(d2, self.p1 - p2) * cross(d2, self.p0 - p2) > 0.0:
            return False
        return True

    def intersects(self, p2, p3):
        """Whether segment p2-p3 crosses or touches this one."""
        return self._straddles(_point(p2), _point(p3))

    def intersection(self, p2, p3):
        """Intersection point with segment p2-p3, or ``None``.

        Parallel segments have no single intersection and give ``None``.
        """
        p2, p3 = _point(p2), _point(p3)
        if not self._straddles(p2, p3):
            return None
        d1 = self.p1 - self.p0
        d2 = p3 - p2
        d = cross(d2, -d1)
        if d == 0:
            return None
        tb = cross(self.p0 - p2, self.p0 - self.p1) / d
        return p2 + tb * d2

    def crosses_line(self, other):
        """Whether another segment strictly crosses this one."""
        return self.crosses(other.p0, other.p1)

    def intersects_line(self, other):
        """Whether another segment crosses or touches this one."""
        return self.intersects(other.p0, other.p1)

    def intersection_line(self, other):
        """Intersection point with another segment, or ``None``."""
        return self.intersection(other.p0, other.p1)

    def ray_intersects(self, p, direction):
        """Whether the ray from ``p`` along ``direction`` passes through the segment."""
        p = _point(p)
        direction = _point(direction)
        v0 = self.p0 - p
        v1 = self.p1 - p
        if cross(v0, v1) < 0.0:
            v0, v1 = v1, v0
        return cross(v0, direction) >= 0.0 and cross(v1, direction) <= 0.0

    def touches(self, p):
        """Whether ``p`` lies strictly inside the segment."""
        p = _point(p)
        v0 = self.p0 - p
        v1 = self.p1 - p
        return cross(v0, v1) == 0.0 and float(v0 @ v1) < 0.0

    def ray_intersection(self, p, direction):
        """Point where the ray from ``p`` along ``direction`` meets the line.

        A ray parallel to the line gives non-finite coordinates.
        """
        p = _point(p)
        direction = _point(direction)
        numerator = np.float64(cross(self.p1 - p, self.p0 - p))
        denominator = np.float64(cross(direction, self.p0 - self.p1))
        with np.errstate(divide="ignore", invalid="ignore"):
            alpha = numerator / denominator
            return p + alpha * direction