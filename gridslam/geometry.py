"""Planar vector geometry: crossings, projections, intersections and rays."""

from __future__ import annotations

import math

import numpy as np

from gridslam.math_util import sign, sq

EPSILON = 1e-6


def _vec(value) -> np.ndarray:
    vec = np.asarray(value, dtype=float).reshape(-1)
    if vec.shape != (2,):
        raise ValueError("expected a two-component vector")
    return vec


def heading(angle):
    """Unit vector pointing along ``angle``."""
    return np.array([math.cos(angle), math.sin(angle)])


def perp(v):
    """``v`` rotated by 90 degrees counter-clockwise."""
    v = _vec(v)
    return np.array([-v[1], v[0]])


def cross(v1, v2):
    """Scalar 2D cross product of ``v1`` and ``v2``."""
    v1, v2 = _vec(v1), _vec(v2)
    return float(v1[0] * v2[1] - v2[0] * v1[1])


def normalized_or_zero(vec):
    """``vec`` scaled to unit length, or unchanged if it is the zero vector."""
    vec = _vec(vec)
    if np.sum(np.abs(vec)) == 0:
        return vec.copy()
    return vec / np.linalg.norm(vec)


def norm_or_zero(vec):
    """Euclidean length of ``vec``, exactly 0 for the zero vector."""
    vec = _vec(vec)
    if np.sum(np.abs(vec)) == 0:
        return 0.0
    return float(np.linalg.norm(vec))


def is_parallel(v1, v2):
    """Whether the vectors ``v1`` and ``v2`` are parallel."""
    v1, v2 = _vec(v1), _vec(v2)
    l1 = np.linalg.norm(v1)
    l2 = np.linalg.norm(v2)
    return bool(abs(abs(float(v1 @ v2)) - l1 * l2) < EPSILON)


def is_parallel_lines(p1, p2, p3, p4):
    """Whether the line p1->p2 is parallel to the line p3->p4."""
    return is_parallel(_vec(p2) - _vec(p1), _vec(p4) - _vec(p3))


def is_perpendicular(v1, v2):
    """Whether ``v1`` is perpendicular to ``v2``."""
    return bool(abs(float(_vec(v1) @ _vec(v2))) < EPSILON)


def tangent_points(p, c, r):
    """Tangent points from ``p`` to the circle at ``c`` with radius ``r``.

    Returns ``(right_tangent, left_tangent)``.
    """
    p, c = _vec(p), _vec(c)
    c_p_dir = c - p
    c_p_sqdist = float(c_p_dir @ c_p_dir)
    c_p_dist = math.sqrt(c_p_sqdist)
    c_p_dir = c_p_dir / c_p_dist
    t_p_dist = math.sqrt(c_p_sqdist - sq(r))
    c_p_perp = perp(c_p_dir)
    cos_t = r / c_p_dist
    sin_t = t_p_dist / c_p_dist
    t_projected = c - cos_t * r * c_p_dir
    right = t_projected - sin_t * r * c_p_perp
    left = t_projected + sin_t * r * c_p_perp
    return right, left


def is_between(a, b, c, epsilon):
    """Whether point ``c`` lies on the segment from ``a`` to ``b`` within ``epsilon``."""
    a, b, c = _vec(a), _vec(b), _vec(c)
    dist = np.linalg.norm(a - c) + np.linalg.norm(c - b) - np.linalg.norm(a - b)
    return bool(dist <= epsilon)


def _within(dot, limit):
    return 0 <= dot <= limit


def check_line_line_collision(a0, a1, b0, b1):
    """Whether segments a0-a1 and b0-b1 cross or touch."""
    a0, a1, b0, b1 = _vec(a0), _vec(a1), _vec(b0), _vec(b1)
    a1a0 = a1 - a0
    a0a1 = -a1a0
    b0a0 = b0 - a0
    b1a0 = b1 - a0
    b1a1 = b1 - a1
    b1b0 = b1 - b0
    b0b1 = -b1b0
    a0b0 = a0 - b0
    a1b0 = a1 - b0
    b0a1 = -a1b0
    a0b1 = -b1a0
    a1b1 = a1 - b1
    s1 = sign(cross(a1a0, b0a0))
    s2 = sign(cross(a1a0, b1a0))
    s3 = sign(cross(b1b0, a0b0))
    s4 = sign(cross(b1b0, a1b0))
    if s1 != s2 and s3 != s4:
        return True
    if s1 + s2 != 0 or s3 + s4 != 0:
        return False

    # Colinear segments: check whether any end point lies on the other segment.
    checks = (
        (a1a0, b0a0),
        (a0a1, b0a1),
        (a1a0, b1a0),
        (a0a1, b1a1),
        (b1b0, a0b0),
        (b0b1, a0b1),
        (b1b0, a1b0),
        (b0b1, a1b1),
    )
    return any(_within(float(d @ v), float(d @ d)) for d, v in checks)


def line_line_intersection(a0, a1, b0, b1):
    """Intersection point of the infinite lines through a0-a1 and b0-b1."""
    x1, x2, x3, x4 = _vec(a0), _vec(a1), _vec(b0), _vec(b1)
    a = x2 - x1
    b = x4 - x3
    c = x3 - x1
    numerator = np.float64(cross(c, b))
    denominator = np.float64(cross(a, b))
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = numerator / denominator
        return x1 + a * ratio


def check_line_line_intersection(a0, a1, b0, b1):
    """Intersection point of two segments, or ``None`` if they do not collide."""
    if not check_line_line_collision(a0, a1, b0, b1):
        return None
    return line_line_intersection(a0, a1, b0, b1)


def angle(v):
    """Direction angle of ``v``."""
    v = _vec(v)
    return math.atan2(v[1], v[0])


def project_point_onto_line(point, vertex_a, vertex_b):
    """Projection of ``point`` onto the infinite line through the two vertices."""
    point, vertex_a, vertex_b = _vec(point), _vec(vertex_a), _vec(vertex_b)
    direction = vertex_b - vertex_a
    line_dir = direction / np.linalg.norm(direction)
    return vertex_a + line_dir * float(line_dir @ (point - vertex_a))


def project_point_onto_line_segment(point, vertex_a, vertex_b):
    """Projection of ``point`` onto the segment, clamped to its end points."""
    point, vertex_a, vertex_b = _vec(point), _vec(vertex_a), _vec(vertex_b)
    segment = vertex_b - vertex_a
    scalar = float((point - vertex_a) @ segment) / float(segment @ segment)
    scalar = max(0.0, min(1.0, scalar))
    return vertex_a + scalar * segment


def project_point_onto_line_segment_with_distance(point, vertex_a, vertex_b):
    """Clamped projection onto the segment and its squared distance from ``point``."""
    projected = project_point_onto_line_segment(point, vertex_a, vertex_b)
    diff = _vec(point) - projected
    return projected, float(diff @ diff)


def _ray_params(ray_source, ray_direction, segment_start, segment_end):
    ray_source = _vec(ray_source)
    segment_start = _vec(segment_start)
    line_to_source = ray_source - segment_start
    line_direction = _vec(segment_end) - segment_start
    perpendicular = perp(ray_direction)
    denominator = float(line_direction @ perpendicular)
    if denominator == 0:
        return None
    ray_param = cross(line_direction, line_to_source) / denominator
    line_param = float(line_to_source @ perpendicular) / denominator
    if ray_param >= 0 and 0 <= line_param <= 1:
        return segment_start + line_param * line_direction
    return None


def ray_intersect(ray_source, ray_direction, segment_start, segment_end):
    """Where a ray meets a segment.

    Returns ``(point, squared_distance)`` from the ray source, or ``None``.
    """
    point = _ray_params(ray_source, ray_direction, segment_start, segment_end)
    if point is None:
        return None
    diff = point - _vec(ray_source)
    return point, float(diff @ diff)


def ray_intersects(ray_source, ray_direction, segment_start, segment_end):
    """Whether a ray meets a segment."""
    return _ray_params(ray_source, ray_direction, segment_start, segment_end) is not None


def scalar_projection(vector1, vector2):
    """Scalar projection of ``vector1`` onto the non-zero ``vector2``."""
    vector2 = _vec(vector2)
    length = float(np.linalg.norm(vector2))
    if length == 0:
        raise ValueError("cannot project onto a zero vector")
    return float(_vec(vector1) @ vector2) / length