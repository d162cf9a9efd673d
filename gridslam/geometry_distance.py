"""Distances and free space between segments, circles and arcs."""

from __future__ import annotations

import math

import numpy as np

from gridslam.geometry import (
    angle,
    check_line_line_collision,
    heading,
    normalized_or_zero,
    project_point_onto_line,
    project_point_onto_line_segment,
)
from gridslam.math_util import angle_mod, is_angle_between, sq


def _vec(value) -> np.ndarray:
    vec = np.asarray(value, dtype=float).reshape(-1)
    if vec.shape != (2,):
        raise ValueError("expected a two-component vector")
    return vec


def _sq_norm(v) -> float:
    return float(v @ v)


def furthest_free_point_circle(line_start, line_end, circle_center, radius):
    """Walk from ``line_start`` towards ``line_end`` until the circle is hit.

    Returns ``(collides, free_point, squared_distance)``, where ``free_point``
    is the furthest point reachable before entering the circle and
    ``squared_distance`` its squared distance from ``line_start``.
    """
    start = _vec(line_start)
    end = _vec(line_end)
    center = _vec(circle_center)
    r2 = sq(radius)

    if _sq_norm(start - center) < r2:
        free_point = start.copy()
        collides = True
    else:
        projected = project_point_onto_line_segment(center, start, end)
        offset = _sq_norm(projected - center)
        if offset >= r2:
            free_point = end.copy()
            collides = False
        else:
            collides = True
            translation = projected - start
            slide_back = math.sqrt(r2 - offset)
            translation = translation - normalized_or_zero(translation) * slide_back
            free_point = start + translation

    return collides, free_point, _sq_norm(free_point - start)


def min_distance_line_line(a0, a1, b0, b1):
    """Shortest distance between segments a0-a1 and b0-b1."""
    a0, a1, b0, b1 = _vec(a0), _vec(a1), _vec(b0), _vec(b1)
    if check_line_line_collision(a0, a1, b0, b1):
        return 0.0
    candidates = (
        _sq_norm(a0 - project_point_onto_line_segment(a0, b0, b1)),
        _sq_norm(a1 - project_point_onto_line_segment(a1, b0, b1)),
        _sq_norm(b0 - project_point_onto_line_segment(b0, a0, a1)),
        _sq_norm(b1 - project_point_onto_line_segment(b1, a0, a1)),
    )
    return math.sqrt(min(candidates))


def _direction_hits_arc(proj_center_line, along_line_dist, start, end, center,
                        rotation_sign, direction):
    point = direction * along_line_dist + proj_center_line
    query = angle_mod(angle(point - center))
    return is_angle_between(query, start, end, rotation_sign)


def _arc_end_distance(center, start, end, radius, l0, l1):
    min_v = heading(start) * radius + center
    max_v = heading(end) * radius + center
    d_min = _sq_norm(project_point_onto_line_segment(min_v, l0, l1) - min_v)
    d_max = _sq_norm(project_point_onto_line_segment(max_v, l0, l1) - max_v)
    return math.sqrt(min(d_min, d_max))


def min_distance_line_arc(l0, l1, a_center, a_radius, a_angle_start,
                          a_angle_end, rotation_sign):
    """Shortest distance between segment l0-l1 and an arc of a circle.

    The arc runs from ``a_angle_start`` to ``a_angle_end`` in the direction
    given by ``rotation_sign`` (1 counter-clockwise, -1 clockwise).
    """
    l0, l1, center = _vec(l0), _vec(l1), _vec(a_center)
    start = angle_mod(a_angle_start)
    end = angle_mod(a_angle_end)
    r2 = sq(a_radius)

    proj_dir_segment = project_point_onto_line_segment(center, l0, l1) - center
    l0_inside = _sq_norm(l0 - center) < r2
    l1_inside = _sq_norm(l1 - center) < r2

    if _sq_norm(proj_dir_segment) >= r2 or (l0_inside and l1_inside):
        # Out of the circle, tangent to it, or completely inside it.
        query = angle_mod(angle(proj_dir_segment))
        if is_angle_between(query, start, end, rotation_sign):
            distance_to_proj = float(np.linalg.norm(proj_dir_segment)) - a_radius
            if distance_to_proj >= 0:
                return distance_to_proj
        min_v = heading(start) * a_radius
        max_v = heading(end) * a_radius
        return math.sqrt(
            min(_sq_norm(proj_dir_segment - min_v), _sq_norm(proj_dir_segment - max_v))
        )

    proj_center_line = project_point_onto_line(center, l0, l1)
    proj_dir_line = proj_center_line - center
    along_line_dist = math.sqrt(max(0.0, r2 - _sq_norm(proj_dir_line)))

    def hits(direction):
        return _direction_hits_arc(
            proj_center_line, along_line_dist, start, end, center,
            rotation_sign, direction,
        )

    if l0_inside and not l1_inside:
        if hits(normalized_or_zero(l1 - l0)):
            return 0.0
        return _arc_end_distance(center, start, end, a_radius, l0, l1)

    if l1_inside and not l0_inside:
        if hits(normalized_or_zero(l0 - l1)):
            return 0.0
        return _arc_end_distance(center, start, end, a_radius, l0, l1)

    # Both end points outside, but the segment passes through the circle.
    direction = normalized_or_zero(l1 - l0)
    if hits(direction) or hits(-direction):
        return 0.0
    return _arc_end_distance(center, start, end, a_radius, l0, l1)