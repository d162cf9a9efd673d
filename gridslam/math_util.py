"""Scalar helpers: angles, clamping, powers and polynomial roots."""

from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def clamp(value, min_value, max_value):
    """Return ``value`` limited to the closed range [min_value, max_value]."""
    return max(min_value, min(value, max_value))


def rad_to_deg(angle):
    """Convert an angle in radians to degrees."""
    return angle / math.pi * 180.0


def deg_to_rad(angle):
    """Convert an angle in degrees to radians."""
    return angle / 180.0 * math.pi


def angle_mod(angle):
    """Wrap an angle into the range [-pi, pi]."""
    return angle - TWO_PI * round(angle / TWO_PI)


def angle_diff(a0, a1):
    """Signed wrapped difference ``a0 - a1``."""
    return angle_mod(a0 - a1)


def angle_dist(a0, a1):
    """Absolute wrapped distance between two angles."""
    return abs(angle_mod(a0 - a1))


def is_angle_between(query, start_angle, end_angle, rotation_sign):
    """Check whether ``query`` lies on the arc from start to end.

    ``rotation_sign`` is 1 for counter-clockwise, -1 for clockwise and 0 for
    a degenerate arc made of a single angle.
    """
    if rotation_sign == 0:
        return query == start_angle and start_angle == end_angle
    if rotation_sign == 1:
        if start_angle < end_angle:
            return start_angle <= query <= end_angle
        return query > start_angle or query < end_angle
    if start_angle > end_angle:
        return end_angle <= query <= start_angle
    return query > end_angle or query < start_angle


def sq(x):
    """Square of ``x``."""
    return x * x


def cube(x):
    """Cube of ``x``."""
    return x * x * x


def power(x, n):
    """``x`` multiplied by itself ``n`` times (``n`` a non-negative integer)."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = type(x)(1) if isinstance(x, (int, float)) else 1
    for _ in range(n):
        result *= x
    return result


def ramp(x, x_min, x_max, y_min, y_max):
    """Linear interpolation from y_min to y_max, saturated outside [x_min, x_max]."""
    if x <= x_min:
        return y_min
    if x >= x_max:
        return y_max
    return y_min + (x - x_min) / (x_max - x_min) * (y_max - y_min)


def solve_quadratic(a, b, c):
    """Real roots of ``a*x^2 + b*x + c = 0`` as an ascending tuple of unique roots."""
    discriminant = sq(b) - 4.0 * a * c
    if discriminant < 0:
        return ()
    if discriminant == 0:
        return (-b / (2.0 * a),)
    root = math.sqrt(discriminant)
    if a >= 0:
        return ((-b - root) / (2.0 * a), (-b + root) / (2.0 * a))
    return ((-b + root) / (2.0 * a), (-b - root) / (2.0 * a))


def bound(min_val, max_val, x):
    """Return ``x`` bounded to [min_val, max_val]."""
    if x > max_val:
        x = max_val
    if x < min_val:
        x = min_val
    return x


def abs_bound(limit, x):
    """Return ``x`` bounded to lie within +/- ``limit``."""
    return bound(-abs(limit), abs(limit), x)


def sign(val):
    """Return 1, -1 or 0 according to the sign of ``val``."""
    return int(val > 0) - int(val < 0)


def _cbrt(x):
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def solve_cubic(a, b, c, d):
    """Real roots of ``a*x^3 + b*x^2 + c*x + d = 0`` as an ascending tuple of unique roots."""
    discriminant = (
        18 * a * b * c * d
        - 4 * cube(b) * d
        + sq(b) * sq(c)
        - 4 * a * cube(c)
        - 27 * sq(a) * sq(d)
    )
    discriminant0 = sq(b) - 3 * a * c
    discriminant1 = 2 * cube(b) - 9 * a * b * c + 27 * sq(a) * d

    if discriminant > 0:
        p = (3 * a * c - sq(b)) / (3 * sq(a))
        q = (2 * cube(b) - 9 * a * b * c + 27 * sq(a) * d) / (27 * cube(a))
        arg = clamp(3 * q / (2 * p) * math.sqrt(-3 / p), -1.0, 1.0)
        roots = [
            2 * math.sqrt(-p / 3)
            * math.cos(math.acos(arg) / 3.0 - 2.0 * k * math.pi / 3.0)
            - b / (3 * a)
            for k in range(3)
        ]
        return tuple(sorted(roots))
    if discriminant == 0:
        if discriminant0 == 0:
            return (-b / (3 * a),)
        double_root = (9 * a * d - b * c) / (2 * discriminant0)
        simple_root = (4 * a * b * c - 9 * sq(a) * d - cube(b)) / (a * discriminant0)
        return tuple(sorted((double_root, simple_root)))

    root_term = math.sqrt(-27 * sq(a) * discriminant)
    big_c = _cbrt((discriminant1 + root_term) / 2)
    if big_c == 0:
        big_c = _cbrt((discriminant1 - root_term) / 2)
    return (-1.0 / (3 * a) * (b + big_c + discriminant0 / big_c),)