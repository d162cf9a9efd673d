"""Two-dimensional rigid poses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from gridslam.math_util import angle_mod


def _as_vector(value) -> np.ndarray:
    vec = np.asarray(value, dtype=float).reshape(-1)
    if vec.shape != (2,):
        raise ValueError("translation must have two components")
    return vec.copy()


def _rotation(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s], [s, c]])


@dataclass(eq=False)
class Pose2D:
    """A planar pose: a heading angle and a translation."""

    angle: float = 0.0
    translation: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self):
        self.angle = float(self.angle)
        self.translation = _as_vector(self.translation)

    @classmethod
    def from_affine(cls, affine):
        """Build a pose from a 2x3 or 3x3 homogeneous affine matrix."""
        matrix = np.asarray(affine, dtype=float)
        if matrix.shape not in ((2, 3), (3, 3)):
            raise ValueError("affine transform must be a 2x3 or 3x3 matrix")
        angle = math.atan2(matrix[1, 0], matrix[0, 0])
        return cls(angle, matrix[:2, 2])

    def __eq__(self, other):
        if not isinstance(other, Pose2D):
            return NotImplemented
        return self.angle == other.angle and bool(
            np.array_equal(self.translation, other.translation)
        )

    __hash__ = None

    def clear(self):
        """Reset to the identity pose."""
        self.angle = 0.0
        self.translation = np.zeros(2)

    def set(self, angle, translation):
        """Replace the angle and translation."""
        self.angle = float(angle)
        self.translation = _as_vector(translation)

    def apply_pose(self, other):
        """Compose ``other`` after this pose, in place."""
        self.translation = self.translation + _rotation(self.angle) @ other.translation
        self.angle = angle_mod(self.angle + other.angle)