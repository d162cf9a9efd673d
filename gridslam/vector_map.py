"""Line-segment maps: visibility rendering, ray casting and predicted scans."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from itertools import islice

import numpy as np

from gridslam.geometry import cross, normalized_or_zero
from gridslam.line2d import Line
from gridslam.math_util import angle_mod, rad_to_deg

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 0.05
MAX_RENDER_LINES = 2000

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_RECORD = re.compile(
    rf"\s*({_NUMBER}),\s*({_NUMBER}),\s*({_NUMBER}),\s*({_NUMBER})"
)


def _vec(value) -> np.ndarray:
    vec = np.asarray(value, dtype=float).reshape(-1)
    if vec.shape != (2,):
        raise ValueError("expected a two-component vector")
    return vec.copy()


def _copy(line: Line) -> Line:
    return Line(line.p0, line.p1)


def trim_occlusion(loc, test_line, trim_line, scene_lines):
    """Trim the parts of ``trim_line`` hidden behind ``test_line`` as seen from ``loc``.

    ``trim_line`` is changed in place. If the occluder hides its middle, the
    visible far piece is appended to ``scene_lines``.
    """
    sqeps = 1e-8
    loc = _vec(loc)

    l1_p0, l1_p1 = test_line.p0.copy(), test_line.p1.copy()
    l1_r0, l1_r1 = l1_p0 - loc, l1_p1 - loc
    l2_p0, l2_p1 = trim_line.p0.copy(), trim_line.p1.copy()
    l2_r0, l2_r1 = l2_p0 - loc, l2_p1 - loc

    # Order both segments so that r0 -> r1 turns counter-clockwise.
    if cross(l1_r0, l1_r1) < 0.0:
        l1_r0, l1_r1 = l1_r1, l1_r0
        l1_p0, l1_p1 = l1_p1, l1_p0
    if cross(l2_r0, l2_r1) < 0.0:
        l2_r0, l2_r1 = l2_r1, l2_r0
        l2_p0, l2_p1 = l2_p1, l2_p0

    if (cross(l1_r0, l2_r0) >= 0.0 and cross(l1_r1, l2_r0) >= 0.0) or (
        cross(l2_r0, l1_r0) >= 0.0 and cross(l2_r1, l1_r0) >= 0.0
    ):
        return

    ray_occlusion0 = trim_line.ray_intersects(loc, l1_r0)
    ray_occlusion1 = trim_line.ray_intersects(loc, l1_r1)

    complete_occlusion = test_line.intersects(loc, l2_p0) and test_line.intersects(
        loc, l2_p1
    )
    occlusion0 = ray_occlusion0 and (
        trim_line.touches(loc)
        or trim_line.touches(l1_p0)
        or not trim_line.intersects(loc, l1_p0)
    )
    occlusion1 = ray_occlusion1 and (
        trim_line.touches(loc)
        or trim_line.touches(l1_p1)
        or not trim_line.intersects(loc, l1_p1)
    )

    if complete_occlusion:
        trim_line.set((0.1, 0.1), (0.1, 0.1))
    elif occlusion0 and occlusion1:
        right_section_end = trim_line.ray_intersection(loc, l1_r0)
        left_section_end = trim_line.ray_intersection(loc, l1_r1)
        trim_line.set(l2_p0, right_section_end)
        gap = left_section_end - l2_p1
        if float(gap @ gap) > sqeps:
            scene_lines.append(Line(left_section_end, l2_p1))
    elif occlusion0:
        trim_line.set(l2_p0, trim_line.ray_intersection(loc, l1_r0))
    elif occlusion1:
        trim_line.set(trim_line.ray_intersection(loc, l1_r1), l2_p1)


def get_ray_intersection(loc, skip_line_idx, lines_list, ray_end):
    """Shorten the segment ``loc``-``ray_end`` to its nearest hit among the lines.

    The line at ``skip_line_idx`` is ignored. Returns ``(index, end)``: the
    index of the line hit last (``None`` if none was hit) and the new end.
    """
    loc = _vec(loc)
    end = _vec(ray_end)
    hit_index = None
    for index, line in enumerate(lines_list):
        if index == skip_line_idx:
            continue
        point = line.intersection(loc, end)
        if point is not None:
            end = point
            hit_index = index
    return hit_index, end


def shrink_line(distance, line):
    """Pull both ends of ``line`` inwards by ``distance``, unless it is too short."""
    length = line.length()
    direction = line.direction()
    if length < 2.0 * distance:
        return line
    line.set(line.p0 + distance * direction, line.p1 - distance * direction)
    return line


@dataclass
class _LineCast:
    line: Line
    a0: float
    a1: float
    wraps_around: bool


class VectorMap:
    """A map made of straight line segments."""

    def __init__(self, lines=None, min_line_length=MIN_LINE_LENGTH):
        self.lines = [_copy(line) for line in (lines or ())]
        self.file_name = ""
        self.min_line_length = min_line_length

    @classmethod
    def from_file(cls, path):
        """Load a map from a file of ``x0,y0,x1,y1`` records."""
        vector_map = cls()
        vector_map.load(path)
        return vector_map

    def get_scene_lines(self, loc, max_range):
        """Copies of the lines that can lie within ``max_range`` of ``loc``."""
        loc = _vec(loc)
        x_min, y_min = loc - max_range
        x_max, y_max = loc + max_range
        selected = []
        for line in self.lines:
            p0, p1 = line.p0, line.p1
            if p0[0] < x_min and p1[0] < x_min:
                continue
            if p0[1] < y_min and p1[1] < y_min:
                continue
            if p0[0] > x_max and p1[0] > x_max:
                continue
            if p0[1] > y_max and p1[1] > y_max:
                continue
            selected.append(_copy(line))
        return selected

    def scene_render(self, loc, max_range, angle_min, angle_max):
        """The parts of the map lines visible from ``loc``."""
        loc = _vec(loc)
        eps = self.min_line_length**2
        scene: list[Line] = []
        lines_list = self.get_scene_lines(loc, max_range)

        # lines_list grows while trimming; the iterator picks up new pieces.
        for candidate in islice(lines_list, MAX_RENDER_LINES):
            cur_line = _copy(candidate)
            for seen in scene:
                if cur_line.sq_length() < eps:
                    break
                if seen.sq_length() < eps:
                    continue
                trim_occlusion(loc, seen, cur_line, lines_list)

            if cur_line.sq_length() > eps:
                for seen in scene:
                    if seen.sq_length() < eps:
                        continue
                    trim_occlusion(loc, cur_line, seen, lines_list)
                scene.append(cur_line)

        if len(lines_list) >= MAX_RENDER_LINES:
            logger.warning(
                "Runaway Analytic Scene Render at %.30f,%.30f, %.3f : %.3f\u00b0",
                loc[0],
                loc[1],
                rad_to_deg(angle_min),
                rad_to_deg(angle_max),
            )
        return [line for line in scene if line.sq_length() > eps]

    def ray_cast(self, loc, max_range):
        """Rays from ``loc`` to the visible ends and corners of the map lines."""
        epsilon = 1e-4
        loc = _vec(loc)
        lines_list = self.get_scene_lines(loc, max_range)

        rays: list[np.ndarray] = []
        for index, line in enumerate(lines_list):
            offset = epsilon * normalized_or_zero(line.p1 - line.p0)

            r0_idx, r0 = get_ray_intersection(loc, index, lines_list, line.p0 + offset)
            r1_idx, r1 = get_ray_intersection(loc, index, lines_list, line.p1 - offset)
            rays.append(r0)
            rays.append(r1)

            end_p0 = loc + normalized_or_zero(line.p0 - offset - loc) * max_range
            end_p1 = loc + normalized_or_zero(line.p1 + offset - loc) * max_range
            end_p0_idx, end_p0 = get_ray_intersection(loc, index, lines_list, end_p0)
            end_p1_idx, end_p1 = get_ray_intersection(loc, index, lines_list, end_p1)
            if end_p0_idx is not None:
                rays.append(end_p0)
            if end_p1_idx is not None:
                rays.append(end_p1)

        if len(rays) < 2:
            return []
        previous = rays[-1:] + rays[:-1]
        return [
            Line(loc, end)
            for end, before in zip(rays, previous)
            if not np.array_equal(end, before)
        ]

    def get_predicted_scan(self, loc, range_min, range_max, angle_min, angle_max,
                           num_rays):
        """Ranges a laser at ``loc`` would measure, one per ray."""
        if num_rays < 0:
            raise ValueError("number of rays must be non-negative")
        loc = _vec(loc)
        scan = [float(range_max)] * num_rays
        rendered = self.scene_render(loc, range_max, angle_min, angle_max)
        if not rendered:
            return scan

        casts = []
        for line in rendered:
            p0 = line.p0 - loc
            p1 = line.p1 - loc
            a0 = math.atan2(p0[1], p0[0])
            a1 = math.atan2(p1[1], p1[0])
            if abs(a0 - a1) < 0.0001:
                continue
            wraps = abs(a1 - a0) > math.pi
            if (wraps and a0 < a1) or (not wraps and a0 > a1):
                a0, a1 = a1, a0
                p0, p1 = p1, p0
            casts.append(_LineCast(Line(p0, p1), a0, a1, wraps))
        if not casts:
            return scan

        da = (angle_max - angle_min) / float(num_rays)
        for i in range(num_rays):
            a = angle_mod(angle_min + i * da)
            for cast in casts:
                inside = (
                    cast.a0 <= a or cast.a1 >= a
                    if cast.wraps_around
                    else cast.a0 <= a <= cast.a1
                )
                if inside:
                    normal = cast.line.unit_normal()
                    ray = np.array([math.cos(a), math.sin(a)])
                    scan[i] = float(normal @ cast.line.p0) / float(normal @ ray)
                    break
        return scan

    def cleanup(self):
        """Drop short lines, split crossing lines and shrink all ends slightly."""
        shrink_distance = 1e-4
        min_line_length = 0.05
        new_lines: list[Line] = []
        # self.lines grows while split pieces are appended; iteration sees them.
        for l1 in self.lines:
            if l1.length() < min_line_length:
                continue
            split = False
            for l2 in new_lines:
                point = l2.intersection_line(l1)
                if point is not None:
                    shrink = shrink_distance * l1.direction()
                    self.lines.append(Line(l1.p0, point - shrink))
                    self.lines.append(Line(point + shrink, l1.p1))
                    split = True
                    break
            if not split:
                new_lines.append(_copy(l1))

        for line in new_lines:
            shrink_line(shrink_distance, line)
        self.lines = new_lines

    def load(self, path):
        """Read ``x0,y0,x1,y1`` records from ``path``, stopping at the first bad one."""
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
        self.lines = []
        position = 0
        while True:
            match = _RECORD.match(text, position)
            if match is None:
                break
            x0, y0, x1, y1 = (float(v) for v in match.groups())
            self.lines.append(Line((x0, y0), (x1, y1)))
            position = match.end()
        self.cleanup()
        self.file_name = str(path)

    def intersects(self, v0, v1):
        """Whether the segment ``v0``-``v1`` touches any map line."""
        return any(line.intersects(v0, v1) for line in self.lines)