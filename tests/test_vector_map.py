import math

import numpy as np
import pytest

from gridslam.geometry import cross
from gridslam.line2d import Line
from gridslam.vector_map import (
    VectorMap,
    get_ray_intersection,
    shrink_line,
    trim_occlusion,
)


def test_get_scene_lines_filters_far_lines_and_copies():
    near = Line((0, 0), (1, 0))
    far = Line((100, 100), (101, 100))
    vmap = VectorMap([near, far])
    selected = vmap.get_scene_lines((0, 0), 10)
    assert selected == [near]
    selected[0].set((5, 5), (6, 6))
    assert vmap.lines[0] == near


def test_intersects():
    vmap = VectorMap([Line((1, -1), (1, 1))])
    assert vmap.intersects((0, 0), (2, 0))
    assert not vmap.intersects((0, 0), (0.5, 0))


def test_shrink_line_moves_ends_inward():
    line = Line((0, 0), (1, 0))
    shrink_line(0.1, line)
    assert line.p0 == pytest.approx([0.1, 0.0])
    assert line.length() == pytest.approx(1.0 - 2 * 0.1)


def test_shrink_line_leaves_short_line():
    line = Line((0, 0), (0.1, 0))
    shrink_line(0.1, line)
    assert line == Line((0, 0), (0.1, 0))


@pytest.mark.parametrize("order", [(0, 1), (1, 0)])
def test_get_ray_intersection_finds_nearest(order):
    walls = [Line((1, -1), (1, 1)), Line((2, -1), (2, 1))]
    lines = [walls[i] for i in order]
    index, end = get_ray_intersection((0, 0), None, lines, (3, 0))
    assert lines[index] == walls[0]
    assert end == pytest.approx([1.0, 0.0])


def test_get_ray_intersection_skip_and_miss():
    lines = [Line((1, -1), (1, 1)), Line((2, -1), (2, 1))]
    index, end = get_ray_intersection((0, 0), 0, lines, (3, 0))
    assert index == 1
    assert end == pytest.approx([2.0, 0.0])
    index, end = get_ray_intersection((0, 0), None, lines, (0, 3))
    assert index is None
    assert end == pytest.approx([0.0, 3.0])


def test_trim_occlusion_complete():
    trim = Line((2, -0.5), (2, 0.5))
    extra = []
    trim_occlusion((0, 0), Line((1, -1), (1, 1)), trim, extra)
    assert trim.sq_length() == 0.0
    assert extra == []


def test_trim_occlusion_no_interaction():
    trim = Line((2, -2), (2, -1))
    extra = []
    trim_occlusion((0, 0), Line((1, 1), (1, 2)), trim, extra)
    assert trim == Line((2, -2), (2, -1))
    assert extra == []


def test_trim_occlusion_middle_splits_line():
    trim = Line((2, -2), (2, 2))
    extra = []
    trim_occlusion((0, 0), Line((1, -0.5), (1, 0.5)), trim, extra)
    assert trim.p0 == pytest.approx([2.0, -2.0])
    assert trim.p1[0] == pytest.approx(2.0)
    assert cross(trim.p1, (1, -0.5)) == pytest.approx(0.0, abs=1e-9)
    assert len(extra) == 1
    assert extra[0].p1 == pytest.approx([2.0, 2.0])
    assert cross(extra[0].p0, (1, 0.5)) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("reverse", [False, True])
def test_scene_render_hides_occluded_line(reverse):
    near = Line((1, -1), (1, 1))
    far = Line((2, -0.5), (2, 0.5))
    lines = [far, near] if reverse else [near, far]
    rendered = VectorMap(lines).scene_render((0, 0), 10, -math.pi, math.pi)
    assert rendered == [near]


def test_scene_render_single_line():
    wall = Line((3, -1), (3, 1))
    assert VectorMap([wall]).scene_render((0, 0), 10, -1, 1) == [wall]


def test_predicted_scan_against_wall():
    vmap = VectorMap([Line((2, -5), (2, 5))])
    scan = vmap.get_predicted_scan((0, 0), 0.0, 10.0, -0.4, 0.4, 4)
    assert len(scan) == 4
    assert scan[2] == pytest.approx(2.0)
    assert scan[1] == pytest.approx(scan[3])
    assert all(r >= 2.0 - 1e-9 for r in scan)


def test_predicted_scan_empty_and_behind():
    assert VectorMap().get_predicted_scan((0, 0), 0.0, 10.0, -0.4, 0.4, 3) == [10.0] * 3
    behind = VectorMap([Line((-2, -5), (-2, 5))])
    assert behind.get_predicted_scan((0, 0), 0.0, 10.0, -0.4, 0.4, 3) == [10.0] * 3


def test_predicted_scan_negative_rays():
    with pytest.raises(ValueError):
        VectorMap().get_predicted_scan((0, 0), 0.0, 10.0, -1, 1, -1)


def test_ray_cast_single_wall():
    rays = VectorMap([Line((1, -1), (1, 1))]).ray_cast((0, 0), 10)
    assert len(rays) == 2
    for ray in rays:
        assert ray.p0 == pytest.approx([0.0, 0.0])
        assert ray.p1[0] == pytest.approx(1.0)


def test_ray_cast_empty_map():
    assert VectorMap().ray_cast((0, 0), 10) == []


def test_cleanup_splits_crossing_lines():
    horizontal = Line((-1, 0), (1, 0))
    vertical = Line((0, -1), (0, 1))
    vmap = VectorMap([horizontal, vertical, Line((5, 5), (5.01, 5))])
    vmap.cleanup()
    assert len(vmap.lines) == 3
    for i, a in enumerate(vmap.lines):
        assert a.length() < 2.0
        for b in vmap.lines[i + 1:]:
            assert not a.intersects_line(b)


def test_load_from_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("0,0,1,0\n1,0,1,1\n")
    vmap = VectorMap.from_file(path)
    assert len(vmap.lines) == 2
    assert vmap.file_name == str(path)


def test_load_stops_at_bad_record(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("0, 0, 1, 0\nbad\n2,2,3,3\n")
    vmap = VectorMap()
    vmap.load(path)
    assert len(vmap.lines) == 1
    assert vmap.lines[0].p1 == pytest.approx(np.array([1.0, 0.0]), abs=1e-3)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        VectorMap.from_file(tmp_path / "missing.txt")