import pytest

from gridslam.visualization import (
    ColoredArc,
    ColoredLine,
    ColoredPoint,
    Particle,
    PathOption,
    VisualizationMsg,
    draw_arc,
    draw_cross,
    draw_line,
    draw_particle,
    draw_path_option,
    draw_point,
    new_visualization_message,
)


def test_new_message_header():
    msg = new_visualization_message("map", "slam")
    assert (msg.frame_id, msg.ns, msg.seq) == ("map", "slam", 0)
    assert msg.points == [] and msg.lines == []


def test_draw_point():
    msg = new_visualization_message("map", "slam")
    draw_point((1.0, 2.0), 0xC0C0C0, msg)
    assert msg.points == [ColoredPoint((1.0, 2.0), 0xC0C0C0)]


def test_draw_line():
    msg = VisualizationMsg()
    draw_line((0, 0), (3, 4), 0xFF0000, msg)
    assert msg.lines == [ColoredLine((0.0, 0.0), (3.0, 4.0), 0xFF0000)]


def test_draw_cross_is_two_lines_through_location():
    msg = VisualizationMsg()
    draw_cross((1.0, 1.0), 0.5, 0, msg)
    assert len(msg.lines) == 2
    for line in msg.lines:
        mid = ((line.p0[0] + line.p1[0]) / 2, (line.p0[1] + line.p1[1]) / 2)
        assert mid == pytest.approx((1.0, 1.0))
    assert msg.lines[0].p0 == pytest.approx((1.5, 1.5))
    assert msg.lines[1].p0 == pytest.approx((1.5, 0.5))


def test_draw_arc_particle_and_path_option():
    msg = VisualizationMsg()
    draw_arc((0, 1), 2.0, 0.1, 0.2, 7, msg)
    draw_particle((3, 4), 0.5, msg)
    draw_path_option(0.3, 1.5, 0.2, msg)
    assert msg.arcs == [ColoredArc((0.0, 1.0), 2.0, 0.1, 0.2, 7)]
    assert msg.particles == [Particle(3.0, 4.0, 0.5)]
    assert msg.path_options == [PathOption(0.3, 1.5, 0.2)]


def test_clear_empties_everything_but_header():
    msg = new_visualization_message("base_link", "local")
    draw_point((0, 0), 1, msg)
    draw_line((0, 0), (1, 1), 1, msg)
    draw_arc((0, 0), 1, 0, 1, 1, msg)
    draw_particle((0, 0), 0, msg)
    draw_path_option(0, 0, 0, msg)
    msg.clear()
    assert msg == new_visualization_message("base_link", "local")


@pytest.mark.parametrize("color", [-1, 0x1_0000_0000])
def test_invalid_color_rejected(color):
    with pytest.raises(ValueError):
        draw_point((0, 0), color, VisualizationMsg())


def test_bad_point_shape_rejected():
    with pytest.raises(ValueError):
        draw_point((0, 0, 0), 0, VisualizationMsg())