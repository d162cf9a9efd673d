"""Visualization messages: points, lines, arcs, particles and path options."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

_MAX_COLOR = 0xFFFFFFFF


def _xy(value):
    vec = np.asarray(value, dtype=float).reshape(-1)
    if vec.shape != (2,):
        raise ValueError("expected a two-component point")
    return (float(vec[0]), float(vec[1]))


def _color(value):
    color = int(value)
    if not 0 <= color <= _MAX_COLOR:
        raise ValueError(f"color must be a 32-bit unsigned value, got {value}")
    return color


@dataclass
class ColoredPoint:
    """A coloured point."""

    point: tuple
    color: int


@dataclass
class ColoredLine:
    """A coloured line segment."""

    p0: tuple
    p1: tuple
    color: int


@dataclass
class ColoredArc:
    """A coloured circular arc."""

    center: tuple
    radius: float
    start_angle: float
    end_angle: float
    color: int


@dataclass
class Particle:
    """A pose hypothesis to draw."""

    x: float
    y: float
    theta: float


@dataclass
class PathOption:
    """A candidate path with its curvature, free distance and clearance."""

    curvature: float
    distance: float
    clearance: float


@dataclass
class VisualizationMsg:
    """A bundle of drawing primitives in one frame and namespace."""

    frame_id: str = ""
    ns: str = ""
    seq: int = 0
    particles: list = field(default_factory=list)
    path_options: list = field(default_factory=list)
    points: list = field(default_factory=list)
    lines: list = field(default_factory=list)
    arcs: list = field(default_factory=list)

    def clear(self):
        """Remove all drawing primitives, keeping the header."""
        self.particles.clear()
        self.path_options.clear()
        self.points.clear()
        self.lines.clear()
        self.arcs.clear()


def new_visualization_message(frame, ns):
    """An empty message for the given frame and namespace."""
    return VisualizationMsg(frame_id=frame, ns=ns, seq=0)


def draw_point(p, color, msg):
    """Add a single point."""
    msg.points.append(ColoredPoint(_xy(p), _color(color)))


def draw_line(p0, p1, color, msg):
    """Add a single line."""
    msg.lines.append(ColoredLine(_xy(p0), _xy(p1), _color(color)))


def draw_cross(location, size, color, msg):
    """Add an "X" of half-width ``size`` centred on ``location``."""
    loc = np.asarray(_xy(location))
    diag = np.array([size, size], dtype=float)
    anti = np.array([size, -size], dtype=float)
    draw_line(loc + diag, loc - diag, color, msg)
    draw_line(loc + anti, loc - anti, color, msg)


def draw_arc(center, radius, start_angle, end_angle, color, msg):
    """Add a circular arc."""
    msg.arcs.append(
        ColoredArc(_xy(center), float(radius), float(start_angle), float(end_angle),
                   _color(color))
    )


def draw_particle(loc, angle, msg):
    """Add a particle at ``loc`` facing ``angle``."""
    x, y = _xy(loc)
    msg.particles.append(Particle(x, y, float(angle)))


def draw_path_option(curvature, distance, clearance, msg):
    """Add a path option."""
    msg.path_options.append(PathOption(float(curvature), float(distance), float(clearance)))