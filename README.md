# gridslam

Building blocks for 2D robot mapping and localisation. The package covers
planar vector geometry, line segments, maps made of line segments with
visibility rendering and predicted laser scans, and a few numeric, random
and output helpers. Vectors go in as any two-element sequence. Results that
are points come back as NumPy arrays.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Vector maps

`gridslam.vector_map.VectorMap` holds a list of `Line` segments.

- `VectorMap.from_file(path)` and `load(path)` read a text file of
  `x0,y0,x1,y1` records and stop at the first record that does not parse.
  Loading then runs `cleanup()`, which:
  - drops lines shorter than 0.05,
  - splits a line where it crosses a line already kept,
  - pulls every end in by 1e-4.
- `get_scene_lines(loc, max_range)` returns copies of the lines that may lie
  within `max_range` of `loc`, judged by their end points.
- `scene_render(loc, max_range, angle_min, angle_max)` returns the parts of
  those lines that are visible from `loc`. Occluded pieces are trimmed away
  with `trim_occlusion`. If 2000 or more lines are involved, a warning is
  logged.
- `ray_cast(loc, max_range)` returns rays from `loc` towards the line ends,
  each cut short at the nearest line it hits.
- `get_predicted_scan(loc, range_min, range_max, angle_min, angle_max, num_rays)`
  returns the range a laser at `loc` would measure along each of `num_rays`
  evenly spaced angles. It gives `range_max` where no line is seen.
- `intersects(v0, v1)` tells whether a segment touches any map line.

```python
from gridslam.line2d import Line
from gridslam.vector_map import VectorMap

walls = VectorMap([Line((1.0, -1.0), (1.0, 1.0))])
scan = walls.get_predicted_scan((0.0, 0.0), 0.0, 10.0, -0.5, 0.5, 5)
```

The module also exposes its helpers as functions:
- `trim_occlusion(loc, test_line, trim_line, scene_lines)`
- `get_ray_intersection(loc, skip_line_idx, lines_list, ray_end)`
- `shrink_line(distance, line)`

## Line segments

`gridslam.line2d.Line(p0, p1)`, or `Line.from_coords(x0, y0, x1, y1)`, offers:

- `length`, `sq_length`, `direction` and `unit_normal`.
- `intersects`, which is true when the segments cross or touch.
- `crosses`, which is true only for a strict crossing.
- `intersection`, which returns the meeting point, or `None` when the
  segments are apart or parallel.
- `closest_approach` and `closer_than`.
- The ray queries `ray_intersects`, `ray_intersection` and `touches`.

Each segment query also comes in a form that takes another `Line`:
`intersects_line`, `crosses_line`, `intersection_line` and
`closest_approach_line`.

## Geometry

`gridslam.geometry` holds the basic vector helpers:

- `heading`, `perp`, `cross` and `angle`.
- `normalized_or_zero` and `norm_or_zero`.
- The parallel and perpendicular tests `is_parallel`, `is_parallel_lines` and
  `is_perpendicular`.
- `tangent_points` and `is_between`.
- `check_line_line_collision`, which tells whether two segments cross or
  touch.
- `line_line_intersection` and `check_line_line_intersection`. The second
  returns `None` when the segments do not collide.
- Projections onto a line or a segment:
  - `project_point_onto_line`
  - `project_point_onto_line_segment`
  - `project_point_onto_line_segment_with_distance`
- The ray tests `ray_intersect` and `ray_intersects`.
- `scalar_projection`.

```python
from gridslam.geometry import check_line_line_collision, line_line_intersection

check_line_line_collision((1.1, 0.1), (1.9, -0.1), (1, 0), (2, 0))  # True
line_line_intersection((-1, 0), (1, 0), (0, -1), (0, 1))            # array([0., 0.])
```

`gridslam.geometry_distance` adds three functions:
- `furthest_free_point_circle(line_start, line_end, circle_center, radius)`
- `min_distance_line_line(a0, a1, b0, b1)`
- `min_distance_line_arc(l0, l1, a_center, a_radius, a_angle_start, a_angle_end, rotation_sign)`

## Numbers, poses and probabilities

- `gridslam.math_util` offers:
  - `clamp`, `bound`, `abs_bound`, `sign`, `sq`, `cube`, `power` and `ramp`.
  - The angle helpers `rad_to_deg`, `deg_to_rad`, `angle_mod`, `angle_diff`,
    `angle_dist` and `is_angle_between`.
  - `solve_quadratic` and `solve_cubic`. Both return the unique real roots as
    an ascending tuple.
- `gridslam.poses_2d.Pose2D(angle, translation)` has `clear`, `set` and
  `apply_pose`. `apply_pose` composes another pose after this one and wraps
  the angle. `Pose2D.from_affine` builds a pose from a 2x3 or 3x3 matrix.
- `gridslam.probability` offers:
  - `probability_density_gaussian`
  - `probability_density_exp`
  - `probability_density_uniform`
  - `get_percentile`
- `gridslam.rng.Random(seed=None)` offers `uniform_random(a, b)`,
  `random_int(min_value, max_value)` with both ends inclusive, and
  `gaussian(mean, stddev)`.
- `gridslam.vector_util` has list helpers: `sum_vector`, `add_to_each_element`,
  `multiply_each_element`, `add_vector_elements` and `min_element`.
- `gridslam.array_util` has helpers for sequences of equal length. Several of
  them take a boolean mask:
  - `make_array`, `sum_array` and `selective_sum`.
  - `selective_equal`.
  - `min_element`, `max_element`, `selective_min_element` and
    `selective_max_element`.
  - `add_to_each_element`, `add_array_elements` and `subtract_array_elements`.
  - `get_indexed_elements` and `max_datastructure_size`.

## Visualization messages and output

- `gridslam.visualization.VisualizationMsg` is a plain container for points,
  lines, arcs, particles and path options.
  - Create one with `new_visualization_message(frame, ns)`.
  - Fill it with `draw_point`, `draw_line`, `draw_cross`, `draw_arc`,
    `draw_particle` and `draw_path_option`.
  - Empty it with `clear()`.
  - Colours are 32-bit unsigned integers.
- `gridslam.terminal_colors` builds ANSI escape sequences with `color_code`.
  `color_terminal` and `reset_terminal` write them to a stream, stdout by
  default. Use the `TerminalColor` and `TerminalAttribute` enums for the
  arguments.
- `gridslam.serialization` creates one randomly named scratch directory below
  `test_outputs/` in the current directory and reuses it.
  - The `test_outputs` directory itself must already exist. If the scratch
    directory cannot be created, the error only shows once a file is opened.
  - `create_or_erase_file_for_write` and `open_file_for_read` open binary
    files inside the scratch directory.
  - `open_general_file_for_read` opens any path.
  - `get_folder_name`, `get_full_folder_path`, `random_string` and
    `prepare_directory` are also available.

## What the package does not do

The package has no pose estimator or scan matcher, no likelihood grid, and no
point-cloud map builder. It has no timing utilities and no command-line
program. Visualization messages are only built in memory. Nothing publishes
them or connects to a robot.