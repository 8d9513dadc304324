"""Unit tests for snapping layouts onto grids."""

import math
from itertools import combinations

import pytest

from g6draw.config import GridKind
from g6draw.layout.grid import snap_to_grid


def _points(xs, ys):
    return list(zip(xs, ys))


class TestSquareGrid:
    """Test snapping to a square grid."""

    def test_nearest_grid_point(self):
        xs, ys = snap_to_grid([0.1, 0.9, 2.2], [0.0, 0.1, -0.2], GridKind.SQUARE, 1.0, 1e-3)
        assert _points(xs, ys) == [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]

    def test_grid_spacing(self):
        xs, ys = snap_to_grid([0.3], [0.7], GridKind.SQUARE, 0.5, 1e-3)
        assert _points(xs, ys) == [(0.5, 0.5)]

    def test_grid_anchored_at_center(self):
        xs, ys = snap_to_grid([10.4], [-3.6], GridKind.SQUARE, 1.0, 1e-3, center=(10.0, -4.0))
        assert _points(xs, ys) == [(10.0, -4.0)]

    def test_half_cell_rounds_up(self):
        xs, ys = snap_to_grid([0.5], [-0.5], GridKind.SQUARE, 1.0, 1e-3)
        assert _points(xs, ys) == [(1.0, 0.0)]

    def test_taken_point_moves_to_nearest_free(self):
        xs, ys = snap_to_grid([0.1, 0.2], [0.0, 0.0], GridKind.SQUARE, 1.0, 1e-3)
        assert _points(xs, ys) == [(0.0, 0.0), (1.0, 0.0)]

    def test_crowded_vertices_stay_distinct(self):
        xs = [0.01 * i for i in range(12)]
        ys = [0.0] * 12
        snapped = _points(*snap_to_grid(xs, ys, GridKind.SQUARE, 1.0, 1e-3))

        assert len(set(snapped)) == 12
        for x, y in snapped:
            assert x == int(x) and y == int(y)


class TestCircularGrid:
    """Test snapping to concentric rings."""

    def test_snaps_to_nearest_ring(self):
        xs, ys = snap_to_grid([3.2, 0.0], [0.0, -1.6], GridKind.CIRCULAR, 1.0, 1e-3)
        assert xs == pytest.approx([3.0, 0.0])
        assert ys == pytest.approx([0.0, -2.0])

    def test_angle_preserved(self):
        xs, ys = snap_to_grid([1.4], [1.4], GridKind.CIRCULAR, 1.0, 1e-3)
        assert math.atan2(ys[0], xs[0]) == pytest.approx(math.pi / 4)
        assert math.hypot(xs[0], ys[0]) == pytest.approx(2.0)

    def test_near_center_snaps_to_center(self):
        xs, ys = snap_to_grid([0.1], [0.1], GridKind.CIRCULAR, 1.0, 1e-3)
        assert _points(xs, ys) == [(0.0, 0.0)]

    def test_taken_point_moves_outward(self):
        xs, ys = snap_to_grid([1.1, 0.9], [0.0, 0.0], GridKind.CIRCULAR, 1.0, 1e-3)
        assert xs == pytest.approx([1.0, 2.0])
        assert ys == pytest.approx([0.0, 0.0])

    def test_coincident_vertices_at_center(self):
        snapped = _points(*snap_to_grid([0.0] * 4, [0.0] * 4, GridKind.CIRCULAR, 1.0, 1e-3))

        radii = sorted(round(math.hypot(x, y), 9) for x, y in snapped)
        assert radii[0] == 0
        assert all(r == int(r) for r in radii)
        for a, b in combinations(snapped, 2):
            assert math.hypot(a[0] - b[0], a[1] - b[1]) >= 1e-3

    def test_rings_around_center(self):
        xs, ys = snap_to_grid([5.0, 2.0], [7.9, 5.0], GridKind.CIRCULAR, 1.0, 1e-3, center=(2.0, 5.0))
        assert math.hypot(xs[0] - 2.0, ys[0] - 5.0) == pytest.approx(4.0)
        assert (xs[1], ys[1]) == (2.0, 5.0)


class TestNoGrid:
    """Test the pass-through case."""

    def test_none_returns_copies(self):
        xs = [0.3, 1.7]
        ys = [0.2, -0.4]
        new_xs, new_ys = snap_to_grid(xs, ys, GridKind.NONE, 1.0, 1e-3)
        assert (new_xs, new_ys) == (xs, ys)
        assert new_xs is not xs

    def test_accepts_string_kind(self):
        xs, ys = snap_to_grid([0.4], [0.6], "square", 1.0, 1e-3)
        assert _points(xs, ys) == [(0.0, 1.0)]
