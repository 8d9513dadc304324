"""Force-directed (spring embedder) layout.

Vertices start on a circle and then move under three forces for a fixed
number of iterations: Coulomb-like repulsion between every pair, Hooke-like
attraction along every edge and a weak pull toward the centroid. Each step's
displacement is capped by a temperature that cools linearly to zero, so the
simulation settles instead of oscillating. The result is scaled uniformly
into the configured drawing area, optionally after snapping it onto a grid.
"""

import logging
import math
import random

from ..config import GridKind, LayoutConfig
from ..models import Coordinates, Graph, Point
from .grid import GOLDEN_ANGLE, snap_to_grid

logger = logging.getLogger(__name__)

# Distances below this fraction of the ideal edge length count as coincident.
MIN_DISTANCE_FACTOR = 1e-3


class ForceLayout:
    """Deterministic force-directed layout engine."""

    def __init__(self, config: LayoutConfig | None = None):
        self.config = config or LayoutConfig()

    def layout(self, graph: Graph) -> Coordinates:
        """Assign a finite 2D point to every vertex of ``graph``."""
        n = graph.vertex_count()
        config = self.config

        if n == 0:
            return ()
        if n == 1:
            return (Point(config.width / 2, config.height / 2),)

        logger.debug(
            f"Laying out {n} vertices, {graph.edge_count()} edges "
            f"in {len(graph.components())} component(s) over {config.iterations} iterations"
        )

        xs, ys = self._initial_positions(n)
        edges = graph.edges()
        start_temperature = config.initial_temperature * config.ideal_edge_length

        for step in range(config.iterations):
            temperature = start_temperature * (1 - step / config.iterations)
            fx, fy = self._forces(xs, ys, edges)
            self._displace(xs, ys, fx, fy, temperature)

        if config.grid != GridKind.NONE:
            centroid = (math.fsum(xs) / n, math.fsum(ys) / n)
            xs, ys = snap_to_grid(
                xs,
                ys,
                config.grid,
                config.grid_size * config.ideal_edge_length,
                MIN_DISTANCE_FACTOR * config.ideal_edge_length,
                centroid,
            )

        return self._normalize(xs, ys)

    def _initial_positions(self, n: int) -> tuple[list[float], list[float]]:
        """Circle of radius proportional to sqrt(n), vertex 0 at the top."""
        config = self.config
        length = config.ideal_edge_length
        radius = length * math.sqrt(n)
        seed = config.seed if config.seed is not None else n
        rng = random.Random(seed)
        amplitude = config.jitter * length

        xs = []
        ys = []
        for i in range(n):
            angle = 2 * math.pi * i / n
            xs.append(radius * math.sin(angle) + rng.uniform(-amplitude, amplitude))
            ys.append(-radius * math.cos(angle) + rng.uniform(-amplitude, amplitude))
        return xs, ys

    def _forces(self, xs: list[float], ys: list[float], edges) -> tuple[list[float], list[float]]:
        config = self.config
        n = len(xs)
        length = config.ideal_edge_length
        min_distance = MIN_DISTANCE_FACTOR * length
        charge = config.repulsion * length ** 3

        fx = [0.0] * n
        fy = [0.0] * n

        # Repulsion, accumulated in index order
        for i in range(n):
            for j in range(i + 1, n):
                dx = xs[i] - xs[j]
                dy = ys[i] - ys[j]
                distance = math.hypot(dx, dy)
                if distance < min_distance:
                    dx, dy = _separation_direction(i, j)
                    distance = min_distance
                else:
                    dx /= distance
                    dy /= distance
                magnitude = charge / (distance * distance)
                fx[i] += magnitude * dx
                fy[i] += magnitude * dy
                fx[j] -= magnitude * dx
                fy[j] -= magnitude * dy

        # Attraction along edges
        for u, v in edges:
            dx = xs[v] - xs[u]
            dy = ys[v] - ys[u]
            distance = math.hypot(dx, dy)
            if distance < min_distance:
                continue
            magnitude = config.spring * (distance - length)
            fx[u] += magnitude * dx / distance
            fy[u] += magnitude * dy / distance
            fx[v] -= magnitude * dx / distance
            fy[v] -= magnitude * dy / distance

        if config.gravity > 0:
            cx = math.fsum(xs) / n
            cy = math.fsum(ys) / n
            for i in range(n):
                fx[i] += config.gravity * (cx - xs[i])
                fy[i] += config.gravity * (cy - ys[i])

        return fx, fy

    @staticmethod
    def _displace(xs, ys, fx, fy, temperature: float) -> None:
        for i in range(len(xs)):
            magnitude = math.hypot(fx[i], fy[i])
            if magnitude == 0 or not math.isfinite(magnitude):
                continue
            step = min(magnitude, temperature)
            xs[i] += fx[i] / magnitude * step
            ys[i] += fy[i] / magnitude * step

    def _normalize(self, xs: list[float], ys: list[float]) -> Coordinates:
        """Fit the drawing into the configured area, preserving aspect ratio."""
        config = self.config
        min_x, max_x = min(xs), max(xs)
        min_y, max_y = min(ys), max(ys)
        box_width = max_x - min_x
        box_height = max_y - min_y
        avail_width = config.width - 2 * config.padding
        avail_height = config.height - 2 * config.padding

        scales = []
        if box_width > 0:
            scales.append(avail_width / box_width)
        if box_height > 0:
            scales.append(avail_height / box_height)
        scale = min(scales) if scales else 1.0

        offset_x = config.padding + (avail_width - box_width * scale) / 2
        offset_y = config.padding + (avail_height - box_height * scale) / 2

        return tuple(
            Point(offset_x + (x - min_x) * scale, offset_y + (y - min_y) * scale)
            for x, y in zip(xs, ys)
        )


def _separation_direction(i: int, j: int) -> tuple[float, float]:
    """Unit vector pushing vertex ``i`` away from coincident vertex ``j``."""
    angle = GOLDEN_ANGLE * (i + 1) + j
    return math.cos(angle), math.sin(angle)
