"""Snap finished layouts onto a square or concentric-circle grid.

Snapping runs once, after the force simulation. Every vertex moves to the
grid position nearest to it; when that position is already taken the vertex
moves to the closest free position instead, so snapped vertices never
coincide.
"""

import logging
import math

from ..config import GridKind

logger = logging.getLogger(__name__)

GOLDEN_ANGLE = math.pi * (3 - math.sqrt(5))


def snap_to_grid(
    xs: list[float],
    ys: list[float],
    kind: GridKind,
    size: float,
    min_distance: float,
    center: tuple[float, float] = (0.0, 0.0),
) -> tuple[list[float], list[float]]:
    """Return new coordinate lists with every vertex on the grid.

    Args:
        xs, ys: Vertex coordinates
        kind: Grid to snap to; ``GridKind.NONE`` returns copies unchanged
        size: Cell width of the square grid, or ring spacing of the circular grid
        min_distance: Closer snapped positions count as coincident
        center: Grid origin, and the common center of the circular rings
    """
    kind = GridKind(kind)
    if kind == GridKind.SQUARE:
        snapped = _snap_square(xs, ys, size, center)
    elif kind == GridKind.CIRCULAR:
        snapped = _snap_circular(xs, ys, size, min_distance, center)
    else:
        return list(xs), list(ys)

    logger.debug(f"Snapped {len(xs)} vertices to {kind.value} grid with spacing {size:g}")
    return [p[0] for p in snapped], [p[1] for p in snapped]


def _nearest_cell(value: float, size: float) -> int:
    # Half-up rounding; round() would round halves to even
    return math.floor(value / size + 0.5)


def _snap_square(xs, ys, size, center):
    cx, cy = center
    taken = set()
    snapped = []

    for x, y in zip(xs, ys):
        cell = (_nearest_cell(x - cx, size), _nearest_cell(y - cy, size))
        ring = 0
        while cell in taken:
            ring += 1
            free = [
                (cell[0] + i, cell[1] + j)
                for i in range(-ring, ring + 1)
                for j in range(-ring, ring + 1)
                if max(abs(i), abs(j)) == ring and (cell[0] + i, cell[1] + j) not in taken
            ]
            if free:
                cell = min(
                    free,
                    key=lambda c: (math.hypot(cx + c[0] * size - x, cy + c[1] * size - y), c),
                )
        taken.add(cell)
        snapped.append((cx + cell[0] * size, cy + cell[1] * size))

    return snapped


def _snap_circular(xs, ys, size, min_distance, center):
    cx, cy = center
    snapped = []

    for index, (x, y) in enumerate(zip(xs, ys)):
        dx = x - cx
        dy = y - cy
        radius = math.hypot(dx, dy)
        if radius > 0:
            ux, uy = dx / radius, dy / radius
        else:
            ux, uy = math.cos(GOLDEN_ANGLE * index), math.sin(GOLDEN_ANGLE * index)

        ring = _nearest_cell(radius, size)
        while True:
            point = (cx + ux * ring * size, cy + uy * ring * size)
            if all(math.hypot(point[0] - px, point[1] - py) >= min_distance for px, py in snapped):
                break
            ring += 1
        snapped.append(point)

    return snapped
