"""Pure geometric operations over cube coordinates.

Everything here is stateless and returns new values, so it is safe to call
from any thread.
"""

from __future__ import annotations

from enum import Enum

from .coords import Cube, FractionalCube
from .errors import InvalidRadiusError
from .heuristics import hex_distance_cube
from .neighbors import CUBE_DIRECTIONS

# Added to the start of a line so samples never land exactly on a cell edge.
# Components sum to zero, so the nudged points remain valid cube positions.
LINE_EPSILON: tuple[float, float, float] = (1e-6, 2e-6, -3e-6)

# First corner visited by ``ring``; the walk then follows directions 0..5.
RING_START_DIRECTION = 4


class Axis(str, Enum):
    """Cube axis a reflection keeps fixed."""

    Q = "q"
    R = "r"
    S = "s"


def cube_add(a: Cube, b: Cube) -> Cube:
    return a + b


def cube_subtract(a: Cube, b: Cube) -> Cube:
    return a - b


def cube_scale(a: Cube, factor: int) -> Cube:
    return a * factor


def rotate(a: Cube, pivot: Cube = Cube.ZERO, steps: int = 1) -> Cube:
    """Rotate ``a`` about ``pivot`` by ``steps`` x 60 degrees.

    A positive step carries direction ``i`` onto direction ``i + 1``;
    negative steps rotate the other way. ``steps`` is taken modulo 6.
    """

    q, r, s = a.q - pivot.q, a.r - pivot.r, a.s - pivot.s
    for _ in range(steps % 6):
        q, r, s = -s, -q, -r
    return Cube(pivot.q + q, pivot.r + r, pivot.s + s)


def reflect(a: Cube, axis: Axis, pivot: Cube = Cube.ZERO) -> Cube:
    """Mirror ``a`` across the line through ``pivot`` along ``axis``.

    The component named by ``axis`` is kept and the other two are swapped.
    """

    q, r, s = a.q - pivot.q, a.r - pivot.r, a.s - pivot.s
    if axis is Axis.Q:
        q, r, s = q, s, r
    elif axis is Axis.R:
        q, r, s = s, r, q
    elif axis is Axis.S:
        q, r, s = r, q, s
    else:
        raise ValueError(f"Unknown axis: {axis!r}")
    return Cube(pivot.q + q, pivot.r + r, pivot.s + s)


def lerp(a: Cube | FractionalCube, b: Cube | FractionalCube, t: float) -> FractionalCube:
    return FractionalCube(
        a.q + (b.q - a.q) * t,
        a.r + (b.r - a.r) * t,
        a.s + (b.s - a.s) * t,
    )


def cube_round(frac: FractionalCube) -> Cube:
    """Round to the nearest cell, fixing up the component that moved most."""

    q, r, s = frac.q, frac.r, frac.s
    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    else:
        rs = -rq - rr
    return Cube(int(rq), int(rr), int(rs))


def _nudge(c: Cube) -> FractionalCube:
    eq, er, es = LINE_EPSILON
    return FractionalCube(c.q + eq, c.r + er, c.s + es)


def line(a: Cube, b: Cube) -> list[Cube]:
    """Return the cells on the segment from ``a`` to ``b``, both inclusive."""

    distance = hex_distance_cube(a, b)
    if distance == 0:
        return [a]
    start = _nudge(a)
    results = [cube_round(lerp(start, b, step / distance)) for step in range(distance + 1)]
    # Endpoints are exact by contract, whatever the float arithmetic did.
    results[0] = a
    results[-1] = b
    return results


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise InvalidRadiusError(f"radius must be non-negative (got {radius})")


def in_range(a: Cube, center: Cube, radius: int) -> bool:
    _check_radius(radius)
    return hex_distance_cube(a, center) <= radius


def hex_range(center: Cube, radius: int) -> set[Cube]:
    """Return every cell within ``radius`` steps of ``center``."""

    _check_radius(radius)
    results: set[Cube] = set()
    for dq in range(-radius, radius + 1):
        for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
            results.add(Cube(center.q + dq, center.r + dr, center.s - dq - dr))
    return results


def range_intersection(
    center_a: Cube, radius_a: int, center_b: Cube, radius_b: int
) -> set[Cube]:
    """Return the cells that lie within both ranges."""

    _check_radius(radius_a)
    _check_radius(radius_b)
    q_min = max(center_a.q - radius_a, center_b.q - radius_b)
    q_max = min(center_a.q + radius_a, center_b.q + radius_b)
    r_min = max(center_a.r - radius_a, center_b.r - radius_b)
    r_max = min(center_a.r + radius_a, center_b.r + radius_b)
    s_min = max(center_a.s - radius_a, center_b.s - radius_b)
    s_max = min(center_a.s + radius_a, center_b.s + radius_b)

    results: set[Cube] = set()
    for q in range(q_min, q_max + 1):
        for r in range(max(r_min, -q - s_max), min(r_max, -q - s_min) + 1):
            results.add(Cube(q, r, -q - r))
    return results


def ring(center: Cube, radius: int) -> list[Cube]:
    """Return the ``6 * radius`` cells exactly ``radius`` steps from ``center``.

    The walk starts at ``center + CUBE_DIRECTIONS[4] * radius`` and follows
    directions 0 through 5, ``radius`` cells per edge. A radius of zero
    returns ``[center]``.
    """

    _check_radius(radius)
    if radius == 0:
        return [center]
    results: list[Cube] = []
    cell = center + CUBE_DIRECTIONS[RING_START_DIRECTION] * radius
    for direction in CUBE_DIRECTIONS:
        for _ in range(radius):
            results.append(cell)
            cell = cell + direction
    return results


def spiral(center: Cube, radius: int) -> list[Cube]:
    """Return ``center`` followed by rings 1 through ``radius`` in ring order."""

    _check_radius(radius)
    results = [center]
    for k in range(1, radius + 1):
        results.extend(ring(center, k))
    return results


__all__ = [
    "Axis",
    "LINE_EPSILON",
    "RING_START_DIRECTION",
    "cube_add",
    "cube_round",
    "cube_scale",
    "cube_subtract",
    "hex_range",
    "in_range",
    "lerp",
    "line",
    "range_intersection",
    "reflect",
    "ring",
    "rotate",
    "spiral",
]
