"""Direction tables and adjacency helpers.

Direction indices are shared by :func:`neighbor`, :func:`hexmap.algebra.rotate`
and :func:`hexmap.algebra.ring`::

    0: E  ( 1,  0, -1)      3: W  (-1,  0,  1)
    1: NE ( 1, -1,  0)      4: SW (-1,  1,  0)
    2: NW ( 0, -1,  1)      5: SE ( 0,  1, -1)

Indices run counter-clockwise on a y-down screen and wrap modulo 6, so
``opposite(d) == (d + 3) % 6``.
"""

from __future__ import annotations

from typing import Iterable

from .conversions import axial_to_offset, cube_to_axial, offset_to_cube
from .coords import Axial, Cube, Offset

CUBE_DIRECTIONS: tuple[Cube, ...] = (
    Cube(+1, 0, -1),
    Cube(+1, -1, 0),
    Cube(0, -1, +1),
    Cube(-1, 0, +1),
    Cube(-1, +1, 0),
    Cube(0, +1, -1),
)

AXIAL_DIRECTIONS: tuple[Axial, ...] = tuple(Axial(d.q, d.r) for d in CUBE_DIRECTIONS)

# Diagonal i sits between directions i and i + 1.
CUBE_DIAGONALS: tuple[Cube, ...] = (
    Cube(+2, -1, -1),
    Cube(+1, -2, +1),
    Cube(-1, -1, +2),
    Cube(-2, +1, +1),
    Cube(-1, +2, -1),
    Cube(+1, +1, -2),
)


def opposite(direction: int) -> int:
    return (direction + 3) % 6


def cube_direction(direction: int) -> Cube:
    return CUBE_DIRECTIONS[direction % 6]


def neighbor(c: Cube, direction: int) -> Cube:
    return c + CUBE_DIRECTIONS[direction % 6]


def diagonal_neighbor(c: Cube, direction: int) -> Cube:
    return c + CUBE_DIAGONALS[direction % 6]


def neighbors_cube(c: Cube) -> Iterable[Cube]:
    for d in CUBE_DIRECTIONS:
        yield c + d


def neighbors_axial(a: Axial) -> Iterable[Axial]:
    for d in AXIAL_DIRECTIONS:
        yield Axial(a.q + d.q, a.r + d.r)


def neighbors_offset(o: Offset) -> Iterable[Offset]:
    # Offset rows/columns alternate their deltas, so go through cube space.
    origin = offset_to_cube(o)
    for c in neighbors_cube(origin):
        yield axial_to_offset(cube_to_axial(c), o.layout)


def neighbors_axial_bounded(a: Axial, width: int, height: int) -> Iterable[Axial]:
    for n in neighbors_axial(a):
        if 0 <= n.q < width and 0 <= n.r < height:
            yield n


def neighbors_offset_bounded(o: Offset, width: int, height: int) -> Iterable[Offset]:
    for n in neighbors_offset(o):
        if 0 <= n.col < width and 0 <= n.row < height:
            yield n


__all__ = [
    "AXIAL_DIRECTIONS",
    "CUBE_DIAGONALS",
    "CUBE_DIRECTIONS",
    "cube_direction",
    "diagonal_neighbor",
    "neighbor",
    "neighbors_axial",
    "neighbors_axial_bounded",
    "neighbors_cube",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "opposite",
]
