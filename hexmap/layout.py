"""World-space projection for hex grids.

This is the seam an engine integration layer uses: world/pixel positions go
in, fractional or rounded cube coordinates come out, and cells map back to
their centre and corner positions. Matrices follow the Red Blob Games
"Hexagonal Grids" reference.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from math import sqrt

import numpy as np
import numpy.typing as npt

from .algebra import cube_round
from .conversions import to_cube
from .coords import Axial, Cube, FractionalCube, Offset, Orientation

Point = tuple[float, float]


# Orientation matrices from Red Blob (do not alter)
@dataclass(frozen=True)
class OrientationMatrix:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> axial
    start_angle: float                           # for polygon corners, in sixths of a turn


POINTY_MATRIX = OrientationMatrix(
    f0 =  sqrt(3.0), f1 =  sqrt(3.0)/2.0,
    f2 =  0.0,       f3 =  3.0/2.0,
    b0 =  sqrt(3.0)/3.0, b1 = -1.0/3.0,
    b2 =  0.0,            b3 =  2.0/3.0,
    start_angle = 0.5,  # 30°
)
FLAT_MATRIX = OrientationMatrix(
    f0 =  3.0/2.0,  f1 = 0.0,
    f2 =  sqrt(3.0)/2.0, f3 = sqrt(3.0),
    b0 =  2.0/3.0,  b1 = 0.0,
    b2 = -1.0/3.0,  b3 = sqrt(3.0)/3.0,
    start_angle = 0.0,  # 0°
)

_MATRICES = {
    Orientation.POINTY_TOP: POINTY_MATRIX,
    Orientation.FLAT_TOP: FLAT_MATRIX,
}


def orientation_matrix(orientation: Orientation) -> OrientationMatrix:
    return _MATRICES[Orientation(orientation)]


@dataclass(frozen=True)
class PixelLayout:
    orientation: Orientation
    size_x: float = 1.0  # centre-to-corner distance along x
    size_y: float = 1.0  # centre-to-corner distance along y
    origin_x: float = 0.0
    origin_y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "orientation", Orientation(self.orientation))
        if self.size_x <= 0 or self.size_y <= 0:
            raise ValueError("hex size must be positive")

    @property
    def matrix(self) -> OrientationMatrix:
        return orientation_matrix(self.orientation)

    @property
    def tile_width(self) -> float:
        if self.orientation is Orientation.POINTY_TOP:
            return sqrt(3.0) * self.size_x
        return 2.0 * self.size_x

    @property
    def tile_height(self) -> float:
        if self.orientation is Orientation.POINTY_TOP:
            return 2.0 * self.size_y
        return sqrt(3.0) * self.size_y

    @property
    def spacing_x(self) -> float:
        """Horizontal distance between neighbouring centres."""

        if self.orientation is Orientation.POINTY_TOP:
            return self.tile_width
        return self.tile_width * 3.0 / 4.0

    @property
    def spacing_y(self) -> float:
        """Vertical distance between neighbouring centres."""

        if self.orientation is Orientation.POINTY_TOP:
            return self.tile_height * 3.0 / 4.0
        return self.tile_height

    def hex_to_pixel(self, coord: Cube | Axial | Offset) -> Point:
        cube = to_cube(coord)
        M = self.matrix
        x = (M.f0 * cube.q + M.f1 * cube.r) * self.size_x + self.origin_x
        y = (M.f2 * cube.q + M.f3 * cube.r) * self.size_y + self.origin_y
        return x, y

    def pixel_to_fractional(self, x: float, y: float) -> FractionalCube:
        M = self.matrix
        px = (x - self.origin_x) / self.size_x
        py = (y - self.origin_y) / self.size_y
        q = M.b0 * px + M.b1 * py
        r = M.b2 * px + M.b3 * py
        return FractionalCube(q, r, -q - r)

    def pixel_to_hex(self, x: float, y: float) -> Cube:
        return cube_round(self.pixel_to_fractional(x, y))

    def corner_offset(self, corner: int) -> Point:
        angle = 2.0 * math.pi * (self.matrix.start_angle + corner) / 6.0
        return self.size_x * math.cos(angle), self.size_y * math.sin(angle)

    def corners(self, coord: Cube | Axial | Offset) -> list[Point]:
        """Return the six polygon corners of ``coord`` in world space."""

        cx, cy = self.hex_to_pixel(coord)
        result: list[Point] = []
        for corner in range(6):
            dx, dy = self.corner_offset(corner)
            result.append((cx + dx, cy + dy))
        return result


def _unit_corners(orientation: Orientation) -> tuple[Point, ...]:
    return tuple(PixelLayout(orientation).corners(Cube.ZERO))


POINTY_TOP_CORNERS = _unit_corners(Orientation.POINTY_TOP)
FLAT_TOP_CORNERS = _unit_corners(Orientation.FLAT_TOP)


def pixels_to_hexes(
    layout: PixelLayout, xs: npt.ArrayLike, ys: npt.ArrayLike
) -> npt.NDArray[np.int64]:
    """Vectorised :meth:`PixelLayout.pixel_to_hex`.

    Returns an ``(n, 3)`` integer array of ``(q, r, s)`` rows, rounded with
    the same largest-error correction as :func:`hexmap.algebra.cube_round`.
    """

    x = np.asarray(xs, dtype=np.float64).ravel()
    y = np.asarray(ys, dtype=np.float64).ravel()
    if x.shape != y.shape:
        raise ValueError("xs and ys must have the same number of elements")

    M = layout.matrix
    px = (x - layout.origin_x) / layout.size_x
    py = (y - layout.origin_y) / layout.size_y
    q = M.b0 * px + M.b1 * py
    r = M.b2 * px + M.b3 * py
    s = -q - r

    # np.rint rounds half to even, matching the builtin round().
    rq, rr, rs = np.rint(q), np.rint(r), np.rint(s)
    dq, dr, ds = np.abs(rq - q), np.abs(rr - r), np.abs(rs - s)

    fix_q = (dq > dr) & (dq > ds)
    fix_r = ~fix_q & (dr > ds)
    fix_s = ~fix_q & ~fix_r
    rq = np.where(fix_q, -rr - rs, rq)
    rr = np.where(fix_r, -rq - rs, rr)
    rs = np.where(fix_s, -rq - rr, rs)
    return np.stack([rq, rr, rs], axis=1).astype(np.int64)


__all__ = [
    "FLAT_MATRIX",
    "FLAT_TOP_CORNERS",
    "OrientationMatrix",
    "POINTY_MATRIX",
    "POINTY_TOP_CORNERS",
    "PixelLayout",
    "orientation_matrix",
    "pixels_to_hexes",
]
