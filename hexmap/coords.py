"""Coordinate value types for hexagonal grids.

Cube coordinates are the canonical representation; axial and offset
coordinates are compact or rectangular views that convert through cube
coordinates (see :mod:`hexmap.conversions`).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .errors import InvalidCoordinateError

FRACTIONAL_TOLERANCE = 1e-6


class Orientation(str, Enum):
    """Which way the hexagons point when drawn."""

    POINTY_TOP = "pointy_top"
    FLAT_TOP = "flat_top"


class Parity(str, Enum):
    """Which alternate rows (or columns) are shoved in an offset layout."""

    ODD = "odd"
    EVEN = "even"


@dataclass(frozen=True, slots=True)
class Cube:
    q: int
    r: int
    s: int

    ZERO: ClassVar[Cube]

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise InvalidCoordinateError(
                f"For cube coords, q + r + s must be 0 (got {self.q}+{self.r}+{self.s})"
            )

    def __add__(self, other: Cube) -> Cube:
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: Cube) -> Cube:
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.q - other.q, self.r - other.r, self.s - other.s)

    def __mul__(self, factor: int) -> Cube:
        if not isinstance(factor, int):
            return NotImplemented
        return Cube(self.q * factor, self.r * factor, self.s * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Cube:
        return Cube(-self.q, -self.r, -self.s)


Cube.ZERO = Cube(0, 0, 0)


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    ZERO: ClassVar[Axial]

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: Axial) -> Axial:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Axial) -> Axial:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q - other.q, self.r - other.r)

    def __mul__(self, factor: int) -> Axial:
        if not isinstance(factor, int):
            return NotImplemented
        return Axial(self.q * factor, self.r * factor)

    __rmul__ = __mul__


Axial.ZERO = Axial(0, 0)


@dataclass(frozen=True, slots=True)
class FractionalCube:
    """Cube coordinate with float components, produced mid-interpolation.

    Must be rounded (:meth:`round`) before it is used as a grid address.
    """

    q: float
    r: float
    s: float

    def __post_init__(self) -> None:
        total = self.q + self.r + self.s
        # Far from the origin the float spacing outgrows any fixed tolerance.
        scale = max(abs(self.q), abs(self.r), abs(self.s))
        if not math.isclose(total, 0.0, abs_tol=max(FRACTIONAL_TOLERANCE, scale * 1e-12)):
            raise InvalidCoordinateError(
                f"For fractional cube coords, q + r + s must be ~0 (got {total!r})"
            )

    def round(self) -> Cube:
        from .algebra import cube_round

        return cube_round(self)


class Layout(Enum):
    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"

    @staticmethod
    def for_orientation(orientation: Orientation, parity: Parity) -> Layout:
        """Pointy-top grids shove rows, flat-top grids shove columns."""

        if orientation is Orientation.POINTY_TOP:
            return Layout.ODD_R if parity is Parity.ODD else Layout.EVEN_R
        return Layout.ODD_Q if parity is Parity.ODD else Layout.EVEN_Q

    @property
    def orientation(self) -> Orientation:
        if self in (Layout.ODD_R, Layout.EVEN_R):
            return Orientation.POINTY_TOP
        return Orientation.FLAT_TOP

    @property
    def parity(self) -> Parity:
        if self in (Layout.ODD_R, Layout.ODD_Q):
            return Parity.ODD
        return Parity.EVEN


@dataclass(frozen=True, slots=True)
class Offset:
    col: int  # q-like
    row: int  # r-like
    layout: Layout


__all__ = [
    "Axial",
    "Cube",
    "FRACTIONAL_TOLERANCE",
    "FractionalCube",
    "Layout",
    "Offset",
    "Orientation",
    "Parity",
]
