"""Sparse hex map keyed by cube coordinates with per-cell payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from .algebra import spiral
from .conversions import offset_to_cube, to_cube
from .coords import Axial, Cube, Layout, Offset
from .neighbors import neighbors_cube

T = TypeVar("T")

Coord = Cube | Axial | Offset


@runtime_checkable
class PathfindingTile(Protocol):
    """Payload capability consumed by :meth:`HexMap.movement_cost`."""

    @property
    def passable(self) -> bool: ...

    @property
    def movement_cost(self) -> float: ...


@dataclass(frozen=True, slots=True)
class Tile:
    """Stock cell payload: a terrain cost, a passability flag and a free tag."""

    movement_cost: float = 1.0
    passable: bool = True
    tag: Any = None


@dataclass(frozen=True, slots=True)
class HexBounds:
    """Inclusive per-axis extents of the populated cells."""

    q_min: int
    q_max: int
    r_min: int
    r_max: int
    s_min: int
    s_max: int

    def __contains__(self, coord: object) -> bool:
        if not isinstance(coord, Cube | Axial | Offset):
            return False
        c = to_cube(coord)
        return (
            self.q_min <= c.q <= self.q_max
            and self.r_min <= c.r <= self.r_max
            and self.s_min <= c.s <= self.s_max
        )


class HexMap(Generic[T]):
    """Keyed collection from coordinate to payload.

    Axial and offset keys are normalised to :class:`Cube`, so each cell has
    exactly one key. Iteration follows insertion order.

    Reads may run concurrently; mutation must be externally serialised
    against both reads and path searches.
    """

    def __init__(
        self,
        *,
        cost: Callable[[T], float] | None = None,
        passable: Callable[[T], bool] | None = None,
        default_cost: float = 1.0,
    ) -> None:
        self._cells: dict[Cube, T] = {}
        self._cost = cost
        self._passable = passable
        self.default_cost = float(default_cost)
        self.version = 0

    # ------------------------------------------------------------------
    @classmethod
    def hexagon(
        cls,
        radius: int,
        payload: Callable[[Cube], T],
        *,
        center: Cube = Cube.ZERO,
        **kwargs: Any,
    ) -> HexMap[T]:
        """Build a hexagon-shaped map, calling ``payload`` for each cell."""

        hex_map: HexMap[T] = cls(**kwargs)
        for coord in spiral(center, radius):
            hex_map.insert(coord, payload(coord))
        return hex_map

    @classmethod
    def rectangle(
        cls,
        width: int,
        height: int,
        layout: Layout,
        payload: Callable[[Cube], T],
        **kwargs: Any,
    ) -> HexMap[T]:
        """Build a ``width`` x ``height`` map addressed by offset coordinates."""

        if width < 0 or height < 0:
            raise ValueError("width and height must be non-negative")
        hex_map: HexMap[T] = cls(**kwargs)
        for row in range(height):
            for col in range(width):
                coord = offset_to_cube(Offset(col, row, layout))
                hex_map.insert(coord, payload(coord))
        return hex_map

    # ------------------------------------------------------------------
    def insert(self, coord: Coord, payload: T) -> None:
        """Insert or replace the payload at ``coord``.

        Always bumps ``version``: re-inserting a payload that was mutated in
        place is how callers announce the change.
        """

        self._cells[to_cube(coord)] = payload
        self.version += 1

    def insert_area(self, center: Coord, radius: int, payload: T) -> None:
        """Insert ``payload`` at every cell within ``radius`` of ``center``."""

        for coord in spiral(to_cube(center), radius):
            self.insert(coord, payload)

    def remove(self, coord: Coord) -> None:
        key = to_cube(coord)
        if key in self._cells:
            del self._cells[key]
            self.version += 1

    def clear(self) -> None:
        if self._cells:
            self._cells.clear()
            self.version += 1

    def get(self, coord: Coord, default: T | None = None) -> T | None:
        """Return the payload at ``coord``, or ``default`` when absent.

        A stored ``None`` payload reads the same as an absent cell here; use
        :meth:`contains` to tell them apart.
        """

        return self._cells.get(to_cube(coord), default)

    def contains(self, coord: Coord) -> bool:
        return to_cube(coord) in self._cells

    def __contains__(self, coord: object) -> bool:
        if not isinstance(coord, Cube | Axial | Offset):
            return False
        return self.contains(coord)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cube]:
        return iter(self._cells)

    def coords(self) -> list[Cube]:
        return list(self._cells)

    def items(self) -> Iterator[tuple[Cube, T]]:
        return iter(self._cells.items())

    def bounds(self) -> HexBounds | None:
        if not self._cells:
            return None
        qs = [c.q for c in self._cells]
        rs = [c.r for c in self._cells]
        ss = [c.s for c in self._cells]
        return HexBounds(min(qs), max(qs), min(rs), max(rs), min(ss), max(ss))

    # ------------------------------------------------------------------
    def neighbors(self, coord: Coord) -> list[Cube]:
        """Return the adjacent cells of ``coord`` that exist in the map."""

        return [n for n in neighbors_cube(to_cube(coord)) if n in self._cells]

    def passable_neighbors(self, coord: Coord) -> list[Cube]:
        return [n for n in self.neighbors(coord) if self.is_passable(n)]

    def is_passable(self, coord: Coord) -> bool:
        key = to_cube(coord)
        if key not in self._cells:
            return False
        payload = self._cells[key]
        if self._passable is not None:
            return bool(self._passable(payload))
        if isinstance(payload, PathfindingTile):
            return bool(payload.passable)
        return True

    def movement_cost(self, coord: Coord) -> float | None:
        """Cost of entering ``coord``, or ``None`` when the cell is absent."""

        key = to_cube(coord)
        if key not in self._cells:
            return None
        payload = self._cells[key]
        if self._cost is not None:
            return float(self._cost(payload))
        if isinstance(payload, PathfindingTile):
            return float(payload.movement_cost)
        return self.default_cost


__all__ = ["HexBounds", "HexMap", "PathfindingTile", "Tile"]
