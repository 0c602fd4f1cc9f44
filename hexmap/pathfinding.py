"""
Hex-map pathfinding facade.

Primary goals:
- Run the generic A* in :mod:`hexmap.astar` over a :class:`HexMap`.
- Take step costs and passability from the map payloads.
- Keep the heuristic admissible via ``PathfinderConfig.min_step_cost``.
- Cache results keyed on the map's ``version`` so edits invalidate them.

Usage:
    hex_map = HexMap.hexagon(5, lambda c: Tile())
    pf = Pathfinder(hex_map)
    result = pf.find_path(Cube(0, 0, 0), Cube(2, -1, -1))
    if result.found:
        print(result.path.coords, result.path.cost)

Searches keep only call-local state, so several may run concurrently over
one map provided nothing mutates it meanwhile.
"""

from __future__ import annotations

import logging
from typing import Any

from .astar import Path, SearchResult, astar
from .config import PathfinderConfig, SearchLimits
from .conversions import to_cube
from .coords import Axial, Cube, Offset
from .heuristics import hex_distance_cube
from .map import HexMap

logger = logging.getLogger(__name__)

Coord = Cube | Axial | Offset


class Pathfinder:
    """
    Cost-aware shortest paths over a :class:`HexMap`.

    - Absent or impassable start/goal cells give a no-path result.
    - Entering a cell costs ``hex_map.movement_cost(cell)``; the start cell
      is free.
    - Results are cached by (start, goal, limits) for the current map
      version; older entries are dropped once the map changes.
    """

    def __init__(self, hex_map: HexMap[Any], config: PathfinderConfig | None = None) -> None:
        self.hex_map = hex_map
        self.config = config or PathfinderConfig()
        self._cache: dict[tuple[Cube, Cube, int, SearchLimits], SearchResult[Cube]] = {}
        self._cache_version = hex_map.version

    # --------- Public API ---------

    def find_path(
        self, start: Coord, goal: Coord, *, limits: SearchLimits | None = None
    ) -> SearchResult[Cube]:
        """
        Search from ``start`` to ``goal``. Never raises for unreachable goals;
        inspect ``result.found`` and ``result.bounded`` instead.
        """
        start_cube = to_cube(start)
        goal_cube = to_cube(goal)
        limits = limits or self.config.limits

        if self.hex_map.version != self._cache_version:
            # Entries for older map versions can never hit again.
            self._cache.clear()
            self._cache_version = self.hex_map.version

        key = (start_cube, goal_cube, self.hex_map.version, limits)
        if self.config.cache_results and key in self._cache:
            logger.debug("path cache hit %s -> %s", start_cube, goal_cube)
            return self._cache[key]

        result = self._search(start_cube, goal_cube, limits)

        if self.config.cache_results:
            self._cache[key] = result
        return result

    def path(self, start: Coord, goal: Coord) -> Path[Cube] | None:
        """Return the path from ``start`` to ``goal`` or ``None``."""
        return self.find_path(start, goal).path

    def invalidate(self) -> None:
        """
        Clear the internal path cache. Map edits already bump
        ``hex_map.version``; this only frees memory.
        """
        self._cache.clear()

    # --------- Internal helpers ---------

    def heuristic(self, a: Cube, b: Cube) -> float:
        # Admissible if min_step_cost is <= true min cell cost
        return hex_distance_cube(a, b) * self.config.min_step_cost

    def edge_cost(self, a: Cube, b: Cube) -> float:
        cost = self.hex_map.movement_cost(b)
        if cost is None:
            raise KeyError(b)
        return cost

    def _search(self, start: Cube, goal: Cube, limits: SearchLimits) -> SearchResult[Cube]:
        if not self.hex_map.is_passable(start) or not self.hex_map.is_passable(goal):
            logger.debug("no path %s -> %s: endpoint absent or impassable", start, goal)
            return SearchResult(None)

        result = astar(
            start,
            goal,
            self.hex_map.neighbors,
            self.heuristic,
            cost=self.edge_cost,
            passable=self.hex_map.is_passable,
            max_expansions=limits.max_expansions,
            max_cost=limits.max_cost,
        )
        if result.bounded:
            logger.debug(
                "search %s -> %s hit its limit after %d expansions",
                start,
                goal,
                result.expanded,
            )
        elif not result.found:
            logger.debug("no path %s -> %s after %d expansions", start, goal, result.expanded)
        return result


__all__ = ["Pathfinder"]
