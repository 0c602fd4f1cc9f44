from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, TypeVar

N = TypeVar("N", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Path(Generic[N]):
    """Ordered cells from start to goal (inclusive) and the cost of walking them."""

    coords: tuple[N, ...]
    cost: float

    @property
    def start(self) -> N:
        return self.coords[0]

    @property
    def goal(self) -> N:
        return self.coords[-1]

    @property
    def steps(self) -> int:
        return len(self.coords) - 1

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[N]:
        return iter(self.coords)


@dataclass(frozen=True, slots=True)
class SearchResult(Generic[N]):
    """Outcome of a search.

    ``path`` is ``None`` when no route was found. ``bounded`` tells a caller
    whether that happened because a search limit cut the search short rather
    than because the goal is unreachable.
    """

    path: Path[N] | None
    bounded: bool = False
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None


def astar(
    start: N,
    goal: N,
    neighbors: Callable[[Any], Iterable[Any]],
    heuristic: Callable[[Any, Any], float],
    *,
    cost: Callable[[Any, Any], float] = lambda a, b: 1.0,
    passable: Callable[[Any], bool] = lambda x: True,
    max_expansions: int | None = None,
    max_cost: float | None = None,
) -> SearchResult[N]:
    """Generic A* over arbitrary hashable nodes.

    Equal ``f`` scores pop in the order they were pushed. Edge costs must be
    non-negative; a negative cost raises ``ValueError``. The returned path is
    optimal when ``heuristic`` never overestimates the remaining cost.

    ``max_expansions`` caps how many nodes are closed and ``max_cost`` drops
    any candidate whose cost-so-far would exceed it. Either limit yields a
    result with ``path=None`` and ``bounded=True`` when it prevented success.
    """

    if max_expansions is not None and max_expansions < 0:
        raise ValueError("max_expansions must be non-negative")

    g: dict[Hashable, float] = {start: 0.0}
    came_from: dict[Hashable, Hashable] = {}
    closed: set[Hashable] = set()
    open_heap: list[tuple[float, int, Hashable]] = []
    push_id = 0
    heapq.heappush(open_heap, (float(heuristic(start, goal)), push_id, start))
    expanded = 0
    pruned = False

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current in closed:
            # Stale entry left behind by a later improvement.
            continue
        if current == goal:
            rev = [current]
            while current in came_from:
                current = came_from[current]
                rev.append(current)
            rev.reverse()
            return SearchResult(Path(tuple(rev), g[goal]), expanded=expanded)

        if max_expansions is not None and expanded >= max_expansions:
            return SearchResult(None, bounded=True, expanded=expanded)
        closed.add(current)
        expanded += 1

        for nxt in neighbors(current):
            if nxt in closed or not passable(nxt):
                continue
            step = float(cost(current, nxt))
            if step < 0:
                raise ValueError(f"negative movement cost {step!r} entering {nxt!r}")
            tentative = g[current] + step
            if max_cost is not None and tentative > max_cost:
                pruned = True
                continue
            if tentative < g.get(nxt, float("inf")):
                came_from[nxt] = current
                g[nxt] = tentative
                push_id += 1
                heapq.heappush(
                    open_heap, (tentative + float(heuristic(nxt, goal)), push_id, nxt)
                )

    return SearchResult(None, bounded=pruned, expanded=expanded)


__all__ = ["Path", "SearchResult", "astar"]
