"""networkx views of a hex map, for analysis with the wider graph toolkit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, TypeAlias

import networkx as nx

from .conversions import to_cube
from .coords import Axial, Cube, Offset
from .map import HexMap

if TYPE_CHECKING:  # pragma: no cover - typing only
    MovementGraph: TypeAlias = nx.DiGraph[Cube]
else:  # pragma: no cover - runtime alias without subscripting
    MovementGraph: TypeAlias = nx.DiGraph


def build_movement_graph(hex_map: HexMap[Any]) -> MovementGraph:
    """Return a directed graph of moves between adjacent passable cells.

    Edge ``u -> v`` carries ``weight`` equal to the cost of entering ``v``,
    matching :class:`~hexmap.pathfinding.Pathfinder` costs.
    """

    graph: MovementGraph = nx.DiGraph()
    for coord, payload in hex_map.items():
        if hex_map.is_passable(coord):
            graph.add_node(coord, payload=payload)

    for coord in list(graph.nodes):
        for neighbor in hex_map.passable_neighbors(coord):
            graph.add_edge(coord, neighbor, weight=hex_map.movement_cost(neighbor))
    return graph


def path_travel_cost(hex_map: HexMap[Any], path: Iterable[Cube | Axial | Offset]) -> float:
    """Sum the entry cost of every cell in ``path`` after the first."""

    cells = [to_cube(coord) for coord in path]
    total = 0.0
    for cell in cells[1:]:
        cost = hex_map.movement_cost(cell)
        if cost is None:
            raise KeyError(cell)
        total += cost
    return total


__all__ = ["MovementGraph", "build_movement_graph", "path_travel_cost"]
