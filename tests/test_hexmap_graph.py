import math

import networkx as nx
import pytest

from hexmap import Axial, Cube, HexMap, Tile, build_movement_graph, path_travel_cost


def test_movement_graph_edges_carry_entry_cost():
    hex_map: HexMap[Tile] = HexMap()
    hex_map.insert(Cube(0, 0, 0), Tile(movement_cost=1.0))
    hex_map.insert(Cube(1, 0, -1), Tile(movement_cost=3.0))
    hex_map.insert(Cube(2, 0, -2), Tile(movement_cost=2.0))
    hex_map.insert(Cube(0, 1, -1), Tile(passable=False))

    graph = build_movement_graph(hex_map)

    assert set(graph.nodes) == {Cube(0, 0, 0), Cube(1, 0, -1), Cube(2, 0, -2)}
    assert graph.edges[Cube(0, 0, 0), Cube(1, 0, -1)]["weight"] == 3.0
    assert graph.edges[Cube(1, 0, -1), Cube(0, 0, 0)]["weight"] == 1.0
    assert not graph.has_edge(Cube(0, 0, 0), Cube(2, 0, -2))
    assert graph.nodes[Cube(2, 0, -2)]["payload"] == Tile(movement_cost=2.0)

    path = nx.dijkstra_path(graph, Cube(0, 0, 0), Cube(2, 0, -2))
    assert math.isclose(path_travel_cost(hex_map, path), 5.0)


def test_path_travel_cost_skips_start_and_accepts_axial():
    hex_map = HexMap.hexagon(1, lambda c: Tile(movement_cost=2.5))
    assert path_travel_cost(hex_map, [Axial(0, 0)]) == 0.0
    assert path_travel_cost(hex_map, [Axial(0, 0), Axial(1, 0)]) == 2.5
    with pytest.raises(KeyError):
        path_travel_cost(hex_map, [Cube.ZERO, Cube(5, -5, 0)])
