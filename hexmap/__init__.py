"""Hexagonal grid coordinates, geometry and pathfinding for game engines."""

from .coords import Axial, Cube, FractionalCube, Layout, Offset, Orientation, Parity
from .errors import HexmapError, InvalidCoordinateError, InvalidRadiusError
from .conversions import (
    axial_to_cube,
    axial_to_offset,
    cube_to_axial,
    cube_to_offset,
    offset_to_axial,
    offset_to_cube,
    to_cube,
)
from .heuristics import hex_distance_axial, hex_distance_cube
from .neighbors import (
    AXIAL_DIRECTIONS,
    CUBE_DIAGONALS,
    CUBE_DIRECTIONS,
    diagonal_neighbor,
    neighbor,
    neighbors_axial,
    neighbors_axial_bounded,
    neighbors_cube,
    neighbors_offset,
    neighbors_offset_bounded,
    opposite,
)
from .algebra import (
    Axis,
    LINE_EPSILON,
    cube_add,
    cube_round,
    cube_scale,
    cube_subtract,
    hex_range,
    in_range,
    lerp,
    line,
    range_intersection,
    reflect,
    ring,
    rotate,
    spiral,
)
from .layout import PixelLayout, pixels_to_hexes
from .map import HexBounds, HexMap, PathfindingTile, Tile
from .astar import Path, SearchResult, astar
from .config import LayoutConfig, PathfinderConfig, SearchLimits
from .pathfinding import Pathfinder
from .graph import build_movement_graph, path_travel_cost

__version__ = "0.1.0"

__all__ = [
    "AXIAL_DIRECTIONS",
    "Axial",
    "Axis",
    "CUBE_DIAGONALS",
    "CUBE_DIRECTIONS",
    "Cube",
    "FractionalCube",
    "HexBounds",
    "HexMap",
    "HexmapError",
    "InvalidCoordinateError",
    "InvalidRadiusError",
    "LINE_EPSILON",
    "Layout",
    "LayoutConfig",
    "Offset",
    "Orientation",
    "Parity",
    "Path",
    "PathfinderConfig",
    "Pathfinder",
    "PathfindingTile",
    "PixelLayout",
    "SearchLimits",
    "SearchResult",
    "Tile",
    "astar",
    "axial_to_cube",
    "axial_to_offset",
    "build_movement_graph",
    "cube_add",
    "cube_round",
    "cube_scale",
    "cube_subtract",
    "cube_to_axial",
    "cube_to_offset",
    "diagonal_neighbor",
    "hex_distance_axial",
    "hex_distance_cube",
    "hex_range",
    "in_range",
    "lerp",
    "line",
    "neighbor",
    "neighbors_axial",
    "neighbors_axial_bounded",
    "neighbors_cube",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "offset_to_axial",
    "offset_to_cube",
    "opposite",
    "path_travel_cost",
    "range_intersection",
    "reflect",
    "ring",
    "rotate",
    "spiral",
    "to_cube",
]
