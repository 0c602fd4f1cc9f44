from __future__ import annotations

from .coords import Axial, Cube


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return (abs(a.q - b.q) + abs(a.r - b.r) + abs(a.s - b.s)) // 2


def hex_distance_axial(a: Axial, b: Axial) -> int:
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dr) + abs(dq + dr)) // 2


__all__ = ["hex_distance_axial", "hex_distance_cube"]
