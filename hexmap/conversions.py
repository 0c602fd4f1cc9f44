"""Closed-form conversions between cube, axial and offset coordinates.

Offset conversions are only invertible when the same :class:`Layout` is used
in both directions. Converting with a mismatched layout yields a valid but
different coordinate; that is a caller error and is not detected here.
"""

from __future__ import annotations

from .coords import Axial, Cube, Layout, Offset


def axial_to_cube(a: Axial) -> Cube:
    return Cube(a.q, a.r, -a.q - a.r)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.q, c.r)


def axial_to_offset(a: Axial, layout: Layout) -> Offset:
    q, r = a.q, a.r
    if layout == Layout.EVEN_R:
        col = q + (r + (r & 1)) // 2
        row = r
    elif layout == Layout.ODD_R:
        col = q + (r - (r & 1)) // 2
        row = r
    elif layout == Layout.EVEN_Q:
        col = q
        row = r + (q + (q & 1)) // 2
    elif layout == Layout.ODD_Q:
        col = q
        row = r + (q - (q & 1)) // 2
    else:
        raise ValueError("Unknown layout")
    return Offset(col, row, layout)


def offset_to_axial(o: Offset) -> Axial:
    col, row, layout = o.col, o.row, o.layout
    if layout == Layout.EVEN_R:
        q = col - (row + (row & 1)) // 2
        r = row
    elif layout == Layout.ODD_R:
        q = col - (row - (row & 1)) // 2
        r = row
    elif layout == Layout.EVEN_Q:
        q = col
        r = row - (col + (col & 1)) // 2
    elif layout == Layout.ODD_Q:
        q = col
        r = row - (col - (col & 1)) // 2
    else:
        raise ValueError("Unknown layout")
    return Axial(q, r)


def cube_to_offset(c: Cube, layout: Layout) -> Offset:
    return axial_to_offset(cube_to_axial(c), layout)


def offset_to_cube(o: Offset) -> Cube:
    return axial_to_cube(offset_to_axial(o))


def to_cube(coord: Cube | Axial | Offset) -> Cube:
    """Normalise any integer coordinate to its canonical cube form."""

    if isinstance(coord, Cube):
        return coord
    if isinstance(coord, Axial):
        return axial_to_cube(coord)
    if isinstance(coord, Offset):
        return offset_to_cube(coord)
    raise TypeError(f"Unsupported coordinate type: {type(coord).__name__}")


__all__ = [
    "axial_to_cube",
    "axial_to_offset",
    "cube_to_axial",
    "cube_to_offset",
    "offset_to_axial",
    "offset_to_cube",
    "to_cube",
]
