"""Exceptions raised when callers violate the hex-grid contracts."""

from __future__ import annotations


class HexmapError(ValueError):
    """Base class for contract violations detected by :mod:`hexmap`."""


class InvalidCoordinateError(HexmapError):
    """Raised when a coordinate breaks the cube zero-sum invariant."""


class InvalidRadiusError(HexmapError):
    """Raised when a range, ring or area is requested with a negative radius."""


__all__ = ["HexmapError", "InvalidCoordinateError", "InvalidRadiusError"]
