import math

import numpy as np
import pytest
from numpy.random import default_rng

from hexmap import Axial, Cube, Layout, Orientation, PixelLayout, hex_range, pixels_to_hexes
from hexmap import cube_to_offset
from hexmap.layout import FLAT_TOP_CORNERS, POINTY_TOP_CORNERS


def test_pointy_hex_to_pixel_unit_size():
    layout = PixelLayout(Orientation.POINTY_TOP)
    x, y = layout.hex_to_pixel(Cube(1, 0, -1))
    assert x == pytest.approx(math.sqrt(3.0))
    assert y == pytest.approx(0.0)
    x, y = layout.hex_to_pixel(Axial(0, 1))
    assert x == pytest.approx(math.sqrt(3.0) / 2.0)
    assert y == pytest.approx(1.5)


def test_flat_hex_to_pixel_unit_size():
    layout = PixelLayout(Orientation.FLAT_TOP)
    x, y = layout.hex_to_pixel(Cube(1, 0, -1))
    assert x == pytest.approx(1.5)
    assert y == pytest.approx(math.sqrt(3.0) / 2.0)


def test_hex_to_pixel_accepts_offset():
    layout = PixelLayout(Orientation.POINTY_TOP, 10.0, 10.0, 5.0, -5.0)
    c = Cube(2, -3, 1)
    assert layout.hex_to_pixel(cube_to_offset(c, Layout.ODD_R)) == pytest.approx(
        layout.hex_to_pixel(c)
    )


@pytest.mark.parametrize("orientation", list(Orientation))
def test_pixel_roundtrip_through_centres(orientation: Orientation):
    layout = PixelLayout(orientation, size_x=24.0, size_y=20.0, origin_x=100.0, origin_y=-40.0)
    for c in hex_range(Cube(1, -2, 1), 4):
        x, y = layout.hex_to_pixel(c)
        assert layout.pixel_to_hex(x, y) == c
        frac = layout.pixel_to_fractional(x, y)
        assert frac.q == pytest.approx(c.q)
        assert frac.r == pytest.approx(c.r)


@pytest.mark.parametrize("orientation", list(Orientation))
def test_points_near_centre_map_to_that_cell(orientation: Orientation):
    layout = PixelLayout(orientation, size_x=10.0, size_y=10.0)
    for c in hex_range(Cube.ZERO, 2):
        x, y = layout.hex_to_pixel(c)
        for dx, dy in ((3.0, 0.0), (0.0, -3.0), (-2.0, 2.0)):
            assert layout.pixel_to_hex(x + dx, y + dy) == c


@pytest.mark.parametrize("orientation", list(Orientation))
def test_corners_sit_on_the_circumcircle(orientation: Orientation):
    layout = PixelLayout(orientation, size_x=8.0, size_y=8.0)
    c = Cube(-1, 2, -1)
    cx, cy = layout.hex_to_pixel(c)
    corners = layout.corners(c)
    assert len(corners) == 6
    for x, y in corners:
        assert math.hypot(x - cx, y - cy) == pytest.approx(8.0)


def test_unit_corner_tables():
    assert POINTY_TOP_CORNERS[0] == pytest.approx((math.sqrt(3.0) / 2.0, 0.5))
    assert FLAT_TOP_CORNERS[0] == pytest.approx((1.0, 0.0))


def test_tile_dimensions():
    pointy = PixelLayout(Orientation.POINTY_TOP)
    assert pointy.tile_width == pytest.approx(math.sqrt(3.0))
    assert pointy.tile_height == pytest.approx(2.0)
    assert pointy.spacing_x == pytest.approx(math.sqrt(3.0))
    assert pointy.spacing_y == pytest.approx(1.5)

    flat = PixelLayout(Orientation.FLAT_TOP)
    assert flat.tile_width == pytest.approx(2.0)
    assert flat.tile_height == pytest.approx(math.sqrt(3.0))
    assert flat.spacing_x == pytest.approx(1.5)
    assert flat.spacing_y == pytest.approx(math.sqrt(3.0))


def test_layout_rejects_non_positive_size():
    with pytest.raises(ValueError, match="positive"):
        PixelLayout(Orientation.FLAT_TOP, size_x=0.0)


def test_layout_coerces_orientation_value():
    assert PixelLayout("flat_top").orientation is Orientation.FLAT_TOP  # type: ignore[arg-type]


@pytest.mark.parametrize("orientation", list(Orientation))
def test_pixels_to_hexes_matches_scalar_conversion(orientation: Orientation):
    layout = PixelLayout(orientation, size_x=12.0, size_y=9.0, origin_x=3.0, origin_y=7.0)
    rng = default_rng(1234)
    points = rng.uniform(-150.0, 150.0, size=(300, 2))
    result = pixels_to_hexes(layout, points[:, 0], points[:, 1])
    assert result.shape == (300, 3)
    assert result.dtype == np.int64
    assert np.all(result.sum(axis=1) == 0)
    for (x, y), (q, r, s) in zip(points, result):
        assert layout.pixel_to_hex(float(x), float(y)) == Cube(int(q), int(r), int(s))


def test_pixels_to_hexes_shape_mismatch():
    layout = PixelLayout(Orientation.POINTY_TOP)
    with pytest.raises(ValueError, match="same number"):
        pixels_to_hexes(layout, [0.0, 1.0], [0.0])
