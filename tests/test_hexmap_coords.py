import pytest

from hexmap import Axial, Cube, FractionalCube, InvalidCoordinateError, Layout, Orientation, Parity
from hexmap import axial_to_cube, cube_to_axial


def test_cube_invariant():
    c = Cube(1, -2, 1)
    assert c.q + c.r + c.s == 0


def test_cube_rejects_nonzero_sum():
    with pytest.raises(InvalidCoordinateError, match="must be 0"):
        Cube(1, 1, 1)


def test_invalid_coordinate_is_a_value_error():
    with pytest.raises(ValueError):
        Cube(0, 0, 1)


def test_axial_cube_roundtrip():
    a = Axial(3, -2)
    c = axial_to_cube(a)
    assert c == Cube(3, -2, -1)
    a2 = cube_to_axial(c)
    assert a == a2


def test_axial_derives_s():
    assert Axial(2, 5).s == -7


def test_cube_operators():
    a = Cube(1, -2, 1)
    b = Cube(-3, 1, 2)
    assert a + b == Cube(-2, -1, 3)
    assert a - b == Cube(4, -3, -1)
    assert a * 3 == Cube(3, -6, 3)
    assert 2 * a == Cube(2, -4, 2)
    assert -a == Cube(-1, 2, -1)
    assert a + Cube.ZERO == a


def test_axial_operators():
    assert Axial(1, 2) + Axial(-1, 1) == Axial(0, 3)
    assert Axial(1, 2) - Axial(-1, 1) == Axial(2, 1)
    assert Axial(1, -1) * 2 == Axial(2, -2)


def test_coordinates_are_hashable_values():
    cells = {Cube(0, 0, 0), Cube(0, 0, 0), Cube(1, -1, 0)}
    assert len(cells) == 2
    with pytest.raises(AttributeError):
        Cube(0, 0, 0).q = 1  # type: ignore[misc]


def test_fractional_cube_tolerance():
    FractionalCube(0.5, -0.25, -0.25 + 1e-9)
    with pytest.raises(InvalidCoordinateError):
        FractionalCube(0.5, 0.5, 0.5)


def test_fractional_cube_tolerance_scales_with_magnitude():
    big = 1e12
    FractionalCube(big + 1e-6, -big + 2e-6, -3e-6)
    with pytest.raises(InvalidCoordinateError):
        FractionalCube(big, -big, 5.0)


def test_fractional_round():
    assert FractionalCube(0.9, -0.4, -0.5).round() == Cube(1, 0, -1)


@pytest.mark.parametrize(
    ("orientation", "parity", "layout"),
    [
        (Orientation.POINTY_TOP, Parity.ODD, Layout.ODD_R),
        (Orientation.POINTY_TOP, Parity.EVEN, Layout.EVEN_R),
        (Orientation.FLAT_TOP, Parity.ODD, Layout.ODD_Q),
        (Orientation.FLAT_TOP, Parity.EVEN, Layout.EVEN_Q),
    ],
)
def test_layout_for_orientation(orientation: Orientation, parity: Parity, layout: Layout):
    assert Layout.for_orientation(orientation, parity) is layout
    assert layout.orientation is orientation
    assert layout.parity is parity
