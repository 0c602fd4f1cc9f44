import pytest
from pydantic import ValidationError

from hexmap import Cube, LayoutConfig, Orientation, PathfinderConfig, SearchLimits


def test_defaults():
    config = PathfinderConfig()
    assert config.limits.unbounded
    assert config.min_step_cost == 1.0
    assert config.cache_results is True


def test_limits_validation():
    limits = SearchLimits(max_expansions=10, max_cost=4)
    assert not limits.unbounded
    assert limits.max_cost == 4.0
    with pytest.raises(ValidationError):
        SearchLimits(max_expansions=-1)
    with pytest.raises(ValidationError):
        SearchLimits(max_cost=-0.5)


def test_extra_fields_are_rejected():
    with pytest.raises(ValidationError):
        PathfinderConfig(heuristic="manhattan")


def test_pathfinder_config_from_mapping():
    config = PathfinderConfig.model_validate(
        {"limits": {"max_expansions": 500}, "min_step_cost": 0.5, "cache_results": False}
    )
    assert config.limits.max_expansions == 500
    assert config.min_step_cost == 0.5
    assert config.cache_results is False


def test_layout_config_builds_pixel_layout():
    config = LayoutConfig.model_validate(
        {"orientation": "flat_top", "size_x": 32, "size_y": 28, "origin_x": 10}
    )
    layout = config.build()
    assert layout.orientation is Orientation.FLAT_TOP
    assert layout.hex_to_pixel(Cube.ZERO) == pytest.approx((10.0, 0.0))


def test_layout_config_rejects_non_positive_size():
    with pytest.raises(ValidationError):
        LayoutConfig(size_x=0)
