"""Validated settings for path searches and world-space layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import Orientation

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .layout import PixelLayout


class SearchLimits(BaseModel):
    """Optional ceilings that bound the worst-case cost of a search."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_expansions: int | None = Field(default=None, ge=0)
    max_cost: float | None = Field(default=None, ge=0.0)

    @property
    def unbounded(self) -> bool:
        return self.max_expansions is None and self.max_cost is None


class PathfinderConfig(BaseModel):
    """Tuning for :class:`~hexmap.pathfinding.Pathfinder`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    limits: SearchLimits = Field(default_factory=SearchLimits)
    # Heuristic scale. Keep this <= the cheapest cell cost to stay admissible.
    min_step_cost: float = Field(default=1.0, ge=0.0)
    cache_results: bool = Field(default=True)

    @field_validator("min_step_cost")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)


class LayoutConfig(BaseModel):
    """World-space projection parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: Orientation = Field(default=Orientation.POINTY_TOP)
    size_x: float = Field(default=1.0, gt=0.0)
    size_y: float = Field(default=1.0, gt=0.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)

    def build(self) -> PixelLayout:
        """Instantiate a :class:`~hexmap.layout.PixelLayout` helper."""

        from .layout import PixelLayout

        return PixelLayout(
            orientation=self.orientation,
            size_x=self.size_x,
            size_y=self.size_y,
            origin_x=self.origin_x,
            origin_y=self.origin_y,
        )


__all__ = ["LayoutConfig", "PathfinderConfig", "SearchLimits"]
