"""Core value models for generated rectangles."""

from __future__ import annotations

from dataclasses import dataclass

# Exclusive upper bound for a sampled color channel.
COLOR_COMPONENT_MAX = 255


@dataclass(frozen=True, slots=True)
class RgbColor:
    """Opaque RGB color."""

    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True, slots=True)
class SceneConfig:
    """Scene size and minimum rectangle size.

    Build through ``build_scene_config`` so the constraints are checked.
    """

    scene_width: int
    scene_height: int
    min_rectangle_width: int
    min_rectangle_height: int


@dataclass(frozen=True, slots=True)
class PlacementBounds:
    """Exclusive upper limits for a rectangle's top-left corner."""

    max_rectangle_x: int
    max_rectangle_y: int


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle with stroke and fill colors."""

    x: int
    y: int
    width: int
    height: int
    stroke_color: RgbColor
    fill_color: RgbColor

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, px: int, py: int) -> bool:
        """Return whether a point lies inside the half-open rectangle area."""
        return self.x <= px < self.right and self.y <= py < self.bottom

    def as_dict(self) -> dict[str, int | str]:
        """Return a plain mapping suitable for JSON export."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "stroke": self.stroke_color.hex,
            "fill": self.fill_color.hex,
        }
