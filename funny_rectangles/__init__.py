"""Random rectangle generation for drawing surfaces."""

from funny_rectangles.core.factory import RandomRectangleFactory, RectangleSource
from funny_rectangles.core.models import Rectangle, RgbColor, SceneConfig

__all__ = [
    "RandomRectangleFactory",
    "Rectangle",
    "RectangleSource",
    "RgbColor",
    "SceneConfig",
]
