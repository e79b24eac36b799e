"""Rectangle factory with validated scene bounds and random sampling."""

from __future__ import annotations

import logging
import operator
import random
from typing import Protocol

from funny_rectangles.core.errors import (
    InvalidConfigurationError,
    OutOfRangeError,
    RectangleConfigError,
)
from funny_rectangles.core.models import (
    COLOR_COMPONENT_MAX,
    PlacementBounds,
    Rectangle,
    RgbColor,
    SceneConfig,
)

logger = logging.getLogger(__name__)


class RectangleSource(Protocol):
    """Anything a display layer can pull new rectangles from."""

    def create_rectangle(self) -> Rectangle: ...


def build_scene_config(
    scene_width: int,
    scene_height: int,
    min_rectangle_width: int,
    min_rectangle_height: int,
) -> SceneConfig:
    """Validate scene and minimum-size arguments and return an immutable config.

    Arguments must be integers (anything ``operator.index`` accepts); other
    types raise ``TypeError`` here rather than later during sampling.
    """
    values: dict[str, int] = {}
    for field, value in (
        ("scene_width", scene_width),
        ("scene_height", scene_height),
        ("min_rectangle_width", min_rectangle_width),
        ("min_rectangle_height", min_rectangle_height),
    ):
        values[field] = operator.index(value)
        if values[field] < 0:
            raise _rejected(OutOfRangeError(field, values[field]))
    if values["min_rectangle_width"] >= values["scene_width"]:
        raise _rejected(
            InvalidConfigurationError(
                "min_rectangle_width",
                values["min_rectangle_width"],
                "minimum rectangle width must be less than scene width",
            )
        )
    if values["min_rectangle_height"] >= values["scene_height"]:
        raise _rejected(
            InvalidConfigurationError(
                "min_rectangle_height",
                values["min_rectangle_height"],
                "minimum rectangle height must be less than scene height",
            )
        )
    return SceneConfig(**values)


def _rejected(error: RectangleConfigError) -> RectangleConfigError:
    logger.warning(
        "scene_config_rejected field=%s value=%d",
        error.field,
        error.value,
        extra={"field": error.field, "value": error.value},
    )
    return error


def placement_bounds(config: SceneConfig) -> PlacementBounds:
    """Derive the largest top-left corner that still fits a minimum-sized rectangle."""
    return PlacementBounds(
        max_rectangle_x=config.scene_width - config.min_rectangle_width,
        max_rectangle_y=config.scene_height - config.min_rectangle_height,
    )


def random_color(rng: random.Random) -> RgbColor:
    """Sample an RGB color with every channel in [0, 255)."""
    return RgbColor(
        r=rng.randrange(COLOR_COMPONENT_MAX),
        g=rng.randrange(COLOR_COMPONENT_MAX),
        b=rng.randrange(COLOR_COMPONENT_MAX),
    )


class RandomRectangleFactory:
    """Creates rectangles with random position, size and colors inside a scene.

    Configuration is fixed at construction. The factory owns one random
    generator; share an instance across threads only under external locking.
    """

    def __init__(
        self,
        scene_width: int,
        scene_height: int,
        min_rectangle_width: int,
        min_rectangle_height: int,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._config = build_scene_config(
            scene_width, scene_height, min_rectangle_width, min_rectangle_height
        )
        self._bounds = placement_bounds(self._config)
        self._rng = rng if rng is not None else random.Random()
        logger.debug(
            "rectangle_factory_ready scene=%dx%d min=%dx%d max_x=%d max_y=%d",
            self._config.scene_width,
            self._config.scene_height,
            self._config.min_rectangle_width,
            self._config.min_rectangle_height,
            self._bounds.max_rectangle_x,
            self._bounds.max_rectangle_y,
        )

    @classmethod
    def from_config(
        cls, config: SceneConfig, *, rng: random.Random | None = None
    ) -> RandomRectangleFactory:
        """Build a factory from an existing config, validating it again."""
        return cls(
            config.scene_width,
            config.scene_height,
            config.min_rectangle_width,
            config.min_rectangle_height,
            rng=rng,
        )

    @property
    def config(self) -> SceneConfig:
        return self._config

    @property
    def bounds(self) -> PlacementBounds:
        return self._bounds

    def create_rectangle(self) -> Rectangle:
        """Create one rectangle that lies fully inside the scene."""
        rng = self._rng
        config = self._config
        # scene_width - x > min_rectangle_width holds because x < max_rectangle_x.
        x = rng.randrange(0, self._bounds.max_rectangle_x)
        y = rng.randrange(0, self._bounds.max_rectangle_y)
        width = rng.randrange(config.min_rectangle_width, config.scene_width - x)
        height = rng.randrange(config.min_rectangle_height, config.scene_height - y)
        rectangle = Rectangle(
            x=x,
            y=y,
            width=width,
            height=height,
            stroke_color=random_color(rng),
            fill_color=random_color(rng),
        )
        logger.debug("rectangle_created x=%d y=%d width=%d height=%d", x, y, width, height)
        return rectangle

    def create_rectangles(self, count: int) -> list[Rectangle]:
        """Create ``count`` independent rectangles."""
        count = operator.index(count)
        if count < 0:
            raise OutOfRangeError("count", count)
        return [self.create_rectangle() for _ in range(count)]
