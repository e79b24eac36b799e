from dataclasses import FrozenInstanceError

import pytest

from funny_rectangles.core.models import Rectangle, RgbColor


def _rect(x: int = 2, y: int = 3, width: int = 4, height: int = 5) -> Rectangle:
    return Rectangle(x, y, width, height, RgbColor(0, 0, 0), RgbColor(254, 16, 1))


def test_rgb_color_hex_and_tuple() -> None:
    color = RgbColor(254, 16, 1)
    assert color.hex == "#fe1001"
    assert color.as_tuple() == (254, 16, 1)


def test_rectangle_edges_and_contains_are_half_open() -> None:
    rect = _rect()
    assert rect.right == 6
    assert rect.bottom == 8
    assert rect.contains(2, 3)
    assert rect.contains(5, 7)
    assert not rect.contains(6, 7)
    assert not rect.contains(5, 8)
    assert not rect.contains(1, 3)


def test_rectangle_as_dict_uses_hex_colors() -> None:
    assert _rect().as_dict() == {
        "x": 2,
        "y": 3,
        "width": 4,
        "height": 5,
        "stroke": "#000000",
        "fill": "#fe1001",
    }


def test_rectangle_is_immutable() -> None:
    rect = _rect()
    with pytest.raises(FrozenInstanceError):
        rect.x = 10  # type: ignore[misc]
