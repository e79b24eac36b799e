"""Configuration errors raised when building a rectangle factory."""

from __future__ import annotations


class RectangleConfigError(ValueError):
    """Base error for a rejected factory argument."""

    def __init__(self, field: str, value: int, message: str) -> None:
        super().__init__(f"{field}={value}: {message}")
        self.field = field
        self.value = value


class OutOfRangeError(RectangleConfigError):
    """An argument is negative."""

    def __init__(self, field: str, value: int) -> None:
        super().__init__(field, value, "must not be negative")


class InvalidConfigurationError(RectangleConfigError):
    """A minimum rectangle dimension does not fit inside the scene."""
