from __future__ import annotations

import logging
import random

import pytest

from funny_rectangles.core.factory import RandomRectangleFactory
from funny_rectangles.infra.logging import shutdown_logging


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def factory(seeded_rng: random.Random) -> RandomRectangleFactory:
    return RandomRectangleFactory(100, 50, 10, 5, rng=seeded_rng)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("FUNNY_RECTANGLES_APP_DATA_DIR", raising=False)
    monkeypatch.delenv("FUNNY_RECTANGLES_LOG_DIR", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    shutdown_logging()
    root.handlers[:] = handlers
    root.setLevel(level)
