"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env.app",
    "appdata/config/.env.app.local",
    ".env.app",
    ".env.app.local",
)

_QUOTES = frozenset({"'", '"'})


@dataclass(frozen=True, slots=True)
class FactorySettings:
    """Factory arguments and generation options resolved from environment."""

    scene_width: int = 800
    scene_height: int = 600
    min_rectangle_width: int = 10
    min_rectangle_height: int = 10
    seed: int | None = None
    count: int = 1


def parse_env_text(text: str) -> dict[str, str]:
    """Parse KEY=VALUE lines; comments, blanks and lines without ``=`` are skipped."""
    values: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
            value = value[1:-1]
        values[key] = value
    return values


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Apply an env file, relative to the working directory, to the process environment.

    Missing files are ignored. Existing variables are overwritten unless
    ``override_existing`` is false.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return
    for key, value in parse_env_text(env_path.read_text(encoding="utf-8")).items():
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left to right; later files may overwrite earlier values."""
    to_load = tuple(paths) if paths is not None else DEFAULT_ENV_FILES
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_factory_settings(env: Mapping[str, str] | None = None) -> FactorySettings:
    """Read factory settings, falling back to defaults for unparseable values.

    Range checks are left to the factory so errors name the offending argument.
    """
    defaults = FactorySettings()
    return FactorySettings(
        scene_width=_int("FUNNY_RECTANGLES_SCENE_WIDTH", defaults.scene_width, env=env),
        scene_height=_int("FUNNY_RECTANGLES_SCENE_HEIGHT", defaults.scene_height, env=env),
        min_rectangle_width=_int(
            "FUNNY_RECTANGLES_MIN_WIDTH", defaults.min_rectangle_width, env=env
        ),
        min_rectangle_height=_int(
            "FUNNY_RECTANGLES_MIN_HEIGHT", defaults.min_rectangle_height, env=env
        ),
        seed=_optional_int("FUNNY_RECTANGLES_SEED", env=env),
        count=_int("FUNNY_RECTANGLES_COUNT", defaults.count, env=env),
    )


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _int(name: str, default: int, *, env: Mapping[str, str] | None = None) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _optional_int(name: str, *, env: Mapping[str, str] | None = None) -> int | None:
    raw = _raw(name, env=env)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None
