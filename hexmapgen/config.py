"""Configuration for map generation."""

import os
import tomllib
from pathlib import Path
from typing import Optional

# Defaults
DEFAULT_RADIUS = 14
DEFAULT_SEED = 0
DEFAULT_HEX_SIZE = 1.0
DEFAULT_ORIENTATION = "pointy"

# Environment overrides, read each time a config is built
RADIUS_ENV = "HEXMAP_RADIUS"
SEED_ENV = "HEXMAP_SEED"

# Log format shared by CLI entry points
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class ConfigError(ValueError):
    """Raised when a config file has the wrong shape."""


def default_radius() -> int | str:
    """Radius from HEXMAP_RADIUS, unvalidated, else DEFAULT_RADIUS."""
    return os.environ.get(RADIUS_ENV, DEFAULT_RADIUS)


def default_seed() -> int | str:
    """Seed from HEXMAP_SEED, unvalidated, else DEFAULT_SEED."""
    return os.environ.get(SEED_ENV, DEFAULT_SEED)


def default_config(radius: Optional[int] = None, seed: Optional[int] = None):
    """Build a MapConfig from defaults, environment and explicit values.

    Raises:
        pydantic.ValidationError: If a value, including one taken from the
            environment, is not valid
    """
    from hexmapgen.schemas import MapConfig

    values = {}
    if radius is not None:
        values["radius"] = radius
    if seed is not None:
        values["seed"] = seed
    return MapConfig.model_validate(values)


def load_config(path: str | Path, radius: Optional[int] = None, seed: Optional[int] = None):
    """Load a MapConfig from a TOML file.

    Values are read from the [map] table if present, otherwise from the top
    level. `radius` and `seed`, when not None, win over the file. Missing
    values fall back to the environment, then to the module defaults. All
    values are validated once, after merging.

    Raises:
        FileNotFoundError: If the file does not exist
        tomllib.TOMLDecodeError: If the file is not valid TOML
        ConfigError: If the map section is not a table
        pydantic.ValidationError: If values are out of range or unknown
    """
    from hexmapgen.schemas import MapConfig

    with open(path, "rb") as f:
        data = tomllib.load(f)

    table = data.get("map", data)
    if not isinstance(table, dict):
        raise ConfigError(f"'map' must be a table, got {type(table).__name__}")

    values = dict(table)
    if radius is not None:
        values["radius"] = radius
    if seed is not None:
        values["seed"] = seed
    return MapConfig.model_validate(values)
