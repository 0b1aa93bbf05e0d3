"""Seeded 2D noise fields backed by OpenSimplex."""

from typing import Protocol

from opensimplex import OpenSimplex


ELEVATION_SALT = 0x9E3779B1
MOISTURE_SALT = 0x22BEEF


class NoiseField(Protocol):
    """Deterministic function of two reals, nominally in [-1, 1]."""

    def __call__(self, x: float, y: float) -> float: ...


def derive_seed(seed: int, salt: int) -> int:
    """Mix a map seed with a per-field salt into a non-negative sub-seed."""
    return (seed ^ salt) & 0x7FFFFFFF


def make_noise2d(seed: int) -> NoiseField:
    """Create a 2D noise field with an explicit seed.

    Two fields built from the same seed return identical values; use
    derive_seed() to get independent fields from one map seed.
    """
    generator = OpenSimplex(seed=seed)

    def noise2d(x: float, y: float) -> float:
        return generator.noise2(x, y)

    return noise2d
