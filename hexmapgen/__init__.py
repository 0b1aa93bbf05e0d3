"""Hexagonal biome map generation."""

from .hex_coords import Hex, HEX_DIRECTIONS, neighbor, distance
from .edges import Edge, canonicalize
from .regions import build_hexagon, derive_edges, hexagon_size
from .attributes import AttributeStore, MissingAttributeError, AttributeAlreadySetError
from .layout import Layout, Point, POINTY, FLAT
from .noise import make_noise2d, derive_seed
from .biomes import Biome, classify
from .schemas import MapConfig, MapSummary
from .game_map import GameMap, generate_map

__all__ = [
    # coordinates
    "Hex",
    "HEX_DIRECTIONS",
    "neighbor",
    "distance",
    "Edge",
    "canonicalize",
    # regions
    "build_hexagon",
    "derive_edges",
    "hexagon_size",
    # storage
    "AttributeStore",
    "MissingAttributeError",
    "AttributeAlreadySetError",
    # projection and noise
    "Layout",
    "Point",
    "POINTY",
    "FLAT",
    "make_noise2d",
    "derive_seed",
    # classification
    "Biome",
    "classify",
    # map
    "MapConfig",
    "MapSummary",
    "GameMap",
    "generate_map",
]
