"""Map aggregate and generation pipeline."""

import logging
from collections import Counter
from typing import Optional

from hexmapgen.attributes import AttributeStore
from hexmapgen.biomes import Biome, classify
from hexmapgen.edges import Edge
from hexmapgen.hex_coords import Hex
from hexmapgen.layout import ORIENTATIONS, Layout, Point
from hexmapgen.noise import ELEVATION_SALT, MOISTURE_SALT, derive_seed, make_noise2d
from hexmapgen.regions import boundary_edges, build_hexagon, derive_edges
from hexmapgen.sampling import sample_fields
from hexmapgen.schemas import MapConfig, MapSummary


logger = logging.getLogger(__name__)


class GameMap:
    """The set of tiles and edges of one map, and everything known about them.

    Owns the region, the edges derived from it and all attribute stores.
    Stores start empty and are filled by generate_map().
    """

    def __init__(self, hexes: frozenset[Hex], radius: int, seed: int = 0):
        self.hexes = frozenset(hexes)
        self.radius = radius
        self.seed = seed
        self.edges: frozenset[Edge] = derive_edges(self.hexes)

        self.elevation: AttributeStore[Hex, float] = AttributeStore("elevation")
        self.moisture: AttributeStore[Hex, float] = AttributeStore("moisture")
        self.biome: AttributeStore[Hex, Biome] = AttributeStore("biome")
        self.coastline: AttributeStore[Edge, bool] = AttributeStore("coastline")

    def __repr__(self) -> str:
        return f"GameMap(radius={self.radius}, hexes={len(self.hexes)}, edges={len(self.edges)})"

    def classify_biomes(self) -> None:
        """Fill the biome store from elevation and moisture."""
        for hex in sorted(self.hexes):
            self.biome[hex] = classify(self.elevation[hex], self.moisture[hex])

    def mark_coastline(self) -> None:
        """Flag edges between an ocean hex and a land hex.

        Edges on the outer boundary are never coastline.
        """
        for edge in sorted(self.edges):
            near, far = edge.hexes()
            if near in self.hexes and far in self.hexes:
                near_ocean = self.biome[near] == Biome.OCEAN
                far_ocean = self.biome[far] == Biome.OCEAN
                self.coastline[edge] = near_ocean != far_ocean
            else:
                self.coastline[edge] = False

    def summary(self) -> MapSummary:
        counts = Counter(biome.value for biome in self.biome.values())
        return MapSummary(
            radius=self.radius,
            seed=self.seed,
            total_hexes=len(self.hexes),
            total_edges=len(self.edges),
            boundary_edges=len(boundary_edges(self.hexes, self.edges)),
            coastline_edges=sum(1 for value in self.coastline.values() if value),
            land_hexes=len(self.biome) - counts.get(Biome.OCEAN.value, 0),
            biome_counts=dict(sorted(counts.items())),
        )


def noise_layout(config: MapConfig) -> Layout:
    """Projection used to place hex centers in noise space."""
    return Layout(
        orientation=ORIENTATIONS[config.orientation],
        size=Point(config.hex_size, config.hex_size),
        origin=Point(0.0, 0.0),
    )


def generate_map(config: MapConfig, layout: Optional[Layout] = None) -> GameMap:
    """Build and classify a complete map.

    Phases run strictly in order, each a full pass before the next:
    region, edges, noise sampling, biome classification, coastline.
    """
    if layout is None:
        layout = noise_layout(config)

    logger.info("Generating map: radius=%d seed=%d", config.radius, config.seed)

    hexes = build_hexagon(config.radius)
    game_map = GameMap(hexes, radius=config.radius, seed=config.seed)
    logger.info("Built region: %d hexes, %d edges", len(game_map.hexes), len(game_map.edges))

    elevation_noise = make_noise2d(derive_seed(config.seed, ELEVATION_SALT))
    moisture_noise = make_noise2d(derive_seed(config.seed, MOISTURE_SALT))
    sample_fields(
        game_map.hexes,
        layout,
        config.radius,
        elevation_noise,
        moisture_noise,
        game_map.elevation,
        game_map.moisture,
    )
    logger.info("Sampled elevation and moisture")

    game_map.classify_biomes()
    logger.info("Classified biomes")

    game_map.mark_coastline()
    logger.info(
        "Marked coastline: %d edges",
        sum(1 for value in game_map.coastline.values() if value),
    )

    return game_map
