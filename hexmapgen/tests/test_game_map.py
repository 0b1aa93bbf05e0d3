"""Tests for the map aggregate and generation pipeline."""
import logging

import pytest
from pydantic import ValidationError
from hexmapgen.attributes import MissingAttributeError
from hexmapgen.biomes import Biome, classify
from hexmapgen.game_map import GameMap, generate_map, noise_layout
from hexmapgen.hex_coords import Hex
from hexmapgen.layout import FLAT, Layout, Point
from hexmapgen.regions import build_hexagon
from hexmapgen.schemas import MapConfig


@pytest.fixture(scope="module")
def generated():
    return generate_map(MapConfig(radius=6, seed=11))


class TestGameMap:
    def test_edges_derived_on_construction(self):
        game_map = GameMap(build_hexagon(1), radius=1)
        assert len(game_map.hexes) == 7
        assert len(game_map.edges) == 30

    def test_stores_start_empty(self):
        game_map = GameMap(build_hexagon(2), radius=2)
        assert len(game_map.elevation) == 0
        assert len(game_map.moisture) == 0
        assert len(game_map.biome) == 0
        assert len(game_map.coastline) == 0

    def test_classify_before_sampling_fails(self):
        game_map = GameMap(build_hexagon(2), radius=2)
        with pytest.raises(MissingAttributeError, match="elevation"):
            game_map.classify_biomes()

    def test_coastline_before_biomes_fails(self):
        game_map = GameMap(build_hexagon(1), radius=1)
        with pytest.raises(MissingAttributeError, match="biome"):
            game_map.mark_coastline()

    def test_coastline_between_ocean_and_land(self):
        game_map = GameMap(build_hexagon(1), radius=1)
        for hex in game_map.hexes:
            # Only the east neighbor of the origin is underwater
            game_map.elevation[hex] = -0.5 if hex == Hex(1, 0) else 0.5
            game_map.moisture[hex] = 0.5
        game_map.classify_biomes()
        game_map.mark_coastline()

        coast = {edge for edge, value in game_map.coastline.items() if value}
        # Hex(1, 0) borders three region hexes: the origin, (1, -1) and (0, 1)
        assert len(coast) == 3
        assert all(edge.touches(Hex(1, 0)) for edge in coast)


class TestGenerateMap:
    def test_region_and_edges(self, generated):
        assert len(generated.hexes) == 3 * 36 + 18 + 1
        assert len(generated.edges) == 3 * len(generated.hexes) + 6 * 6 + 3

    def test_every_hex_populated(self, generated):
        for hex in generated.hexes:
            assert hex in generated.elevation
            assert hex in generated.moisture
            assert generated.biome[hex] == classify(generated.elevation[hex], generated.moisture[hex])

    def test_every_edge_has_coastline_value(self, generated):
        assert set(generated.coastline) == set(generated.edges)

    def test_coastline_invariant(self, generated):
        for edge, is_coast in generated.coastline.items():
            near, far = edge.hexes()
            if near not in generated.hexes or far not in generated.hexes:
                assert is_coast is False
                continue
            ocean = [generated.biome[hex] == Biome.OCEAN for hex in (near, far)]
            assert is_coast == (ocean[0] != ocean[1])

    def test_same_seed_is_reproducible(self, generated):
        again = generate_map(MapConfig(radius=6, seed=11))
        assert dict(again.elevation.items()) == dict(generated.elevation.items())
        assert dict(again.moisture.items()) == dict(generated.moisture.items())
        assert dict(again.biome.items()) == dict(generated.biome.items())
        assert dict(again.coastline.items()) == dict(generated.coastline.items())

    def test_different_seed_changes_elevation(self, generated):
        other = generate_map(MapConfig(radius=6, seed=12))
        assert dict(other.elevation.items()) != dict(generated.elevation.items())

    def test_elevation_and_moisture_differ(self, generated):
        assert any(generated.elevation[hex] != generated.moisture[hex] for hex in generated.hexes)

    def test_custom_layout(self):
        layout = Layout(FLAT, Point(2.0, 2.0), Point(0.0, 0.0))
        game_map = generate_map(MapConfig(radius=2, seed=1), layout=layout)
        assert len(game_map.biome) == 19

    def test_noise_layout_follows_config(self):
        layout = noise_layout(MapConfig(radius=3, orientation="flat", hex_size=2.5))
        assert layout.orientation == FLAT
        assert layout.size == Point(2.5, 2.5)

    def test_logs_phases(self, caplog):
        with caplog.at_level(logging.INFO, logger="hexmapgen.game_map"):
            generate_map(MapConfig(radius=1, seed=0))
        assert "Generating map: radius=1 seed=0" in caplog.text
        assert "Classified biomes" in caplog.text


class TestSummary:
    def test_counts(self, generated):
        summary = generated.summary()
        assert summary.radius == 6
        assert summary.seed == 11
        assert summary.total_hexes == len(generated.hexes)
        assert summary.total_edges == len(generated.edges)
        assert summary.boundary_edges == 6 * (2 * 6 + 1)
        assert sum(summary.biome_counts.values()) == summary.total_hexes
        assert summary.land_hexes == summary.total_hexes - summary.biome_counts.get("ocean", 0)
        assert summary.coastline_edges == sum(1 for v in generated.coastline.values() if v)


class TestMapConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HEXMAP_RADIUS", raising=False)
        config = MapConfig()
        assert config.radius == 14
        assert config.orientation == "pointy"

    @pytest.mark.parametrize("radius", [0, -3])
    def test_radius_must_be_positive(self, radius):
        with pytest.raises(ValidationError):
            MapConfig(radius=radius)

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            MapConfig(radius=3, sea_level=0.2)

    def test_rejects_unknown_orientation(self):
        with pytest.raises(ValidationError):
            MapConfig(orientation="diagonal")
