"""Pydantic schemas for map configuration and reports."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from hexmapgen import config


class MapConfig(BaseModel):
    """Inputs for generating one map."""

    model_config = ConfigDict(extra="forbid", validate_default=True)

    radius: int = Field(default_factory=config.default_radius, ge=1, description="Hexagon radius in hexes")
    seed: int = Field(default_factory=config.default_seed, ge=0, description="Seed for both noise fields")
    orientation: Literal["pointy", "flat"] = Field(default=config.DEFAULT_ORIENTATION, description="Noise projection orientation")
    hex_size: float = Field(default=config.DEFAULT_HEX_SIZE, gt=0.0, description="Hex size used by the noise projection")


class MapSummary(BaseModel):
    """Counts describing a generated map."""

    radius: int
    seed: int
    total_hexes: int = 0
    total_edges: int = 0
    boundary_edges: int = 0
    coastline_edges: int = 0
    land_hexes: int = 0
    biome_counts: dict[str, int] = Field(default_factory=dict)
