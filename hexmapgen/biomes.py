"""Biome classification from elevation and moisture."""

from enum import Enum


class Biome(str, Enum):
    OCEAN = "ocean"
    # Cold (high elevation)
    SNOW = "snow"
    TUNDRA = "tundra"
    BARE = "bare"
    SCORCHED = "scorched"
    # Cool
    TAIGA = "taiga"
    SHRUBLAND = "shrubland"
    TEMPERATE_DESERT = "temperate_desert"
    # Temperate
    TEMPERATE_RAIN_FOREST = "temperate_rain_forest"
    TEMPERATE_DECIDUOUS_FOREST = "temperate_deciduous_forest"
    GRASSLAND = "grassland"
    # Warm (low elevation)
    TROPICAL_RAIN_FOREST = "tropical_rain_forest"
    TROPICAL_SEASONAL_FOREST = "tropical_seasonal_forest"
    SUBTROPICAL_DESERT = "subtropical_desert"


BIOME_COLORS: dict[Biome, str] = {
    Biome.OCEAN: "#44447a",
    Biome.SNOW: "#ffffff",
    Biome.TUNDRA: "#bbbbaa",
    Biome.BARE: "#888888",
    Biome.SCORCHED: "#555555",
    Biome.TAIGA: "#99aa77",
    Biome.SHRUBLAND: "#889977",
    Biome.TEMPERATE_DESERT: "#c9d29b",
    Biome.TEMPERATE_RAIN_FOREST: "#448855",
    Biome.TEMPERATE_DECIDUOUS_FOREST: "#679459",
    Biome.GRASSLAND: "#88aa55",
    Biome.TROPICAL_RAIN_FOREST: "#337755",
    Biome.TROPICAL_SEASONAL_FOREST: "#559944",
    Biome.SUBTROPICAL_DESERT: "#d2b98b",
}


def classify(elevation: float, moisture: float) -> Biome:
    """Pick a biome for an (elevation, moisture) pair.

    Anything below sea level (0.0) is ocean. Above it, temperature falls
    as elevation rises (temperature = 1 - elevation) and the temperature
    band plus moisture pick the biome. All comparisons are strict, so a
    value exactly on a threshold falls through to the next branch.
    Inputs outside [-1, 1] go through the same thresholds.
    """
    if elevation < 0.0:
        return Biome.OCEAN

    temperature = 1.0 - elevation

    if temperature < 0.2:
        if moisture > 0.50:
            return Biome.SNOW
        if moisture > 0.33:
            return Biome.TUNDRA
        if moisture > 0.16:
            return Biome.BARE
        return Biome.SCORCHED

    if temperature < 0.4:
        if moisture > 0.66:
            return Biome.TAIGA
        if moisture > 0.33:
            return Biome.SHRUBLAND
        return Biome.TEMPERATE_DESERT

    if temperature < 0.7:
        if moisture > 0.83:
            return Biome.TEMPERATE_RAIN_FOREST
        if moisture > 0.50:
            return Biome.TEMPERATE_DECIDUOUS_FOREST
        if moisture > 0.16:
            return Biome.GRASSLAND
        return Biome.TEMPERATE_DESERT

    if moisture > 0.66:
        return Biome.TROPICAL_RAIN_FOREST
    if moisture > 0.33:
        return Biome.TROPICAL_SEASONAL_FOREST
    if moisture > 0.16:
        return Biome.GRASSLAND
    return Biome.SUBTROPICAL_DESERT
