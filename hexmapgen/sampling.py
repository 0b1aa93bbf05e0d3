"""Noise sampling stage: elevation and moisture per hex."""

import logging
from typing import Iterable

from hexmapgen.attributes import AttributeStore
from hexmapgen.hex_coords import Hex
from hexmapgen.layout import Layout
from hexmapgen.noise import NoiseField


logger = logging.getLogger(__name__)


def sample_fields(
    hexes: Iterable[Hex],
    layout: Layout,
    radius: int,
    elevation_noise: NoiseField,
    moisture_noise: NoiseField,
    elevation: AttributeStore[Hex, float],
    moisture: AttributeStore[Hex, float],
) -> None:
    """Sample both noise fields at every hex center.

    The projected center is divided by the region radius so the map spans
    roughly the same noise area regardless of its size.

    Args:
        hexes: Cells to sample
        layout: Projection from hex to plane coordinates
        radius: Region radius used to scale coordinates (must be > 0)
        elevation_noise: Field written into `elevation`
        moisture_noise: Field written into `moisture`, seeded independently
        elevation: Store receiving elevation values
        moisture: Store receiving moisture values

    Raises:
        ValueError: If radius is not positive
    """
    if radius <= 0:
        raise ValueError(f"radius must be positive to scale noise coordinates, got {radius}")

    scale = 1.0 / radius
    count = 0
    for hex in sorted(hexes):
        point = layout.hex_to_pixel(hex)
        x = point.x * scale
        y = point.y * scale
        elevation[hex] = elevation_noise(x, y)
        moisture[hex] = moisture_noise(x, y)
        count += 1

    logger.debug("Sampled %d hexes at scale 1/%d", count, radius)
