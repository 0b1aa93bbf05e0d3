"""Region shapes and derived edge sets."""

from typing import Iterable

from hexmapgen.edges import Edge, hex_edges
from hexmapgen.hex_coords import Hex


def hexagon_size(radius: int) -> int:
    """Number of hexes in a hexagon-shaped region of the given radius."""
    return 3 * radius * radius + 3 * radius + 1


def build_hexagon(radius: int) -> frozenset[Hex]:
    """Build a hexagon-shaped region centered on the origin.

    Every (q, r) with |q|, |r|, |q + r| <= radius is generated exactly once.

    Raises:
        ValueError: If radius is negative
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    results = set()
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            results.add(Hex(q, r))
    return frozenset(results)


def derive_edges(hexes: Iterable[Hex]) -> frozenset[Edge]:
    """Collect every edge touching the given hexes, shared edges once.

    Edges on the outer boundary are included even though the hex on their
    far side is not part of the region.
    """
    edges = set()
    for hex in hexes:
        edges.update(hex_edges(hex))
    return frozenset(edges)


def boundary_edges(hexes: frozenset[Hex], edges: Iterable[Edge]) -> list[Edge]:
    """Edges with exactly one side inside the region."""
    result = []
    for edge in edges:
        near, far = edge.hexes()
        if (near in hexes) != (far in hexes):
            result.append(edge)
    return result
