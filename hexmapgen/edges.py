"""Edges between adjacent hexes.

Every physical edge can be described from either side: (h, d) or
(neighbor(h, d), d + 3). Edges are stored in a canonical form where the
direction is always 0, 1 or 2; directions 3, 4, 5 are rewritten onto the
neighbor across that edge.
"""

from dataclasses import dataclass

from hexmapgen.hex_coords import Hex, normalize_direction


def canonicalize(hex: Hex, direction: int) -> tuple[Hex, int]:
    """Return the canonical (hex, direction) pair for an edge.

    Accepts any integer direction, including negatives. The result
    direction is always in {0, 1, 2}. Applying this to its own output
    returns the output unchanged.
    """
    direction = normalize_direction(direction)
    if direction >= 3:
        hex = hex.neighbor(direction)
        direction -= 3
    return hex, direction


@dataclass(frozen=True, order=True)
class Edge:
    """The undirected boundary between two adjacent hexes.

    Construction canonicalizes, so Edge(h, 3) == Edge(h.neighbor(3), 0).
    """

    hex: Hex
    direction: int

    def __post_init__(self):
        hex, direction = canonicalize(self.hex, self.direction)
        object.__setattr__(self, "hex", hex)
        object.__setattr__(self, "direction", direction)

    def __str__(self) -> str:
        return f"edge:{self.hex}:dir:{self.direction}"

    def hexes(self) -> tuple[Hex, Hex]:
        """The two hexes sharing this edge (canonical side first)."""
        return self.hex, self.hex.neighbor(self.direction)

    def touches(self, hex: Hex) -> bool:
        return hex in self.hexes()

    def other_side(self, hex: Hex) -> Hex:
        """Return the hex across the edge from `hex`."""
        near, far = self.hexes()
        if hex == near:
            return far
        if hex == far:
            return near
        raise ValueError(f"{hex} is not on either side of {self}")


def hex_edges(hex: Hex) -> list[Edge]:
    """All 6 edges bounding a hex, in direction order."""
    return [Edge(hex, direction) for direction in range(6)]
