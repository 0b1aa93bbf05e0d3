"""Axial hex coordinates.

Direction numbering (counter-clockwise from East, pointy-top):
    0: E   (+1,  0)
    1: NE  (+1, -1)
    2: NW  ( 0, -1)
    3: W   (-1,  0)
    4: SW  (-1, +1)
    5: SE  ( 0, +1)

Direction arithmetic is always taken modulo 6, so -1 is SE and 7 is NE.
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple


class HexOffset(NamedTuple):
    """Offset for hex neighbor lookup."""
    dq: int
    dr: int


# Neighbor offsets indexed by direction number
HEX_NEIGHBOR_OFFSETS: list[HexOffset] = [
    HexOffset(+1,  0),  # 0: E
    HexOffset(+1, -1),  # 1: NE
    HexOffset( 0, -1),  # 2: NW
    HexOffset(-1,  0),  # 3: W
    HexOffset(-1, +1),  # 4: SW
    HexOffset( 0, +1),  # 5: SE
]

# Direction names for readability
HEX_DIRECTIONS: dict[str, int] = {
    "E": 0,
    "NE": 1,
    "NW": 2,
    "W": 3,
    "SW": 4,
    "SE": 5,
}


def normalize_direction(direction: int) -> int:
    """Wrap any integer direction into 0-5."""
    return direction % 6


def opposite_direction(direction: int) -> int:
    """Direction pointing back across the same edge.

    Direction 0 (E) opposite is 3 (W), etc.
    """
    return (direction + 3) % 6


@dataclass(frozen=True, order=True)
class Hex:
    """A hex cell in axial coordinates.

    Only q and r are stored; s = -q - r is derived. Equality, hashing and
    ordering are all by (q, r).
    """

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: "Hex") -> "Hex":
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.q + other.q, self.r + other.r)

    def __sub__(self, other: "Hex") -> "Hex":
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.q - other.q, self.r - other.r)

    def __str__(self) -> str:
        return f"{self.q},{self.r}"

    def neighbor(self, direction: int) -> "Hex":
        """Adjacent hex in the given direction (any integer, wrapped mod 6)."""
        offset = HEX_NEIGHBOR_OFFSETS[normalize_direction(direction)]
        return Hex(self.q + offset.dq, self.r + offset.dr)

    def neighbors(self) -> list["Hex"]:
        """All 6 neighbors in direction order."""
        return [self.neighbor(direction) for direction in range(6)]

    def length(self) -> int:
        """Distance from the origin hex."""
        return max(abs(self.q), abs(self.r), abs(self.s))

    def distance_to(self, other: "Hex") -> int:
        """Calculate hex distance using axial coordinates."""
        return (self - other).length()


def neighbor(hex: Hex, direction: int) -> Hex:
    """Get the hex adjacent to `hex` across the given direction."""
    return hex.neighbor(direction)


def iter_neighbors(hex: Hex) -> Iterator[tuple[Hex, int]]:
    """Yield (neighbor, direction_from_hex) for all 6 directions."""
    for direction in range(6):
        yield hex.neighbor(direction), direction


def distance(a: Hex, b: Hex) -> int:
    """Hex distance between two cells."""
    return a.distance_to(b)
