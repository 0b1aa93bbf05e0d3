"""Hex to pixel projection."""

import math
from dataclasses import dataclass
from typing import NamedTuple

from hexmapgen.hex_coords import Hex

SQRT3 = math.sqrt(3.0)


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Orientation:
    """Forward (f) and inverse (b) matrices plus the first corner angle."""
    f0: float
    f1: float
    f2: float
    f3: float
    b0: float
    b1: float
    b2: float
    b3: float
    start_angle: float  # in multiples of 60 degrees


POINTY = Orientation(
    SQRT3, SQRT3 / 2.0, 0.0, 3.0 / 2.0,
    SQRT3 / 3.0, -1.0 / 3.0, 0.0, 2.0 / 3.0,
    0.5,
)
FLAT = Orientation(
    3.0 / 2.0, 0.0, SQRT3 / 2.0, SQRT3,
    2.0 / 3.0, 0.0, -1.0 / 3.0, SQRT3 / 3.0,
    0.0,
)

ORIENTATIONS: dict[str, Orientation] = {
    "pointy": POINTY,
    "flat": FLAT,
}


def axial_round(q: float, r: float) -> Hex:
    """Round fractional axial coordinates to nearest hex."""
    s = -q - r
    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return Hex(int(rq), int(rr))


@dataclass(frozen=True)
class Layout:
    """Projection between axial hex coordinates and a 2D plane.

    `size` is the hex radius along each axis and `origin` is the pixel
    position of Hex(0, 0).
    """

    orientation: Orientation = POINTY
    size: Point = Point(1.0, 1.0)
    origin: Point = Point(0.0, 0.0)

    def hex_to_pixel(self, hex: Hex) -> Point:
        m = self.orientation
        x = (m.f0 * hex.q + m.f1 * hex.r) * self.size.x
        y = (m.f2 * hex.q + m.f3 * hex.r) * self.size.y
        return Point(x + self.origin.x, y + self.origin.y)

    def pixel_to_hex(self, point: Point) -> Hex:
        m = self.orientation
        px = (point.x - self.origin.x) / self.size.x
        py = (point.y - self.origin.y) / self.size.y
        q = m.b0 * px + m.b1 * py
        r = m.b2 * px + m.b3 * py
        return axial_round(q, r)

    def corner_offset(self, corner: int) -> Point:
        angle = 2.0 * math.pi * (self.orientation.start_angle - corner) / 6.0
        return Point(self.size.x * math.cos(angle), self.size.y * math.sin(angle))

    def polygon_corners(self, hex: Hex) -> list[Point]:
        """The 6 corner points of a hex, in corner order."""
        center = self.hex_to_pixel(hex)
        corners = []
        for corner in range(6):
            offset = self.corner_offset(corner)
            corners.append(Point(center.x + offset.x, center.y + offset.y))
        return corners
