"""Points, angles and colour packing."""

from __future__ import annotations

import math
from dataclasses import dataclass

TWO_PI = 2 * math.pi


@dataclass
class Point:
    """A position on the map grid."""

    x: float = 0.0
    y: float = 0.0


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def create_color(transparency: int, r: int, g: int, b: int) -> int:
    """Pack channels into a signed 32-bit ARGB integer."""
    value = (transparency << 24 | r << 16 | g << 8 | b) & 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def int_max(x: float, y: float) -> int:
    """The larger of two values, truncated towards zero."""
    return int(x) if x > y else int(y)


def update_radian(radian: float, inc: float) -> float:
    """Add an increment to an angle, wrapping once into ``[0, 2π]``."""
    radian += inc
    if radian > TWO_PI:
        radian -= TWO_PI
    elif radian < 0:
        radian += TWO_PI
    return radian


def deg_to_rad(degree: float) -> float:
    """Convert degrees to radians."""
    return (degree * math.pi) / 180.0