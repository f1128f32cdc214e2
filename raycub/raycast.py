"""Grid ray casting: finding wall hits and the size of wall columns."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from raycub.geometry import Point, distance, update_radian
from raycub.mapfile import CLOSED_DOOR, OPENED_DOOR, WALL

_STOP_CHARS = WALL + CLOSED_DOOR + OPENED_DOOR
_EPSILON = 0.00000000001


@dataclass(frozen=True)
class ViewSettings:
    """Screen size and field of view used to size wall columns."""

    width: float
    height: float
    fov: float
    rot_speed: float


@dataclass
class RenderColumn:
    """One cast ray and the wall slice it produces."""

    degree: float
    angle: float
    wall_hit: Point
    direction: str
    distance: float
    width: float
    height: float
    wall_height: float


def _floor(value: float) -> float:
    return float(math.floor(value)) if math.isfinite(value) else value


def _div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _tan(angle: float) -> float:
    return _div(math.sin(angle), math.cos(angle))


def _vertical_step(pos: Point, angle: float) -> Point:
    x = _floor(pos.x)
    if math.pi / 2 < angle < 3 * math.pi / 2:
        x += 1
    else:
        x -= _EPSILON
    return Point(x, pos.y + _tan(angle) * (x - pos.x))


def _horizontal_step(pos: Point, angle: float) -> Point:
    y = _floor(pos.y)
    if angle > math.pi:
        y += 1
    else:
        y -= _EPSILON
    return Point(pos.x + _div(y - pos.y, _tan(angle)), y)


def _intersection(
    grid: Sequence[Sequence[str]],
    start: Point,
    angle: float,
    step: Callable[[Point, float], Point],
) -> Point:
    height = len(grid)
    current = step(start, angle)
    following = step(current, angle)
    dx = following.x - current.x
    dy = following.y - current.y
    while (
        (current.x or current.y)
        and current.x > 0
        and current.y > 0
        and current.y < height
        and current.x < len(grid[int(current.y)])
        and grid[int(current.y)][int(current.x)] not in _STOP_CHARS
    ):
        current = Point(current.x + dx, current.y + dy)
    return current


def wall_hit(
    grid: Sequence[Sequence[str]], pos: Point, angle: float
) -> tuple[Point, str]:
    """Cast a ray and return the first blocking point and its side.

    The side is ``'h'`` when a horizontal grid line was hit first and
    ``'v'`` for a vertical one. Walls and doors, open or closed, stop a ray.
    """
    horizontal = _intersection(grid, pos, angle, _horizontal_step)
    vertical = _intersection(grid, pos, angle, _vertical_step)
    if distance(pos, horizontal) < distance(pos, vertical):
        return horizontal, "h"
    return vertical, "v"


def wall_dimension(
    grid: Sequence[Sequence[str]],
    player_pos: Point,
    player_angle: float,
    pos: Point,
    angle: float,
    degree: float,
    view: ViewSettings,
) -> RenderColumn:
    """Cast one ray from ``pos`` and size the wall slice it hits.

    The distance is measured from the player and corrected for the angle
    between the ray and the view direction; the drawn height is clamped to
    the screen height while ``wall_height`` keeps the full value.
    """
    hit, direction = wall_hit(grid, pos, angle)
    dist = distance(player_pos, hit) * math.cos(update_radian(player_angle, -angle))
    width = view.width / (view.fov / view.rot_speed)
    wall_height = view.height / dist if dist > 0 else math.inf
    height = min(wall_height, view.height)
    return RenderColumn(
        degree=degree,
        angle=angle,
        wall_hit=hit,
        direction=direction,
        distance=dist,
        width=width,
        height=height,
        wall_height=wall_height,
    )