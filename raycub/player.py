"""Player state and movement through the grid."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field

from raycub.geometry import Point, update_radian
from raycub.mapfile import CLOSED_DOOR, COLLECTIBLE, EMPTY_SPACE, WALL
from raycub.objects import ObjectList

_BLOCKING = WALL + CLOSED_DOOR


@dataclass
class Player:
    """Position, view angle and the current movement input."""

    pos: Point = field(default_factory=Point)
    angle: float = 0.0
    direction: Point = field(default_factory=Point)
    move: Point = field(default_factory=Point)
    rotate: int = 0

    def update_direction(self, rot_speed: float) -> None:
        """Apply rotation input and work out the unit movement vector."""
        if self.rotate:
            self.angle = update_radian(self.angle, self.rotate * rot_speed)
        angle = self.angle
        if self.move.y == -1:
            angle = update_radian(angle, math.pi)
        elif self.move.x:
            angle = update_radian(angle, -self.move.x * math.pi / 2)
        if self.move.x and self.move.y:
            angle = update_radian(angle, self.move.x * math.pi / 4)
        self.direction = Point(math.cos(angle), math.sin(angle))


def _cell(grid: Sequence[Sequence[str]], x: float, y: float) -> str:
    row, col = int(y), int(x)
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def _blocked(grid: Sequence[Sequence[str]], x: float, y: float) -> bool:
    cell = _cell(grid, x, y)
    return cell == "" or cell in _BLOCKING


def move_player(
    player: Player,
    grid: Sequence[MutableSequence[str]],
    collectibles: ObjectList,
    speed: float,
    rot_speed: float,
) -> None:
    """Move the player one step, sliding along walls and picking up items."""
    player.update_direction(rot_speed)
    if not int(player.move.x) and not int(player.move.y):
        return
    new_x = player.pos.x + player.direction.x * speed
    if not _blocked(grid, new_x, player.pos.y):
        player.pos.x = new_x
    new_y = player.pos.y + player.direction.y * speed
    if not _blocked(grid, player.pos.x, new_y):
        player.pos.y = new_y
    if _cell(grid, player.pos.x, player.pos.y) == COLLECTIBLE:
        grid[int(player.pos.y)][int(player.pos.x)] = EMPTY_SPACE
        collectibles.remove(player.pos.x, player.pos.y)