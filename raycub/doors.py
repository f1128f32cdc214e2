"""Opening, closing and animating doors."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from raycub.geometry import distance
from raycub.mapfile import CLOSED_DOOR, OPENED_DOOR
from raycub.objects import MapObject, ObjectList
from raycub.player import Player
from raycub.raycast import wall_hit

_DOORS = CLOSED_DOOR + OPENED_DOOR


def _cell(grid: Sequence[Sequence[str]], x: float, y: float) -> str:
    if not (0 <= y < len(grid)):
        return ""
    row = grid[int(y)]
    if not (0 <= x < len(row)):
        return ""
    return row[int(x)]


def animate_doors(
    grid: Sequence[Sequence[str]],
    doors: ObjectList,
    door_frames: int,
    frame_step: float,
) -> None:
    """Advance every animating door one step.

    Open doors play forward up to the last frame; closed doors play back
    and stop animating once they reach the first frame.
    """
    for door in doors:
        if grid[int(door.y)][int(door.x)] == OPENED_DOOR:
            new_frame = door.frame + frame_step
        else:
            new_frame = door.frame - frame_step
        if int(new_frame) < door_frames:
            door.frame = new_frame
        if door.frame <= 0:
            doors.remove(door.x, door.y)


def toggle_door(
    grid: Sequence[MutableSequence[str]],
    doors: ObjectList,
    player: Player,
    door_frames: int,
    reach: float,
) -> bool:
    """Open or close the door the player faces; return whether it changed.

    A closed door opens only when it is not animating; an open door
    closes only once its opening animation has finished.
    """
    hit, _ = wall_hit(grid, player.pos, player.angle)
    cell = _cell(grid, hit.x, hit.y)
    if not cell or cell not in _DOORS:
        return False
    if distance(player.pos, hit) > reach:
        return False
    x, y = int(hit.x), int(hit.y)
    if cell == CLOSED_DOOR and doors.find(hit.x, hit.y) == 0:
        doors.add(MapObject(x, y, 0))
        grid[y][x] = OPENED_DOOR
        return True
    if cell == OPENED_DOOR and doors.find(hit.x, hit.y) == door_frames - 1:
        grid[y][x] = CLOSED_DOOR
        return True
    return False