"""Reading and validating ``.cub`` scene files."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from raycub.geometry import Point, create_color
from raycub.objects import MapObject, ObjectList
from raycub.textutil import atoi, has_cub_extension, is_number, read_lines, split

MAP_CHARS = " 0123NSEWC"
PLAYER_CHARS = "NSEW"
WALL = "1"
EMPTY_SPACE = "0"
CLOSED_DOOR = "2"
OPENED_DOOR = "3"
COLLECTIBLE = "C"

_WALKABLE = "0NSEWC"
_CHECKED = " 023NWSEC"
_SINGLE_VALUE_KEYS = ("NO", "SO", "WE", "EA", "F", "C")
_FRAME_KEYS = ("CO", "DO")
_PLAYER_ANGLES = {
    "N": math.pi / 2,
    "S": math.pi / 2 * 3.0,
    "W": 0.0,
    "E": math.pi,
}


class CubError(ValueError):
    """Raised when a scene file is malformed."""


@dataclass
class SceneConfig:
    """Textures and colours declared in the header of a scene file."""

    north: Path | None = None
    south: Path | None = None
    west: Path | None = None
    east: Path | None = None
    floor: int | None = None
    ceiling: int | None = None
    collectible_frames: list[Path] = field(default_factory=list)
    door_frames: list[Path] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """Whether every texture, sprite and colour has been declared."""
        return (
            self.north is not None
            and self.south is not None
            and self.west is not None
            and self.east is not None
            and bool(self.collectible_frames)
            and bool(self.door_frames)
            and self.floor is not None
            and self.ceiling is not None
        )


@dataclass
class Scene:
    """A fully loaded scene: configuration, grid and starting state."""

    config: SceneConfig
    grid: list[list[str]]
    player_pos: Point
    player_angle: float
    collectibles: ObjectList
    doors: ObjectList


def parse_color(text: str) -> int:
    """Parse an ``R,G,B`` triple into a packed colour value."""
    parts = split(text, ",")
    if len(parts) != 3:
        raise CubError(f"Invalid color format [{text}].")
    if not all(is_number(part) for part in parts):
        raise CubError(f"Invalid color values [{text}].")
    red, green, blue = (atoi(part) for part in parts)
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise CubError(f"Invalid color values [{text}].")
    return create_color(0, red, green, blue)


def _texture(path_text: str, base_dir: str | Path | None) -> Path:
    if base_dir is None:
        return Path(path_text)
    path = Path(base_dir, path_text)
    if not path.is_file():
        raise CubError(f"Invalid texture path : [{path_text}].")
    return path


def _check_format(parts: list[str]) -> None:
    key = parts[0]
    if (key in _SINGLE_VALUE_KEYS and len(parts) != 2) or (
        key in _FRAME_KEYS and len(parts) < 2
    ):
        raise CubError(f"Invalid texture format [{key}].")


def _assign(
    config: SceneConfig, parts: list[str], base_dir: str | Path | None
) -> None:
    key = parts[0]
    if key == "NO":
        config.north = _texture(parts[1], base_dir)
    elif key == "SO":
        config.south = _texture(parts[1], base_dir)
    elif key == "WE":
        config.west = _texture(parts[1], base_dir)
    elif key == "EA":
        config.east = _texture(parts[1], base_dir)
    elif key == "F":
        config.floor = parse_color(parts[1])
    elif key == "C":
        config.ceiling = parse_color(parts[1])
    elif key == "CO":
        config.collectible_frames = [_texture(p, base_dir) for p in parts[1:]]
    elif key == "DO":
        config.door_frames = [_texture(p, base_dir) for p in parts[1:]]
    else:
        raise CubError(f"Invalid texture information [{key}].")


def parse_header(
    lines: Iterable[str], base_dir: str | Path | None = None
) -> SceneConfig:
    """Read header lines until every element has been declared.

    When ``lines`` is an iterator, it is left positioned just after the
    last header line. Texture paths are resolved against ``base_dir`` and
    must name existing files; with ``base_dir`` of None they are kept as
    given and not checked.
    """
    config = SceneConfig()
    iterator = iter(lines)
    while not config.is_complete:
        line = next(iterator, None)
        if line is None:
            raise CubError("Invalid map. Missing textures.")
        if not line:
            continue
        parts = split(line, " ")
        if not parts:
            raise CubError("Invalid texture information [].")
        _check_format(parts)
        _assign(config, parts, base_dir)
    return config


def scan_map(lines: Iterable[str]) -> list[str]:
    """Collect the map rows, rejecting blank lines inside the map."""
    rows: list[str] = []
    gap = False
    for line in lines:
        if line:
            if rows and gap:
                raise CubError("Invalid map: empty line inside the map.")
            rows.append(line)
        elif rows:
            gap = True
    if not rows:
        raise CubError("Invalid map.")
    return rows


def check_map(grid: Sequence[Sequence[str]]) -> None:
    """Check that only known characters appear and there is one player."""
    players = 0
    for row in grid:
        for char in row:
            if char not in MAP_CHARS:
                raise CubError("Invalid map: invalid component.")
            if char in PLAYER_CHARS:
                players += 1
    if players > 1:
        raise CubError("Invalid map: too many players.")
    if players < 1:
        raise CubError("Invalid map: missing player.")


def _at(grid: Sequence[Sequence[str]], i: int, j: int) -> str:
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return ""


def _is_walkable(char: str) -> bool:
    return bool(char) and char in _WALKABLE


def _is_solid(char: str) -> bool:
    return char not in ("", " ")


def _walkable_neighbour(grid: Sequence[Sequence[str]], i: int, j: int) -> bool:
    return (
        _is_walkable(_at(grid, i, j + 1))
        or (j - 1 > 0 and _is_walkable(_at(grid, i, j - 1)))
        or _is_walkable(_at(grid, i + 1, j))
        or (i - 1 > 0 and _is_walkable(_at(grid, i - 1, j)))
    )


def _touches_void(grid: Sequence[Sequence[str]], i: int, j: int) -> bool:
    return (
        not _is_solid(_at(grid, i, j + 1))
        or not _is_solid(_at(grid, i, j - 1))
        or not _is_solid(_at(grid, i + 1, j))
        or not _is_solid(_at(grid, i - 1, j))
    )


def _door_between_walls(grid: Sequence[Sequence[str]], i: int, j: int) -> bool:
    right, left = _at(grid, i, j + 1), _at(grid, i, j - 1)
    down, up = _at(grid, i + 1, j), _at(grid, i - 1, j)
    horizontal = (
        right == WALL
        and j - 1 > 0
        and left == WALL
        and _is_solid(down)
        and i - 1 > 0
        and _is_solid(up)
    )
    vertical = (
        down == WALL
        and i - 1 > 0
        and up == WALL
        and _is_solid(right)
        and j - 1 > 0
        and _is_solid(left)
    )
    return horizontal or vertical


def check_map_closed(grid: Sequence[Sequence[str]]) -> None:
    """Check that the map is enclosed by walls and doors sit between walls."""
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char not in _CHECKED:
                continue
            if char == " ":
                if _walkable_neighbour(grid, i, j):
                    raise CubError("Invalid map: misplaced space ' '.")
            elif char in _WALKABLE:
                if _touches_void(grid, i, j):
                    if char == EMPTY_SPACE:
                        raise CubError("Invalid map: misplaced space '0'.")
                    raise CubError("Invalid map: misplaced component.")
            elif not _door_between_walls(grid, i, j):
                raise CubError("Invalid map: misplaced wall.")


def load_scene(path: str | Path, offset: float) -> Scene:
    """Load and validate a scene file.

    Texture paths are resolved relative to the current directory. The
    player and objects are placed ``offset`` into their cells.
    """
    name = str(path)
    if not has_cub_extension(name):
        raise CubError("Invalid file extension, expected <file.cub>.")
    try:
        stream = open(name, encoding="utf-8")
    except OSError as exc:
        raise CubError(f"Couldn't open <{name}> file.") from exc
    with stream:
        lines = read_lines(stream)
        config = parse_header(lines, "")
        rows = scan_map(lines)
    check_map(rows)
    check_map_closed(rows)

    grid = [list(row) for row in rows]
    player_pos = Point()
    player_angle = 0.0
    collectibles = ObjectList()
    doors = ObjectList()
    door_frames = len(config.door_frames)
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char in PLAYER_CHARS:
                player_pos = Point(x + offset, y + offset)
                player_angle = _PLAYER_ANGLES[char]
            elif char == COLLECTIBLE:
                collectibles.add(MapObject(x, y, 1))
            elif char == OPENED_DOOR:
                doors.add(MapObject(x, y, door_frames - 1))
    return Scene(config, grid, player_pos, player_angle, collectibles, doors)