import math

from raycub.doors import animate_doors, toggle_door
from raycub.geometry import Point
from raycub.objects import MapObject, ObjectList
from raycub.player import Player

FRAMES = 4
REACH = 2.0


def make_setup():
    grid = [list("1111111"), list("1002001"), list("1111111")]
    player = Player(pos=Point(1.5, 1.5), angle=math.pi)
    return grid, ObjectList(), player


def test_open_closed_door():
    grid, doors, player = make_setup()
    assert toggle_door(grid, doors, player, FRAMES, REACH) is True
    assert grid[1][3] == "3"
    assert len(doors) == 1
    assert doors.find(3, 1) == 0


def test_door_out_of_reach_is_untouched():
    grid, doors, player = make_setup()
    assert toggle_door(grid, doors, player, FRAMES, 1.0) is False
    assert grid[1][3] == "2"
    assert len(doors) == 0


def test_facing_a_wall_does_nothing():
    grid, doors, player = make_setup()
    player.angle = 0.0
    assert toggle_door(grid, doors, player, FRAMES, REACH) is False
    assert grid[1][3] == "2"


def test_cannot_close_while_opening():
    grid, doors, player = make_setup()
    toggle_door(grid, doors, player, FRAMES, REACH)
    assert toggle_door(grid, doors, player, FRAMES, REACH) is False
    assert grid[1][3] == "3"


def test_full_open_and_close_cycle():
    grid, doors, player = make_setup()
    toggle_door(grid, doors, player, FRAMES, REACH)
    for _ in range(FRAMES + 2):
        animate_doors(grid, doors, FRAMES, 1.0)
    assert doors.find(3, 1) == FRAMES - 1
    assert toggle_door(grid, doors, player, FRAMES, REACH) is True
    assert grid[1][3] == "2"
    animate_doors(grid, doors, FRAMES, 1.0)
    assert doors.find(3, 1) == FRAMES - 2
    assert toggle_door(grid, doors, player, FRAMES, REACH) is False
    for _ in range(FRAMES):
        animate_doors(grid, doors, FRAMES, 1.0)
    assert len(doors) == 0


def test_open_door_frame_never_exceeds_last():
    grid = [list("1111111"), list("1003001"), list("1111111")]
    doors = ObjectList()
    doors.add(MapObject(3, 1, 0))
    for _ in range(10):
        animate_doors(grid, doors, FRAMES, 0.5)
        assert doors.find(3, 1) <= FRAMES - 1
    assert doors.find(3, 1) == FRAMES - 1