import math

import pytest

from raycub.geometry import (
    Point,
    create_color,
    deg_to_rad,
    distance,
    int_max,
    update_radian,
)


def test_distance_pythagorean_triple():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)


def test_distance_is_symmetric_and_zero_on_self():
    a, b = Point(1.5, -2.0), Point(-4.25, 7.5)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, a) == 0.0


def test_distance_along_axis():
    assert distance(Point(2.0, 1.0), Point(2.0, 6.5)) == pytest.approx(5.5)


@pytest.mark.parametrize("r, g, b", [(194, 187, 181), (0, 0, 0), (255, 255, 255), (1, 2, 3)])
def test_create_color_channels_round_trip(r, g, b):
    color = create_color(0, r, g, b)
    assert (color >> 16) & 0xFF == r
    assert (color >> 8) & 0xFF == g
    assert color & 0xFF == b


def test_create_color_opaque_black_is_negative():
    assert create_color(255, 0, 0, 0) == -16777216
    assert create_color(255, 0, 0, 0) & 0xFFFFFFFF == 0xFF000000


@pytest.mark.parametrize(
    "x, y, expected",
    [(2.7, 1.0, 2), (1.0, 2.7, 2), (0, 5.9, 5), (-0.5, -3.2, 0)],
)
def test_int_max_truncates(x, y, expected):
    assert int_max(x, y) == expected


@pytest.mark.parametrize("angle", [0.0, 1.0, math.pi, 6.0])
def test_update_radian_zero_increment_is_identity(angle):
    assert update_radian(angle, 0.0) == angle


@pytest.mark.parametrize("angle", [0.0, 0.3, 3.0, 6.2])
@pytest.mark.parametrize("inc", [-1.0, -0.1, 0.1, 1.0, math.pi])
def test_update_radian_stays_in_range(angle, inc):
    result = update_radian(angle, inc)
    assert 0.0 <= result <= 2 * math.pi
    assert math.cos(result) == pytest.approx(math.cos(angle + inc))
    assert math.sin(result) == pytest.approx(math.sin(angle + inc))


def test_update_radian_round_trip():
    angle = 0.2
    assert update_radian(update_radian(angle, -0.5), 0.5) == pytest.approx(angle)


def test_update_radian_wraps_only_once():
    assert update_radian(0.0, -5 * math.pi) == pytest.approx(-3 * math.pi)


def test_deg_to_rad_known_angles():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    assert deg_to_rad(90) == pytest.approx(math.pi / 2)
    assert deg_to_rad(0) == 0.0


def test_deg_to_rad_matches_math_radians():
    for degree in (30, 45, 60, 270, 360):
        assert deg_to_rad(degree) == pytest.approx(math.radians(degree))