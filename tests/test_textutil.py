import io

import pytest

from raycub.textutil import atoi, has_cub_extension, is_number, read_lines, split


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -17abc", -17),
        ("\t\n+8", 8),
        ("255,", 255),
        ("abc", 0),
        ("", 0),
    ],
)
def test_atoi_parses_leading_integer(text, expected):
    assert atoi(text) == expected


def test_atoi_rejects_multiple_signs():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("4294967296") == 0
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_fields():
    assert split("a,b,,c", ",") == ["a", "b", "c"]
    assert split("  NO   path.xpm ", " ") == ["NO", "path.xpm"]
    assert split(",,,", ",") == []


def test_split_round_trip_without_empty_fields():
    words = ["NO", "textures/wall.xpm", "x"]
    assert split(" ".join(words), " ") == words


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.cub", True),
        (".cub", True),
        ("cub", False),
        ("level.cub.txt", False),
        ("level.CUB", False),
    ],
)
def test_has_cub_extension(path, expected):
    assert has_cub_extension(path) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("0123", True), ("", True), ("12a", False), ("-1", False), (" 1", False), ("١٢", False)],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_read_lines_strips_newlines():
    assert list(read_lines(io.StringIO("a\nb\n"))) == ["a", "b"]


def test_read_lines_keeps_last_line_without_newline():
    assert list(read_lines(io.StringIO("a\nb"))) == ["a", "b"]


def test_read_lines_keeps_empty_lines():
    assert list(read_lines(io.StringIO("a\n\nb\n"))) == ["a", "", "b"]
    assert list(read_lines(io.StringIO("\n"))) == [""]


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_read_lines_long_lines_round_trip():
    lines = ["1" * 500, "", " 0N0 " * 100, "end"]
    assert list(read_lines(io.StringIO("\n".join(lines) + "\n"))) == lines