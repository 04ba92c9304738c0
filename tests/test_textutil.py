import io

import pytest

from cubcaster.errors import MapError
from cubcaster.textutil import (
    count_commas,
    is_all_whitespace,
    iter_lines,
    parse_channel,
    parse_rgb,
)


def test_iter_lines_strips_newlines():
    stream = io.StringIO("NO ./a.png\n\n111\n")
    assert list(iter_lines(stream)) == ["NO ./a.png", "", "111"]


def test_iter_lines_drops_unterminated_tail():
    stream = io.StringIO("first\nsecond")
    assert list(iter_lines(stream)) == ["first"]


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.StringIO(""))) == []


@pytest.mark.parametrize("text", ["", " ", "\t\n\v\f\r "])
def test_is_all_whitespace_true(text):
    assert is_all_whitespace(text) is True


@pytest.mark.parametrize("text", ["a", "  x  ", "\t1"])
def test_is_all_whitespace_false(text):
    assert is_all_whitespace(text) is False


@pytest.mark.parametrize("text", ["0", "7", "42", "255", "007"])
def test_parse_channel_round_trip(text):
    assert parse_channel(text) == int(text)


@pytest.mark.parametrize("text", ["", "256", "1000", "-1", "1a", " 1", "+12"])
def test_parse_channel_rejects(text):
    with pytest.raises(ValueError):
        parse_channel(text)


def test_parse_rgb_white():
    assert parse_rgb(["255", "255", "255"]) == 0xFFFFFFFF


def test_parse_rgb_black_is_opaque():
    assert parse_rgb(["0", "0", "0"]) == 255


def test_parse_rgb_channel_order():
    value = parse_rgb(["1", "2", "3"])
    assert (value >> 24, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF) == (1, 2, 3, 255)


@pytest.mark.parametrize("parts", [["1", "2"], ["1", "2", "3", "4"], ["1", "2", "x"], ["300", "0", "0"]])
def test_parse_rgb_invalid(parts):
    with pytest.raises(MapError):
        parse_rgb(parts)


@pytest.mark.parametrize("text,expected", [("220,100,0", 2), ("", 0), (None, 0), (",,,", 3)])
def test_count_commas(text, expected):
    assert count_commas(text) == expected