import pytest

from condraw.graph_art import (
    draw_borders,
    draw_connections_title,
    draw_mario,
    draw_node_box,
    draw_title,
    move_text_right,
    start_text_left,
)
from condraw.screen import Screen, glyph


def _screen():
    return Screen(180, 62)


def test_title_fills_banner_area():
    screen = _screen()
    draw_title(screen)
    for y in range(1, 6):
        assert all(screen.color_at(x, y) == 62 for x in range(1, 115))
        assert screen.char_at(115, y) == " "
        assert screen.color_at(115, y) == 7
    assert all(screen.char_at(x, 1) == glyph(177) for x in range(1, 115))
    assert all(screen.char_at(x, 5) == glyph(177) for x in range(1, 115))
    assert screen.char_at(9, 2) == glyph(219)


def test_connections_title_fills_side_banner():
    screen = _screen()
    draw_connections_title(screen)
    for y in range(1, 6):
        assert all(screen.color_at(x, y) == 62 for x in range(116, 170))
        assert screen.color_at(170, y) == 7
        assert screen.color_at(115, y) == 7
    assert screen.char_at(117, 2) == glyph(219)


def test_move_right_and_start_left_compose_whole_banner():
    whole = _screen()
    move_text_right(whole, 3, 54, 62)
    parts = _screen()
    move_text_right(parts, 3, 20, 62)
    start_text_left(parts, 3, 19, 62)
    assert parts.snapshot() == whole.snapshot()


def test_start_left_full_equals_move_right_full():
    left = _screen()
    start_text_left(left, 0, -5, 4)
    right = _screen()
    move_text_right(right, 0, 54, 4)
    assert left.snapshot() == right.snapshot()


def test_move_right_zero_size_draws_nothing():
    screen = _screen()
    blank = screen.snapshot()
    move_text_right(screen, 10, 0, 3)
    assert screen.snapshot() == blank


def test_move_right_too_wide_raises():
    with pytest.raises(ValueError):
        move_text_right(_screen(), 0, 55, 62)


def test_borders_corners():
    screen = _screen()
    draw_borders(screen)
    for x, y in [(0, 0), (170, 59), (115, 28), (116, 46), (169, 46), (115, 6)]:
        assert screen.char_at(x, y) == glyph(219)
        assert screen.color_at(x, y) == 9
    assert screen.char_at(50, 30) == " "


@pytest.mark.parametrize(
    "letter,x,y,filled",
    [("A", 50, 33, 6), ("B", 20, 13, 5), ("C", 80, 13, 6), ("D", 10, 48, 5), ("E", 90, 48, 5)],
)
def test_node_box(letter, x, y, filled):
    screen = _screen()
    draw_node_box(screen, letter.lower())
    assert screen.char_at(x, y) == glyph(219)
    assert screen.color_at(x, y) == 9
    assert screen.char_at(x + 19, y + 9) == glyph(219)
    assert screen.char_at(x + 1, y + 1) == glyph(177)
    assert screen.color_at(x + 1, y + 1) == 62
    assert screen.char_at(x + 1 + filled, y + 2) == glyph(219)


def test_node_box_unknown_letter():
    with pytest.raises(ValueError):
        draw_node_box(_screen(), "F")


def test_mario_layout():
    screen = _screen()
    draw_mario(screen)
    assert screen.char_at(143, 32) == "M"
    assert screen.color_at(143, 32) == 15
    assert screen.char_at(140, 31) == glyph(177)
    assert screen.color_at(140, 31) == 12
    assert screen.char_at(150, 31) == glyph(219)
    assert screen.color_at(150, 31) == 14
    assert screen.color_at(157, 31) == 14
    assert all(screen.color_at(158, y) == 7 for y in range(30, 58))
    assert screen.color_at(125, 30) == 9