import re

import pytest

from condraw.screen import Screen, attribute, color_swatch, glyph

_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def test_glyph_code_page_437():
    assert glyph(219) == "\u2588"
    assert glyph(65) == "A"


def test_glyph_wraps_like_a_char():
    assert glyph(256 + 179) == glyph(179)


@pytest.mark.parametrize("fg,bg", [(0, 0), (15, 0), (7, 1), (14, 15)])
def test_attribute_packs_nibbles(fg, bg):
    value = attribute(fg, bg)
    assert value % 16 == fg
    assert value // 16 == bg


def test_write_and_read_back():
    s = Screen(10, 4)
    s.gotoxy(2, 1)
    s.write("hi")
    assert s.char_at(2, 1) == "h"
    assert s.char_at(3, 1) == "i"
    assert s.cursor == (2 + len("hi"), 1)


def test_newline_moves_to_next_row():
    s = Screen(10, 4)
    s.write("a\nb")
    assert s.char_at(0, 0) == "a"
    assert s.char_at(0, 1) == "b"


def test_write_wraps_at_right_edge():
    s = Screen(3, 2)
    s.write("abcd")
    assert s.char_at(2, 0) == "c"
    assert s.char_at(0, 1) == "d"


def test_outside_writes_are_dropped():
    s = Screen(3, 2)
    s.put(-1, 0, "x")
    s.put(5, 0, "x")
    s.put(0, 7, "x")
    assert s.render() == Screen(3, 2).render()


def test_char_at_outside_raises():
    s = Screen(3, 2)
    with pytest.raises(IndexError):
        s.char_at(3, 0)


def test_put_code_and_color():
    s = Screen(5, 5)
    s.set_colors(14, 1)
    s.put(1, 1, 179)
    assert s.char_at(1, 1) == glyph(179)
    assert s.color_at(1, 1) == attribute(14, 1)


def test_clear_resets():
    s = Screen(5, 3)
    s.write("hello")
    s.clear()
    assert s.render() == Screen(5, 3).render()
    assert s.cursor == (0, 0)


def test_snapshot_restore_region():
    s = Screen(5, 2)
    s.write("abcde")
    snap = s.snapshot()
    s.gotoxy(0, 0)
    s.write("XXX")
    s.restore(snap, 0, 0, 1, 0)
    assert s.char_at(0, 0) == "a"
    assert s.char_at(1, 0) == "b"
    assert s.char_at(2, 0) == "X"


def test_restore_rejects_wrong_size():
    s = Screen(5, 2)
    with pytest.raises(ValueError):
        s.restore(Screen(4, 2).snapshot(), 0, 0, 1, 1)


def test_render_ansi_matches_plain_render():
    s = Screen(6, 3)
    s.set_colors(12, 0)
    s.write("ab")
    s.set_colors(2, 7)
    s.put(3, 1, "z")
    stripped = [line.rstrip() for line in _ESCAPE.sub("", s.render_ansi()).split("\n")]
    assert stripped == s.render().split("\n")


def test_render_ansi_bright_foreground():
    s = Screen(2, 1)
    s.set_color(attribute(15, 0))
    s.put(0, 0, "x")
    assert "\x1b[97;40mx" in s.render_ansi()


def test_color_swatch_lists_sixteen_rows():
    s = Screen(10, 20)
    color_swatch(s)
    lines = s.render().split("\n")
    assert [int(line) for line in lines[:16]] == list(range(16))
    assert s.color_at(0, 0) == 15
    assert s.char_at(1, 10) == "0"