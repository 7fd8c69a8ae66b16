import pytest

from bobtype.font import SMALL_TEXT_HEIGHT, SMALL_TEXT_WIDTH, draw_small_text
from bobtype.raster import SCREEN_HEIGHT, SCREEN_WIDTH, DrawMode, Screen
from bobtype.unifont import glyph


def test_single_character_matches_glyph():
    screen = Screen()
    draw_small_text(screen, "A", 20, 30, DrawMode.SET)
    a = glyph("A")
    for r in range(a.height):
        for c in range(a.width):
            assert screen.get_pixel(20 + c, 30 + r) == a.pixel(c, r)


def test_characters_are_spaced_by_glyph_width():
    text_screen = Screen()
    draw_small_text(text_screen, "AB", 16, 20)
    glyph_screen = Screen()
    glyph_screen.draw_bitmap(glyph("A"), 16, 20)
    glyph_screen.draw_bitmap(glyph("B"), 16 + SMALL_TEXT_WIDTH, 20)
    assert text_screen.to_bytes() == glyph_screen.to_bytes()


def test_unset_erases_text():
    screen = Screen()
    blank = screen.to_bytes()
    draw_small_text(screen, "bob 42", 3, 5, DrawMode.SET)
    assert screen.to_bytes() != blank
    draw_small_text(screen, "bob 42", 3, 5, DrawMode.UNSET)
    assert screen.to_bytes() == blank


def test_text_too_wide_raises():
    limit = SCREEN_WIDTH // SMALL_TEXT_WIDTH
    with pytest.raises(ValueError):
        draw_small_text(Screen(), "x" * limit, 0, 0)


def test_widest_text_fits():
    screen = Screen()
    count = SCREEN_WIDTH // SMALL_TEXT_WIDTH - 1
    draw_small_text(screen, "H" * count, 0, 0)
    h = glyph("H")
    last_x = (count - 1) * SMALL_TEXT_WIDTH
    drawn = [screen.get_pixel(last_x + c, 5) for c in range(h.width)]
    expected = [h.pixel(c, 5) for c in range(h.width)]
    assert drawn == expected


def test_text_too_low_raises():
    with pytest.raises(ValueError):
        draw_small_text(Screen(), "x", 0, SCREEN_HEIGHT - SMALL_TEXT_HEIGHT)


def test_lowest_text_fits():
    screen = Screen()
    y = SCREEN_HEIGHT - SMALL_TEXT_HEIGHT - 1
    draw_small_text(screen, "H", 0, y)
    h = glyph("H")
    assert all(screen.get_pixel(c, y + 5) == h.pixel(c, 5) for c in range(h.width))