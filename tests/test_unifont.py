import pytest

from bobtype.unifont import GLYPH_HEIGHT, GLYPH_WIDTH, glyph


def test_capital_a_matches_table():
    expected = bytes.fromhex("00000000" "18242442" "427E4242" "42420000")
    assert glyph(ord("A")).data == expected


def test_glyph_dimensions():
    a = glyph("A")
    assert (a.width, a.height) == (GLYPH_WIDTH, GLYPH_HEIGHT)
    assert len(a.data) == GLYPH_WIDTH * GLYPH_HEIGHT // 8


def test_string_and_code_agree():
    assert glyph("q") == glyph(ord("q"))


@pytest.mark.parametrize("code", [0, 10, 31, 32, 127])
def test_blank_glyphs(code):
    assert glyph(code).data == bytes(GLYPH_WIDTH * GLYPH_HEIGHT // 8)


def test_visible_characters_have_pixels():
    blank_codes = [code for code in range(33, 127) if not any(glyph(code).data)]
    assert blank_codes == []


@pytest.mark.parametrize("code", [-1, 128, 300])
def test_out_of_range_raises(code):
    with pytest.raises(ValueError):
        glyph(code)


def test_multi_character_string_raises():
    with pytest.raises(ValueError):
        glyph("ab")