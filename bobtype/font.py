"""Drawing text with the small bitmap font."""

from bobtype.raster import SCREEN_HEIGHT, SCREEN_WIDTH, DrawMode, Screen
from bobtype.unifont import GLYPH_HEIGHT, GLYPH_WIDTH, glyph

SMALL_TEXT_WIDTH = GLYPH_WIDTH
SMALL_TEXT_HEIGHT = GLYPH_HEIGHT


def draw_small_text(
    screen: Screen, text: str, x: int, y: int, mode: DrawMode = DrawMode.SET
) -> None:
    """Draw ``text`` left to right from (x, y); it must fit on the screen."""
    if not SMALL_TEXT_WIDTH * len(text) + x < SCREEN_WIDTH:
        raise ValueError(f"text of {len(text)} characters at x={x} runs off the screen")
    if not y + SMALL_TEXT_HEIGHT < SCREEN_HEIGHT:
        raise ValueError(f"text at y={y} runs off the bottom of the screen")
    bitmaps = [glyph(char) for char in text]
    for i, bitmap in enumerate(bitmaps):
        screen.draw_bitmap(bitmap, x + i * SMALL_TEXT_WIDTH, y, mode)