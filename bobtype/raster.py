"""A monochrome 640x400 frame buffer with bitmap and line drawing."""

from dataclasses import dataclass
from enum import Enum, auto

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 400
SCREEN_BUFFER_SIZE = SCREEN_WIDTH * SCREEN_HEIGHT // 32
"""The size of the frame buffer in 32-bit words."""

_ROW_BYTES = SCREEN_WIDTH // 8
_FULL_ROW = (1 << SCREEN_WIDTH) - 1


class DrawMode(Enum):
    """Whether drawing turns pixels on or off."""

    SET = auto()
    UNSET = auto()


@dataclass(frozen=True)
class BitMap:
    """A one-bit image stored row by row, most significant bit leftmost.

    The width must be a multiple of 8 so that each row fills whole bytes.
    """

    data: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if self.width <= 0 or self.width % 8:
            raise ValueError(f"bitmap width must be a positive multiple of 8, not {self.width}")
        if self.height < 0:
            raise ValueError(f"bitmap height must not be negative, not {self.height}")
        if len(self.data) != self.stride * self.height:
            raise ValueError(
                f"a {self.width}x{self.height} bitmap needs "
                f"{self.stride * self.height} bytes, not {len(self.data)}"
            )

    @property
    def stride(self) -> int:
        """The number of bytes in one row."""
        return self.width // 8

    def row(self, y: int) -> int:
        """Return row ``y`` as an integer, leftmost pixel in the highest bit."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside a bitmap of height {self.height}")
        start = y * self.stride
        return int.from_bytes(self.data[start:start + self.stride], "big")

    def pixel(self, x: int, y: int) -> int:
        """Return 1 if the pixel at (x, y) is on, else 0."""
        if not 0 <= x < self.width:
            raise IndexError(f"column {x} outside a bitmap of width {self.width}")
        return (self.row(y) >> (self.width - 1 - x)) & 1


def _check_point(x: int, y: int) -> None:
    if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
        raise ValueError(f"point ({x}, {y}) lies outside the screen")


class Screen:
    """A frame buffer; a pixel value of 1 is black, 0 is white."""

    def __init__(self) -> None:
        self.rows = [0] * SCREEN_HEIGHT

    def black(self) -> None:
        """Turn every pixel on."""
        self.rows = [_FULL_ROW] * SCREEN_HEIGHT

    def white(self) -> None:
        """Turn every pixel off."""
        self.rows = [0] * SCREEN_HEIGHT

    def to_bytes(self) -> bytes:
        """Return the frame buffer in memory order."""
        return b"".join(row.to_bytes(_ROW_BYTES, "big") for row in self.rows)

    def get_pixel(self, x: int, y: int) -> int:
        _check_point(x, y)
        return (self.rows[y] >> (SCREEN_WIDTH - 1 - x)) & 1

    def set_pixel(self, x: int, y: int, color: int) -> None:
        _check_point(x, y)
        bit = 1 << (SCREEN_WIDTH - 1 - x)
        if color:
            self.rows[y] |= bit
        else:
            self.rows[y] &= ~bit

    def draw_bitmap(self, bitmap: BitMap, x: int, y: int, mode: DrawMode = DrawMode.SET) -> None:
        """Draw ``bitmap`` with its top-left corner at (x, y).

        Parts that fall past the right or bottom edge are left out.
        """
        if x < 0 or y < 0:
            raise ValueError(f"bitmap position ({x}, {y}) must not be negative")
        shift = SCREEN_WIDTH - x - bitmap.width
        for r in range(bitmap.height):
            sy = y + r
            if sy >= SCREEN_HEIGHT:
                break
            bits = bitmap.row(r)
            value = bits << shift if shift >= 0 else bits >> -shift
            if mode is DrawMode.SET:
                self.rows[sy] |= value
            else:
                self.rows[sy] &= ~value & _FULL_ROW

    def draw_vertical_line(self, x: int, y_start: int, y_end: int) -> None:
        """Turn on column ``x`` from ``y_start`` to ``y_end`` inclusive."""
        _check_point(x, y_start)
        _check_point(x, y_end)
        if y_start > y_end:
            raise ValueError("y_start must not be past y_end")
        bit = 1 << (SCREEN_WIDTH - 1 - x)
        for y in range(y_start, y_end + 1):
            self.rows[y] |= bit

    def draw_horizontal_line(
        self, y: int, x_start: int, x_end: int, mode: DrawMode = DrawMode.SET
    ) -> None:
        """Set or clear row ``y`` from ``x_start`` up to, not including, ``x_end``."""
        if not 0 <= y < SCREEN_HEIGHT:
            raise ValueError(f"row {y} lies outside the screen")
        if not 0 <= x_start <= x_end <= SCREEN_WIDTH:
            raise ValueError(f"span {x_start}..{x_end} does not fit the screen")
        mask = ((1 << (x_end - x_start)) - 1) << (SCREEN_WIDTH - x_end)
        if mode is DrawMode.SET:
            self.rows[y] |= mask
        else:
            self.rows[y] &= ~mask & _FULL_ROW