"""The 8x16 bitmap font used for small text."""

from bobtype.raster import BitMap

GLYPH_WIDTH = 8
GLYPH_HEIGHT = 16
GLYPH_COUNT = 128

_FIRST_PRINTABLE = 32

_PRINTABLE = (
    (0x00000000, 0x00000000, 0x00000000, 0x00000000),
    (0x00000000, 0x08080808, 0x08080800, 0x08080000),
    (0x00002222, 0x22220000, 0x00000000, 0x00000000),
    (0x00000000, 0x1212127E, 0x24247E48, 0x48480000),
    (0x00000000, 0x083E4948, 0x380E0949, 0x3E080000),
    (0x00000000, 0x314A4A34, 0x08081629, 0x29460000),
    (0x00000000, 0x1C222214, 0x18294542, 0x46390000),
    (0x00000808, 0x08080000, 0x00000000, 0x00000000),
    (0x00000004, 0x08081010, 0x10101010, 0x08080400),
    (0x00000020, 0x10100808, 0x08080808, 0x10102000),
    (0x00000000, 0x00000849, 0x2A1C2A49, 0x08000000),
    (0x00000000, 0x00000808, 0x087F0808, 0x08000000),
    (0x00000000, 0x00000000, 0x00000000, 0x18080810),
    (0x00000000, 0x00000000, 0x003C0000, 0x00000000),
    (0x00000000, 0x00000000, 0x00000000, 0x18180000),
    (0x00000000, 0x02020408, 0x08101020, 0x40400000),
    (0x00000000, 0x18244246, 0x4A526242, 0x24180000),
    (0x00000000, 0x08182808, 0x08080808, 0x083E0000),
    (0x00000000, 0x3C424202, 0x0C102040, 0x407E0000),
    (0x00000000, 0x3C424202, 0x1C020242, 0x423C0000),
    (0x00000000, 0x040C1424, 0x44447E04, 0x04040000),
    (0x00000000, 0x7E404040, 0x7C020202, 0x423C0000),
    (0x00000000, 0x1C204040, 0x7C424242, 0x423C0000),
    (0x00000000, 0x7E020204, 0x04040808, 0x08080000),
    (0x00000000, 0x3C424242, 0x3C424242, 0x423C0000),
    (0x00000000, 0x3C424242, 0x3E020202, 0x04380000),
    (0x00000000, 0x00001818, 0x00000018, 0x18000000),
    (0x00000000, 0x00001818, 0x00000018, 0x08081000),
    (0x00000000, 0x00020408, 0x10201008, 0x04020000),
    (0x00000000, 0x0000007E, 0x0000007E, 0x00000000),
    (0x00000000, 0x00402010, 0x08040810, 0x20400000),
    (0x00000000, 0x3C424202, 0x04080800, 0x08080000),
    (0x00000000, 0x1C224A56, 0x5252524E, 0x201E0000),
    (0x00000000, 0x18242442, 0x427E4242, 0x42420000),
    (0x00000000, 0x7C424242, 0x7C424242, 0x427C0000),
    (0x00000000, 0x3C424240, 0x40404042, 0x423C0000),
    (0x00000000, 0x78444242, 0x42424242, 0x44780000),
    (0x00000000, 0x7E404040, 0x7C404040, 0x407E0000),
    (0x00000000, 0x7E404040, 0x7C404040, 0x40400000),
    (0x00000000, 0x3C424240, 0x404E4242, 0x463A0000),
    (0x00000000, 0x42424242, 0x7E424242, 0x42420000),
    (0x00000000, 0x3E080808, 0x08080808, 0x083E0000),
    (0x00000000, 0x1F040404, 0x04040444, 0x44380000),
    (0x00000000, 0x42444850, 0x60605048, 0x44420000),
    (0x00000000, 0x40404040, 0x40404040, 0x407E0000),
    (0x00000000, 0x42426666, 0x5A5A4242, 0x42420000),
    (0x00000000, 0x42626252, 0x524A4A46, 0x46420000),
    (0x00000000, 0x3C424242, 0x42424242, 0x423C0000),
    (0x00000000, 0x7C424242, 0x7C404040, 0x40400000),
    (0x00000000, 0x3C424242, 0x4242425A, 0x663C0300),
    (0x00000000, 0x7C424242, 0x7C484444, 0x42420000),
    (0x00000000, 0x3C424240, 0x300C0242, 0x423C0000),
    (0x00000000, 0x7F080808, 0x08080808, 0x08080000),
    (0x00000000, 0x42424242, 0x42424242, 0x423C0000),
    (0x00000000, 0x41414122, 0x22221414, 0x08080000),
    (0x00000000, 0x42424242, 0x5A5A6666, 0x42420000),
    (0x00000000, 0x42422424, 0x18182424, 0x42420000),
    (0x00000000, 0x41412222, 0x14080808, 0x08080000),
    (0x00000000, 0x7E020204, 0x08102040, 0x407E0000),
    (0x0000000E, 0x08080808, 0x08080808, 0x08080E00),
    (0x00000000, 0x40402010, 0x10080804, 0x02020000),
    (0x00000070, 0x10101010, 0x10101010, 0x10107000),
    (0x00001824, 0x42000000, 0x00000000, 0x00000000),
    (0x00000000, 0x00000000, 0x00000000, 0x00007F00),
    (0x00201008, 0x00000000, 0x00000000, 0x00000000),
    (0x00000000, 0x00003C42, 0x023E4242, 0x463A0000),
    (0x00000040, 0x40405C62, 0x42424242, 0x625C0000),
    (0x00000000, 0x00003C42, 0x40404040, 0x423C0000),
    (0x00000002, 0x02023A46, 0x42424242, 0x463A0000),
    (0x00000000, 0x00003C42, 0x427E4040, 0x423C0000),
    (0x0000000C, 0x1010107C, 0x10101010, 0x10100000),
    (0x00000000, 0x00023A44, 0x44443820, 0x3C42423C),
    (0x00000040, 0x40405C62, 0x42424242, 0x42420000),
    (0x00000008, 0x08001808, 0x08080808, 0x083E0000),
    (0x00000004, 0x04000C04, 0x04040404, 0x04044830),
    (0x00000040, 0x40404448, 0x50605048, 0x44420000),
    (0x00000018, 0x08080808, 0x08080808, 0x083E0000),
    (0x00000000, 0x00007649, 0x49494949, 0x49490000),
    (0x00000000, 0x00005C62, 0x42424242, 0x42420000),
    (0x00000000, 0x00003C42, 0x42424242, 0x423C0000),
    (0x00000000, 0x00005C62, 0x42424242, 0x625C4040),
    (0x00000000, 0x00003A46, 0x42424242, 0x463A0202),
    (0x00000000, 0x00005C62, 0x42404040, 0x40400000),
    (0x00000000, 0x00003C42, 0x40300C02, 0x423C0000),
    (0x00000000, 0x1010107C, 0x10101010, 0x100C0000),
    (0x00000000, 0x00004242, 0x42424242, 0x463A0000),
    (0x00000000, 0x00004242, 0x42242424, 0x18180000),
    (0x00000000, 0x00004149, 0x49494949, 0x49360000),
    (0x00000000, 0x00004242, 0x24181824, 0x42420000),
    (0x00000000, 0x00004242, 0x42424226, 0x1A02023C),
    (0x00000000, 0x00007E02, 0x04081020, 0x407E0000),
    (0x0000000C, 0x10100808, 0x10201008, 0x0810100C),
    (0x00000808, 0x08080808, 0x08080808, 0x08080808),
    (0x00000030, 0x08081010, 0x08040810, 0x10080830),
    (0x00000031, 0x49460000, 0x00000000, 0x00000000),
)

_BLANK = bytes(GLYPH_WIDTH * GLYPH_HEIGHT // 8)


def _glyph_bytes(code: int) -> bytes:
    index = code - _FIRST_PRINTABLE
    if 0 <= index < len(_PRINTABLE):
        return b"".join(word.to_bytes(4, "big") for word in _PRINTABLE[index])
    return _BLANK


def glyph(code) -> BitMap:
    """Return the bitmap for an ASCII code or a one-character string.

    Control characters and DEL are blank.
    """
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError("a glyph is looked up by a single character")
        code = ord(code)
    if not 0 <= code < GLYPH_COUNT:
        raise ValueError(f"no glyph for character code {code}")
    return BitMap(_glyph_bytes(code), GLYPH_WIDTH, GLYPH_HEIGHT)