# bobtype

The core of a small typing game. A swimmer sinks a little on every clock
tick, and each correct key press makes it bob back up. This package holds the
game state, the word-row generator, the game events, a model of a
three-channel programmable sound generator (PSG) with the background music
and sound effects, a 640×400 one-bit frame buffer with bitmap, line and text
drawing, and a decoder for keyboard scan codes and mouse packets.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

- `bobtype.model`: the game state. `Model` holds a `Swimmer`, a `Score`, a
  `Row` and `Decorations`.
  - `Swimmer.bob_up()` raises the swimmer by 10, but never above y = 100;
    `Swimmer.sink()` lowers it by one.
  - `Score.increase()` counts up to 9999 and stops there.
  - `Row` holds up to 25 characters of text and the typing position `pos`.
    `Row.current` is the character to be typed next (NUL past the end of the
    text). `Row.shift_pointer()` moves along the 25-character row and wraps
    back to 0. `Row.change(text)` replaces the text; longer text raises
    `ValueError`.
  - `Decorations.tick_up()` counts animation ticks.
- `bobtype.words`: `RowBuffer` builds the row after the one being typed.
  `RowBuffer.next_row(row, rng=None)` moves the buffered text into `row` and
  fills a fresh 25-character buffer with words drawn from the first ten
  entries of `WORDS` using `rng.randrange` (the `random` module when `rng` is
  omitted). A word cut off at the end of one row opens the next one.
- `bobtype.events`: `start_game(model)` resets the model (swimmer at
  y = 150, score 0, position 0). `tick_increment(model)` sinks the swimmer.
  `key_press(key, model, psg)` returns `True` and bobs the swimmer up, adds
  to the score, advances the row and plays the bob sound when `key` is the
  expected character, and returns `False` otherwise. `death(psg)` plays the
  death sound.
- `bobtype.psg`: `PSG` keeps the sixteen sound-chip registers in
  `registers` and records every accepted write in `writes` as
  `(register, value)` pairs. It has `write`, `read`, `set_tone`,
  `set_volume`, `enable_channel`, `set_noise`, `stop_sound`, `bob_sound` and
  `death_sound`. Writes to registers past 15 and to channels past 2 are
  ignored. An optional `pause` callable given to `PSG(pause=...)` is called
  between the two notes of the bob sound.
- `bobtype.music`: `start_music(psg)` sets up the mixer, volumes and first
  note. `update_music(state, psg)` advances a `MusicState` by one sixteenth
  note, striking the noise drum and changing the melody note as `SIXTEENTHS`
  and `MELODY` say.
- `bobtype.raster`: `Screen` is a 640×400 frame buffer, 1 for black and 0 for
  white, with `black()`, `white()`, `get_pixel`, `set_pixel`, `to_bytes()`,
  `draw_bitmap(bitmap, x, y, mode)`, `draw_vertical_line(x, y_start, y_end)`
  (inclusive) and `draw_horizontal_line(y, x_start, x_end, mode)` (`x_end`
  excluded). `BitMap(data, width, height)` is a one-bit image whose width is
  a multiple of 8; `DrawMode.SET` turns pixels on and `DrawMode.UNSET` turns
  them off. Parts of a bitmap past the right or bottom edge are clipped.
- `bobtype.unifont`: `glyph(code)` returns the 8×16 `BitMap` for an ASCII
  code or one-character string; control characters and DEL are blank.
- `bobtype.font`: `draw_small_text(screen, text, x, y, mode)` draws text with
  those glyphs and raises `ValueError` if it would not fit on the screen.
- `bobtype.itoa`: `itoa(num, base=10)` writes an integer in base 2 to 36
  with lower-case digits; only base 10 gets a minus sign, other bases show a
  negative number as its 32-bit two's complement.
- `bobtype.keyboard`: `translate(scancode, state)` updates the shift and
  caps-lock state in an `InputState` and returns the character a key press
  types, or `None` for releases. `IkbdDecoder.feed(byte)` takes the keyboard
  controller's byte stream one byte at a time, returning typed characters and
  applying relative mouse packets (header byte `0xF8`) to the mouse position,
  kept inside the screen.

## Example

```python
import random

from bobtype.events import key_press, start_game, tick_increment
from bobtype.model import Model
from bobtype.psg import PSG
from bobtype.words import RowBuffer

model = Model()
psg = PSG()
buffer = RowBuffer()
rng = random.Random(1)

buffer.next_row(model.row, rng)  # fills the buffer
buffer.next_row(model.row, rng)  # moves it into the row
start_game(model)

key_press(model.row.current, model, psg)
tick_increment(model)
print(model.score.score, model.swimmer.y)  # 1 141
```

Drawing text:

```python
from bobtype.font import draw_small_text
from bobtype.itoa import itoa
from bobtype.raster import DrawMode, Screen

screen = Screen()
draw_small_text(screen, itoa(42), 0, 0, DrawMode.SET)
frame = screen.to_bytes()  # 32000 bytes, one bit per pixel
```

## What it does not do

The package has no game loop, no command to start a game and no window: it
keeps the frame buffer in memory and leaves showing it to the caller. The
`PSG` class only stores register values; it produces no sound. There is no
large font and no swimmer sprite, so the package does not render a whole game
frame by itself.