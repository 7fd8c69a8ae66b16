"""Generation of rows of random words for the player to type."""

import random
from dataclasses import dataclass, field

from bobtype.model import ROW_W, Row

WORDS = (
    "air ",
    "bob ",
    "eel ",
    "man ",
    "sea ",
    "sky ",
    "try ",
    "boat ",
    "buoy ",
    "dive ",
    "down ",
    "fish ",
    "help ",
    "kelp ",
    "land ",
    "over ",
    "rise ",
    "sink ",
    "sunk ",
    "swim ",
    "board ",
    "death ",
    "drown ",
    "fight ",
    "ocean ",
    "shark ",
    "shore ",
    "tidal ",
    "under ",
    "water ",
)
"""The words that may appear, each followed by a space."""

WORD_CHOICES = 10
"""Only this many words from the front of WORDS are drawn."""


@dataclass
class RowBuffer:
    """The row after the one being typed, built one row ahead.

    ``cutoff`` counts how many characters of the last word fit in
    ``string``; the rest of that word opens the following row.
    """

    string: str = ""
    indexes: list = field(default_factory=list)
    cutoff: int = 0

    def next_row(self, row: Row, rng=None) -> None:
        """Move the buffered text into ``row`` and build a fresh buffer.

        ``rng`` needs a ``randrange`` method; the ``random`` module is used
        when none is given.
        """
        rng = random if rng is None else rng
        row.change(self.string)

        chars: list[str] = []
        if self.cutoff:
            last = self.indexes[-1]
            chars.extend(WORDS[last][self.cutoff:])
            self.indexes = [last]

        while len(chars) < ROW_W:
            current = rng.randrange(WORD_CHOICES)
            self.indexes.append(current)
            taken = WORDS[current][: ROW_W - len(chars)]
            chars.extend(taken)
            self.cutoff = len(taken)

        self.string = "".join(chars)