"""Game state: the swimmer, the score, the typing row and decorations."""

from dataclasses import dataclass, field

SW_MIN_Y = 100
"""The smallest y-coordinate the swimmer may reach."""

SW_SPEED = 10
"""How far the swimmer rises on each bob."""

ROW_W = 25
"""The number of characters in the typing row."""

DEFAULT_SCORE = 0
SWIMMER_START_POS = 64
MAX_SCORE = 9999


@dataclass
class Swimmer:
    """The swimmer, which sinks each tick and bobs up on correct keys."""

    y: int = SWIMMER_START_POS

    def bob_up(self) -> None:
        if self.y > SW_MIN_Y + SW_SPEED:
            self.y -= SW_SPEED
        else:
            self.y = SW_MIN_Y

    def sink(self) -> None:
        self.y += 1


@dataclass
class Score:
    """The player's score, capped at MAX_SCORE."""

    score: int = DEFAULT_SCORE

    def increase(self) -> None:
        if self.score < MAX_SCORE:
            self.score += 1


@dataclass
class Row:
    """The row of text being typed and the position of the next character."""

    text: str = ""
    pos: int = 0

    def __post_init__(self) -> None:
        self._check(self.text)

    @staticmethod
    def _check(text: str) -> None:
        if len(text) > ROW_W:
            raise ValueError(f"row text may hold at most {ROW_W} characters")

    @property
    def current(self) -> str:
        """The character to be typed next, or NUL past the end of the text."""
        return self.text[self.pos] if self.pos < len(self.text) else "\0"

    def shift_pointer(self) -> None:
        if self.pos < ROW_W - 1:
            self.pos += 1
        else:
            self.pos = 0

    def change(self, text: str) -> None:
        self._check(text)
        self.text = text


@dataclass
class Decorations:
    """Animation state for background decorations."""

    tick: int = 0

    def tick_up(self) -> None:
        self.tick += 1


@dataclass
class Model:
    """The whole game state."""

    swimmer: Swimmer = field(default_factory=Swimmer)
    score: Score = field(default_factory=Score)
    row: Row = field(default_factory=Row)
    decor: Decorations = field(default_factory=Decorations)