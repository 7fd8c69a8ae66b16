"""Game events that change the model and trigger sounds."""

from bobtype.model import Model
from bobtype.psg import PSG

START_Y = 150


def start_game(model: Model) -> None:
    """Reset the model for a new game."""
    model.swimmer.y = START_Y
    model.score.score = 0
    model.row.pos = 0
    model.decor.tick = 0


def tick_increment(model: Model) -> None:
    """Advance one clock tick: the swimmer sinks."""
    model.swimmer.sink()


def key_press(key: str, model: Model, psg: PSG) -> bool:
    """Handle a typed key; return whether it was the expected character."""
    if key != model.row.current:
        return False
    model.swimmer.bob_up()
    model.score.increase()
    model.row.shift_pointer()
    psg.bob_sound()
    return True


def death(psg: PSG) -> None:
    """Play the death sound."""
    psg.death_sound()