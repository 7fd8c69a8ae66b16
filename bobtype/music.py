"""The background melody and drum pattern."""

from dataclasses import dataclass

from bobtype.psg import ENVELOPE_COARSE, ENVELOPE_FINE, MIXER, PSG

MELODY = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0x475, 0, 0x1, 0x475, 0, 0x01, 0x475, 0,
    0x01, 0, 0x357, 0, 0x475, 0, 0x357, 0,
    0x475, 0, 0x01, 0x475, 0, 0x01, 0x475, 0,
    0x01, 0, 0x357, 0, 0x475, 0, 0x357, 0,
    0x475, 0, 0x01, 0x475, 0, 0x01, 0x475, 0,
    0x01, 0, 0x327, 0, 0x475, 0, 0x327, 0,
    0x475, 0, 0x01, 0x475, 0x01, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0,
    0x1FC, 0, 0, 0, 0, 0, 0, 0,
    0x2FA, 0, 0, 0, 0, 0, 0, 0,
    0, 0x1, 0, 0, 0, 0, 0, 0,
    0x2FA, 0x1, 0x2FA, 0x1,
)
"""Channel A tone periods per sixteenth note; 0 keeps the previous tone."""

SIXTEENTHS = (
    True, False, False, True, True, False, True, False,
    False, True, True, False, True, False, False, False,
    True, False, False, True, True, False, True, False,
    False, True, True, False, True, False, True, False,
)
"""Sixteenths on which the noise drum is struck."""

BEAT_MASK = 0x1F
NOTE_MASK = 0x7F


@dataclass
class MusicState:
    """Position in the drum pattern and in the melody."""

    current_beat: int = 0
    current_note: int = 0


def _strike_drum(psg: PSG) -> None:
    psg.set_noise(0x1F)
    psg.write(ENVELOPE_FINE, 0x02)
    psg.write(ENVELOPE_COARSE, 0)


def start_music(psg: PSG) -> None:
    """Set up the mixer, volumes and the first note."""
    psg.set_tone(0, MELODY[0])
    psg.write(MIXER, 0xEE)
    psg.set_volume(0, 11)
    psg.set_volume(1, 0x10)
    _strike_drum(psg)


def update_music(state: MusicState, psg: PSG) -> None:
    """Advance one sixteenth, striking the drum and changing the note as due."""
    beat = (state.current_beat + 1) & BEAT_MASK
    note = (state.current_note + 1) & NOTE_MASK
    state.current_beat = beat
    state.current_note = note

    if SIXTEENTHS[beat]:
        _strike_drum(psg)
    tone = MELODY[note] if note < len(MELODY) else 0
    if tone:
        psg.set_tone(0, tone)