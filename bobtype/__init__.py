"""Game state, sound-chip model, raster drawing and input decoding for a typing game."""

__version__ = "0.1.0"

__all__ = [
    "events",
    "font",
    "itoa",
    "keyboard",
    "model",
    "music",
    "psg",
    "raster",
    "unifont",
    "words",
]