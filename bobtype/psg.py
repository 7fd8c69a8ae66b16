"""A model of the three-channel programmable sound generator."""

from typing import Callable, Optional

REGISTER_COUNT = 16
CHANNEL_COUNT = 3

MIXER = 7
NOISE = 6
ENVELOPE_FINE = 0xC
ENVELOPE_COARSE = 0xD


class PSG:
    """The sound chip's register file.

    Every accepted write is stored in ``registers`` and recorded in
    ``writes``. ``pause`` is called between the two notes of the bob sound.
    """

    def __init__(self, pause: Optional[Callable[[], None]] = None) -> None:
        self.registers = [0] * REGISTER_COUNT
        self.writes: list[tuple[int, int]] = []
        self._pause = pause or (lambda: None)

    def write(self, reg: int, val: int) -> None:
        """Store a byte in a register; registers past 15 are ignored."""
        if 0 <= reg < REGISTER_COUNT:
            val &= 0xFF
            self.registers[reg] = val
            self.writes.append((reg, val))

    def read(self, reg: int) -> int:
        """Return a register's value, or 0 for registers past 15."""
        if 0 <= reg < REGISTER_COUNT:
            return self.registers[reg]
        return 0

    def set_tone(self, channel: int, tuning: int) -> None:
        if 0 <= channel < CHANNEL_COUNT:
            self.write(channel << 1, tuning & 0xFF)
            self.write((channel << 1) + 1, tuning >> 8)

    def set_volume(self, channel: int, volume: int) -> None:
        if 0 <= channel < CHANNEL_COUNT:
            self.write(channel + 8, volume & 0x1F)

    def enable_channel(self, channel: int, tone_on: bool, noise_on: bool) -> None:
        if 0 <= channel < CHANNEL_COUNT:
            tone = ~int(bool(tone_on)) << channel
            noise = ~int(bool(noise_on)) << (channel + 3)
            self.write(MIXER, tone + noise)

    def stop_sound(self) -> None:
        self.write(MIXER, 0xFF)

    def set_noise(self, tuning: int) -> None:
        self.write(NOISE, tuning & 0x1F)

    def bob_sound(self) -> None:
        """Play the two rising notes heard when the swimmer bobs up."""
        self.write(MIXER, 0xEA)
        self.set_tone(2, 0x0D6)
        self.set_volume(2, 9)
        self._pause()
        self.set_tone(2, 0x0AA)
        self._pause()
        self.write(MIXER, 0xEE)

    def death_sound(self) -> None:
        """Start the enveloped noise burst played on death."""
        self.write(MIXER, 0xCE)
        self.set_noise(0x03)
        self.set_volume(2, 0x10)
        self.write(ENVELOPE_FINE, 0x11)
        self.write(ENVELOPE_COARSE, 0)