import pytest

from bobtype.psg import MIXER, NOISE, PSG


def test_write_and_read():
    psg = PSG()
    psg.write(3, 0x12)
    assert psg.read(3) == 0x12
    assert psg.writes == [(3, 0x12)]


def test_write_truncates_to_byte():
    psg = PSG()
    psg.write(0, 0x1FF)
    assert psg.read(0) == 0xFF


@pytest.mark.parametrize("reg", [16, 200, -1])
def test_out_of_range_register_ignored(reg):
    psg = PSG()
    psg.write(reg, 5)
    assert psg.writes == []
    assert psg.read(reg) == 0
    assert psg.registers == [0] * 16


@pytest.mark.parametrize("channel", [0, 1, 2])
@pytest.mark.parametrize("tuning", [0x475, 0x357, 0x1FC, 0x01])
def test_set_tone_splits_fine_and_coarse(channel, tuning):
    psg = PSG()
    psg.set_tone(channel, tuning)
    fine = psg.read(channel * 2)
    coarse = psg.read(channel * 2 + 1)
    assert fine | (coarse << 8) == tuning


def test_set_tone_bad_channel_ignored():
    psg = PSG()
    psg.set_tone(3, 0x475)
    psg.set_volume(3, 5)
    assert psg.writes == []


def test_set_volume_masks():
    psg = PSG()
    psg.set_volume(1, 0x3F)
    assert psg.read(9) == 0x3F & 0x1F


def test_set_noise_masks():
    psg = PSG()
    psg.set_noise(0xFF)
    assert psg.read(NOISE) == 0x1F


def test_enable_channel_tone_and_noise():
    psg = PSG()
    psg.enable_channel(0, True, True)
    assert psg.read(MIXER) == 0xEE


def test_enable_channel_tone_only():
    psg = PSG()
    psg.enable_channel(0, True, False)
    assert psg.read(MIXER) == 0xF6


def test_stop_sound():
    psg = PSG()
    psg.stop_sound()
    assert psg.read(MIXER) == 0xFF


def test_bob_sound_sequence_and_pause():
    pauses = []
    psg = PSG(pause=lambda: pauses.append(1))
    psg.bob_sound()
    assert (MIXER, 0xEA) in psg.writes
    assert (4, 0xD6) in psg.writes
    assert psg.read(4) == 0xAA
    assert psg.read(10) == 9
    assert psg.read(MIXER) == 0xEE
    assert len(pauses) == 2


def test_death_sound():
    psg = PSG()
    psg.death_sound()
    assert psg.read(MIXER) == 0xCE
    assert psg.read(NOISE) == 0x03
    assert psg.read(10) == 0x10
    assert psg.read(0xC) == 0x11
    assert psg.read(0xD) == 0