import random

from bobtype.model import ROW_W, Row
from bobtype.words import WORD_CHOICES, WORDS, RowBuffer


class _Fixed:
    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self._values.pop(0) if len(self._values) > 1 else self._values[0]


def test_first_row_is_empty_and_buffer_filled():
    buf = RowBuffer()
    row = Row()
    buf.next_row(row, random.Random(1))
    assert row.text == ""
    assert len(buf.string) == ROW_W


def test_row_receives_previous_buffer():
    buf = RowBuffer()
    row = Row()
    rng = random.Random(7)
    buf.next_row(row, rng)
    pending = buf.string
    buf.next_row(row, rng)
    assert row.text == pending
    assert len(buf.string) == ROW_W


def test_draws_only_from_first_words():
    rng = _Fixed([0])
    buf = RowBuffer()
    buf.next_row(Row(), rng)
    assert set(rng.calls) == {WORD_CHOICES}


def test_word_stream_is_continuous():
    buf = RowBuffer()
    row = Row()
    rng = random.Random(42)
    pieces = []
    buf.next_row(row, rng)
    for _ in range(8):
        buf.next_row(row, rng)
        pieces.append(row.text)
    stream = "".join(pieces)
    words = stream.split(" ")
    allowed = {w.strip() for w in WORDS[:WORD_CHOICES]}
    for word in words[:-1]:
        assert word in allowed
    assert all(len(p) == ROW_W for p in pieces)


def test_indexes_track_words_in_buffer():
    buf = RowBuffer()
    rng = random.Random(3)
    buf.next_row(Row(), rng)
    buf.next_row(Row(), rng)
    rebuilt = "".join(WORDS[i] for i in buf.indexes)
    first = WORDS[buf.indexes[0]]
    assert first.endswith(buf.string[: buf.string.index(" ") + 1]) or buf.string.startswith(first)
    assert len(rebuilt) >= ROW_W