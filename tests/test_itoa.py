import pytest

from bobtype.itoa import itoa


def test_zero_is_single_digit():
    assert itoa(0, 10) == "0"
    assert itoa(0, 2) == "0"


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("num", [1, 7, 42, 255, 9999, 123456])
def test_round_trip_positive(num, base):
    assert int(itoa(num, base), base) == num


def test_negative_decimal_round_trip():
    text = itoa(-42, 10)
    assert text.startswith("-")
    assert int(text, 10) == -42


def test_negative_other_base_is_twos_complement():
    assert int(itoa(-5, 16), 16) == (-5) & 0xFFFFFFFF
    assert not itoa(-5, 16).startswith("-")


def test_lower_case_hex():
    assert itoa(255, 16) == "ff"


def test_binary_digits():
    assert itoa(5, 2) == "101"


@pytest.mark.parametrize("base", [0, 1, 37, -10])
def test_invalid_base_raises(base):
    with pytest.raises(ValueError):
        itoa(10, base)