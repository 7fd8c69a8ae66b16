"""Integer to text conversion in an arbitrary base."""

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_WORD_MASK = 0xFFFFFFFF


def itoa(num: int, base: int = 10) -> str:
    """Return ``num`` written in ``base`` (2 to 36) with lower-case digits.

    Only base 10 gets a leading minus sign. In any other base a negative
    number is written as its 32-bit two's complement.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, not {base}")
    if num == 0:
        return "0"

    negative = num < 0 and base == 10
    if negative:
        num = -num
    elif num < 0:
        num &= _WORD_MASK

    digits = []
    while num:
        num, rem = divmod(num, base)
        digits.append(_DIGITS[rem])
    if negative:
        digits.append("-")
    return "".join(reversed(digits))