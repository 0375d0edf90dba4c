from collections.abc import Iterable

from digitlist.errors import InvalidDigitError


def ensure_digit(value, base: int) -> int:
    """Return `value` if it is a valid digit in `base`, otherwise raise InvalidDigitError."""
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDigitError(value, base)
    if value < 0 or value >= base:
        raise InvalidDigitError(value, base)
    return value


def digits_to_int(digits: Iterable[int], base: int) -> int:
    """
    Fold a most-significant-first digit sequence into an integer.

    Args:
        digits: Digits, most significant first. Every digit is validated against `base`.
        base: Radix of the digits.

    Returns:
        The represented value, 0 for an empty sequence.
    """
    value = 0
    for digit in digits:
        value = value * base + ensure_digit(digit, base)
    return value


def int_to_digits(value: int | None, base: int) -> list[int]:
    """
    Explode a non-negative integer into its digits in `base`, most significant first.

    Zero and None produce an empty list, which is how a digit list represents zero.
    """
    if base < 2:
        raise ValueError(f"Base must be at least 2, got {base}")
    if value is None:
        return []
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Value must be an integer, got {value!r}")
    if value == 0:
        return []
    if value < 0:
        raise ValueError("Negative not allowed")

    # Remainders come out least significant first
    reversed_digits = []
    while value > 0:
        value, remainder = divmod(value, base)
        reversed_digits.append(remainder)
    reversed_digits.reverse()
    return reversed_digits
