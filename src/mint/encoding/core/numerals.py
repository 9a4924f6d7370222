"""Positional numeral conversion over an arbitrary alphabet."""
from __future__ import annotations


def to_digits(number: int, alphabet: str) -> str:
    """Encode a non-negative integer using ``alphabet`` as the digit table."""
    base = len(alphabet)
    digits: list[str] = []
    while True:
        number, remainder = divmod(number, base)
        digits.append(alphabet[remainder])
        if number == 0:
            break
    return "".join(reversed(digits))


def from_digits(digits: str, alphabet: str) -> int:
    """Inverse of :func:`to_digits`.

    Raises ``ValueError`` for a character that is not part of ``alphabet``.
    """
    base = len(alphabet)
    number = 0
    for char in digits:
        index = alphabet.find(char)
        if index < 0:
            raise ValueError(f"character {char!r} is not part of the alphabet")
        number = number * base + index
    return number
