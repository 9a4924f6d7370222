"""Alphabet validation and the deterministic shuffle used by the codec."""
from __future__ import annotations

from ..utils.constants import MIN_ALPHABET_LENGTH
from ..utils.errors import (
    AlphabetContainsDuplicatesError,
    AlphabetContainsMultibyteError,
    AlphabetContainsSpacesError,
    AlphabetTooShortError,
)


def validate_alphabet(alphabet: str, minimum: int = MIN_ALPHABET_LENGTH) -> str:
    """Return ``alphabet`` unchanged if the codec can use it, raise otherwise.

    The character order is preserved: two permutations of the same set are
    different codecs.
    """
    if len(alphabet.encode("utf-8")) != len(alphabet):
        raise AlphabetContainsMultibyteError()
    if len(alphabet) < minimum:
        raise AlphabetTooShortError(minimum)
    if len(set(alphabet)) != len(alphabet):
        raise AlphabetContainsDuplicatesError()
    if any(char.isspace() for char in alphabet):
        raise AlphabetContainsSpacesError()
    return alphabet


def shuffle(alphabet: str) -> str:
    """Permute ``alphabet`` as a pure function of its content.

    Two cursors walk towards each other; the swap partner of the left cursor is
    derived from both cursor positions and the characters currently under them.
    """
    chars = list(alphabet)
    size = len(chars)
    i, j = 0, size - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % size
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1
    return "".join(chars)


def rotate(alphabet: str, offset: int) -> str:
    """Move the first ``offset`` characters to the end."""
    return alphabet[offset:] + alphabet[:offset]
