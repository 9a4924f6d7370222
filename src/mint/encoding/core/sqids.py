"""Sqids encoder engine.

Turns ordered sequences of non-negative integers into short strings over a
configurable alphabet and back. The output is deterministic, padded to a
minimum length on request, and steered away from blocklisted words by
re-encoding with a shifted starting rotation.
"""
from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from ..utils.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_BLOCKLIST,
    DEFAULT_MIN_LENGTH,
    MIN_ALPHABET_LENGTH,
    MIN_LENGTH_LIMIT,
)
from ..utils.errors import (
    MaxRegenerationAttemptsError,
    MinLengthOutOfRangeError,
    NumberOutOfRangeError,
)
from ..utils.logging import get_logger
from .alphabet import rotate, shuffle, validate_alphabet
from .blocklist import filter_blocklist, is_blocked
from .numerals import from_digits, to_digits

LOG = get_logger()


class Sqids:
    """Encode and decode integer sequences.

    ``alphabet=None`` selects :data:`DEFAULT_ALPHABET` and ``blocklist=None``
    the bundled word list; an explicitly empty blocklist disables filtering.
    Instances hold no mutable state after construction and may be shared
    between threads.
    """

    def __init__(
        self,
        alphabet: Optional[str] = None,
        min_length: int = DEFAULT_MIN_LENGTH,
        blocklist: Optional[Iterable[str]] = None,
    ) -> None:
        alphabet = validate_alphabet(
            DEFAULT_ALPHABET if alphabet is None else alphabet,
            MIN_ALPHABET_LENGTH,
        )
        if not 0 <= min_length <= MIN_LENGTH_LIMIT:
            raise MinLengthOutOfRangeError(0, MIN_LENGTH_LIMIT)

        words = DEFAULT_BLOCKLIST if blocklist is None else blocklist
        self._min_length = min_length
        self._blocklist = filter_blocklist(words, alphabet)
        self._alphabet = shuffle(alphabet)
        LOG.debug(
            "sqids encoder ready: alphabet=%d chars, min_length=%d, effective blocklist=%d words",
            len(self._alphabet),
            self._min_length,
            len(self._blocklist),
        )

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def blocklist(self) -> frozenset[str]:
        """Effective blocklist after alphabet filtering and leet expansion."""
        return self._blocklist

    @property
    def max_value(self) -> int:
        return sys.maxsize

    def encode(self, numbers: Sequence[int]) -> str:
        numbers = list(numbers)
        if not numbers:
            return ""
        for number in numbers:
            if not 0 <= number <= self.max_value:
                raise NumberOutOfRangeError(self.max_value)

        for increment in range(len(self._alphabet) + 1):
            candidate = self._encode_attempt(numbers, increment)
            if not is_blocked(candidate, self._blocklist):
                return candidate
            LOG.debug("blocked id %r, re-encoding with increment %d", candidate, increment + 1)
        raise MaxRegenerationAttemptsError()

    def decode(self, value: str) -> List[int]:
        """Recover the numbers behind ``value``.

        Returns an empty list for anything this encoder could not have produced
        from its alphabet instead of raising.
        """
        if not value:
            return []
        if any(char not in self._alphabet for char in value):
            return []

        offset = self._alphabet.index(value[0])
        alphabet = rotate(self._alphabet, offset)[::-1]
        remainder = value[1:]

        numbers: List[int] = []
        while remainder:
            separator = alphabet[0]
            chunk, found, rest = remainder.partition(separator)
            # An empty chunk marks the start of the padding block.
            if not chunk:
                return numbers
            try:
                numbers.append(from_digits(chunk, alphabet[1:]))
            except ValueError:
                return []
            if found:
                alphabet = shuffle(alphabet)
            remainder = rest
        return numbers

    def _encode_attempt(self, numbers: Sequence[int], increment: int) -> str:
        size = len(self._alphabet)
        offset = len(numbers)
        for index, number in enumerate(numbers):
            offset += ord(self._alphabet[number % size]) + index
        offset %= size
        offset = (offset + increment) % size

        alphabet = rotate(self._alphabet, offset)
        prefix = alphabet[0]
        alphabet = alphabet[::-1]

        parts = [prefix]
        for index, number in enumerate(numbers):
            parts.append(to_digits(number, alphabet[1:]))
            if index < len(numbers) - 1:
                parts.append(alphabet[0])
                alphabet = shuffle(alphabet)
        result = "".join(parts)

        if self._min_length > len(result):
            result += alphabet[0]
            while len(result) < self._min_length:
                alphabet = shuffle(alphabet)
                result += alphabet[: min(self._min_length - len(result), size)]
        return result
