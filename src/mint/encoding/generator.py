"""Sqid generator: the identifier-facing wrapper around the codec."""
from __future__ import annotations

import threading
import time
from itertools import count
from typing import Iterable, List, Optional, Sequence

from .core.sqids import Sqids
from .domain.models import Sqid
from .utils.constants import DEFAULT_MIN_LENGTH, GENERATE_COUNTER_WRAP, GENERATOR_NAME
from .utils.errors import InvalidSqidFormatError, NumberOutOfRangeError

_COUNTER = count()
_COUNTER_LOCK = threading.Lock()


def _time_ns() -> int:
    return time.time_ns()


def _next_sequence() -> int:
    with _COUNTER_LOCK:
        return next(_COUNTER) % GENERATE_COUNTER_WRAP


class SqidGenerator:
    """Encode, decode, validate and generate Sqids with one fixed configuration."""

    name = GENERATOR_NAME

    def __init__(
        self,
        alphabet: Optional[str] = None,
        min_length: int = DEFAULT_MIN_LENGTH,
        blocklist: Optional[Iterable[str]] = None,
    ) -> None:
        self._sqids = Sqids(alphabet, min_length, blocklist)

    @property
    def sqids(self) -> Sqids:
        return self._sqids

    def generate(self) -> Sqid:
        """Encode the current epoch milliseconds combined with a wrapping counter.

        The counter keeps up to a thousand calls within the same millisecond
        distinct.
        """
        epoch_ms = _time_ns() // 1_000_000
        return self.encode_number(epoch_ms * GENERATE_COUNTER_WRAP + _next_sequence())

    def encode(self, numbers: Sequence[int]) -> Sqid:
        numbers = tuple(numbers)
        return Sqid(self._sqids.encode(numbers), numbers)

    def encode_number(self, number: int) -> Sqid:
        return self.encode([number])

    def decode(self, value: str) -> List[int]:
        return self._sqids.decode(value)

    def is_valid(self, value: str) -> bool:
        """Check that ``value`` is the canonical encoding of what it decodes to."""
        if not value:
            return False
        numbers = self._sqids.decode(value)
        if not numbers:
            return False
        try:
            return self._sqids.encode(numbers) == value
        except NumberOutOfRangeError:
            return False

    def parse(self, value: str) -> Sqid:
        if not self.is_valid(value):
            raise InvalidSqidFormatError(value)
        return Sqid(value, tuple(self._sqids.decode(value)))
