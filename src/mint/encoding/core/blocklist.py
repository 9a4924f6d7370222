"""Blocklist reduction and matching.

The raw word list is reduced once per encoder: words shorter than three
characters are dropped, as are words using characters the alphabet can never
produce. Words longer than three characters also contribute their leetspeak
spellings (``i``/``l`` as ``1``, ``o`` as ``0``).

Matching is case-insensitive and depends on the word:

* three characters or fewer (or a candidate that short): exact match only;
* containing a digit: match at the start or end of the candidate;
* anything else: match anywhere in the candidate.
"""
from __future__ import annotations

from itertools import product
from typing import AbstractSet, Iterable, Iterator

from ..utils.constants import LEET_SUBSTITUTIONS, MIN_BLOCKLIST_WORD_LENGTH


def leet_variants(word: str) -> Iterator[str]:
    """Yield every leetspeak spelling of ``word`` except ``word`` itself."""
    options = [
        (char, LEET_SUBSTITUTIONS[char]) if char in LEET_SUBSTITUTIONS else (char,)
        for char in word
    ]
    for combination in product(*options):
        variant = "".join(combination)
        if variant != word:
            yield variant


def filter_blocklist(words: Iterable[str], alphabet: str) -> frozenset[str]:
    """Reduce ``words`` to the lowercase entries ``alphabet`` could emit."""
    alphabet_chars = set(alphabet.lower())
    effective: set[str] = set()
    for raw in words:
        word = str(raw).lower()
        if len(word) < MIN_BLOCKLIST_WORD_LENGTH:
            continue
        candidates = [word]
        if len(word) > MIN_BLOCKLIST_WORD_LENGTH:
            candidates.extend(leet_variants(word))
        for candidate in candidates:
            if set(candidate) <= alphabet_chars:
                effective.add(candidate)
    return frozenset(effective)


def is_blocked(candidate: str, blocklist: AbstractSet[str]) -> bool:
    """Return ``True`` when ``candidate`` contains a word from ``blocklist``."""
    value = candidate.lower()
    for word in blocklist:
        if len(word) > len(value):
            continue
        if len(value) <= MIN_BLOCKLIST_WORD_LENGTH or len(word) <= MIN_BLOCKLIST_WORD_LENGTH:
            if value == word:
                return True
        elif any(char.isdigit() for char in word):
            if value.startswith(word) or value.endswith(word):
                return True
        elif word in value:
            return True
    return False
