"""Domain models: codec configuration and the Sqid identifier value object."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Tuple

from ..utils.constants import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH


@dataclass(frozen=True)
class SqidsOptions:
    """Immutable encoder configuration.

    ``None`` means "not set": the manager fills unset fields from its defaults and
    the encoder falls back to its built-in alphabet, minimum length and word list.
    An empty ``blocklist`` tuple is a deliberate choice that disables filtering.
    """

    alphabet: Optional[str] = None
    min_length: Optional[int] = None
    blocklist: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.blocklist is not None and not isinstance(self.blocklist, tuple):
            object.__setattr__(self, "blocklist", tuple(self.blocklist))

    def with_alphabet(self, alphabet: str) -> "SqidsOptions":
        return replace(self, alphabet=alphabet)

    def with_min_length(self, min_length: int) -> "SqidsOptions":
        return replace(self, min_length=min_length)

    def with_blocklist(self, blocklist: Iterable[str]) -> "SqidsOptions":
        return replace(self, blocklist=tuple(blocklist))

    def merged_over(self, defaults: "SqidsOptions") -> "SqidsOptions":
        """Return these options with unset fields taken from ``defaults``."""
        return SqidsOptions(
            alphabet=self.alphabet if self.alphabet is not None else defaults.alphabet,
            min_length=self.min_length if self.min_length is not None else defaults.min_length,
            blocklist=self.blocklist if self.blocklist is not None else defaults.blocklist,
        )

    def cache_key(self) -> Tuple[str, int, Optional[Tuple[str, ...]]]:
        blocklist = None if self.blocklist is None else tuple(sorted({w.lower() for w in self.blocklist}))
        return (
            self.alphabet if self.alphabet is not None else DEFAULT_ALPHABET,
            self.min_length if self.min_length is not None else DEFAULT_MIN_LENGTH,
            blocklist,
        )


@dataclass(frozen=True)
class Sqid:
    """An encoded identifier together with the numbers it was built from.

    Sqids carry no time component, so ``timestamp`` is always ``None`` and the
    identifiers are not sortable by creation time.
    """

    value: str
    numbers: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.numbers, tuple):
            object.__setattr__(self, "numbers", tuple(self.numbers))

    def __str__(self) -> str:
        return self.value

    def to_string(self) -> str:
        return self.value

    def to_bytes(self) -> bytes:
        return self.value.encode("ascii")

    @property
    def timestamp(self) -> Optional[int]:
        return None

    @property
    def is_sortable(self) -> bool:
        return False

    @property
    def number(self) -> Optional[int]:
        return self.numbers[0] if self.numbers else None

    def decode(self) -> List[int]:
        return list(self.numbers)

    def equals(self, other: object) -> bool:
        return self.value == str(other)

    def to_json(self) -> dict[str, str]:
        return {"value": self.value}
