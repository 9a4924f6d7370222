"""Generator cache and the fluent Sqid conductor."""
from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Hashable, Iterable, List, Sequence

from .domain.models import Sqid, SqidsOptions
from .generator import SqidGenerator
from .parser.config_loader import load_options
from .utils.constants import DEFAULT_MIN_LENGTH, SCHEMA_JSON_PATH
from .utils.logging import get_logger

LOG = get_logger()


class Mint:
    """Entry point that hands out conductors and caches configured generators.

    Building an encoder validates the alphabet and filters the blocklist, so one
    generator is kept per distinct configuration and shared between callers.
    """

    def __init__(self, defaults: SqidsOptions | None = None) -> None:
        self._defaults = defaults or SqidsOptions()
        self._generators: Dict[Hashable, SqidGenerator] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config_file(cls, config_path: Path, schema_path: Path = SCHEMA_JSON_PATH) -> "Mint":
        return cls(load_options(config_path, schema_path))

    @property
    def defaults(self) -> SqidsOptions:
        return self._defaults

    def sqid(self) -> "SqidConductor":
        return SqidConductor(self)

    def get_generator(self, options: SqidsOptions | None = None) -> SqidGenerator:
        resolved = (options or SqidsOptions()).merged_over(self._defaults)
        key = resolved.cache_key()
        with self._lock:
            generator = self._generators.get(key)
            if generator is None:
                generator = SqidGenerator(
                    resolved.alphabet,
                    resolved.min_length if resolved.min_length is not None else DEFAULT_MIN_LENGTH,
                    resolved.blocklist,
                )
                self._generators[key] = generator
                LOG.debug("created sqid generator (cached=%d)", len(self._generators))
        return generator

    def clear(self) -> None:
        with self._lock:
            self._generators.clear()


@dataclass(frozen=True)
class SqidConductor:
    """Immutable fluent front-end over :class:`Mint`.

    Example::

        mint = Mint()
        mint.sqid().encode([1, 2, 3]).value            # "86Rf07"
        mint.sqid().with_min_length(10).encode_number(42)
    """

    manager: Mint
    options: SqidsOptions = SqidsOptions()

    def with_alphabet(self, alphabet: str) -> "SqidConductor":
        return replace(self, options=self.options.with_alphabet(alphabet))

    def with_min_length(self, min_length: int) -> "SqidConductor":
        return replace(self, options=self.options.with_min_length(min_length))

    def with_blocklist(self, blocklist: Iterable[str]) -> "SqidConductor":
        return replace(self, options=self.options.with_blocklist(blocklist))

    def _generator(self) -> SqidGenerator:
        return self.manager.get_generator(self.options)

    def generate(self) -> Sqid:
        return self._generator().generate()

    def encode(self, numbers: Sequence[int]) -> Sqid:
        return self._generator().encode(numbers)

    def encode_number(self, number: int) -> Sqid:
        return self._generator().encode_number(number)

    def decode(self, value: str) -> List[int]:
        return self._generator().decode(value)

    def parse(self, value: str) -> Sqid:
        return self._generator().parse(value)

    def is_valid(self, value: str) -> bool:
        return self._generator().is_valid(value)
