"""Top-level package for the mint Sqids codec."""
from __future__ import annotations

from . import encoding
from .encoding import (
    Mint,
    Sqid,
    SqidConductor,
    SqidGenerator,
    Sqids,
    SqidsOptions,
    load_options,
)
from .encoding.utils.errors import (
    AlphabetContainsDuplicatesError,
    AlphabetContainsMultibyteError,
    AlphabetContainsSpacesError,
    AlphabetError,
    AlphabetTooShortError,
    InvalidSqidFormatError,
    MaxRegenerationAttemptsError,
    MinLengthOutOfRangeError,
    MintError,
    NumberOutOfRangeError,
)

__all__ = [
    "encoding",
    "Mint",
    "Sqid",
    "SqidConductor",
    "SqidGenerator",
    "Sqids",
    "SqidsOptions",
    "load_options",
    "AlphabetContainsDuplicatesError",
    "AlphabetContainsMultibyteError",
    "AlphabetContainsSpacesError",
    "AlphabetError",
    "AlphabetTooShortError",
    "InvalidSqidFormatError",
    "MaxRegenerationAttemptsError",
    "MinLengthOutOfRangeError",
    "MintError",
    "NumberOutOfRangeError",
]
