"""Exception hierarchy shared across the codec, generator and configuration layers."""
from __future__ import annotations


class MintError(Exception):
    """Base class for all mint failures."""


class AlphabetError(MintError, ValueError):
    """Base class for alphabets the encoder cannot work with."""


class AlphabetTooShortError(AlphabetError):
    def __init__(self, minimum: int) -> None:
        super().__init__(f"Alphabet length must be at least {minimum}")
        self.minimum = minimum


class AlphabetContainsDuplicatesError(AlphabetError):
    def __init__(self) -> None:
        super().__init__("Alphabet must contain unique characters")


class AlphabetContainsMultibyteError(AlphabetError):
    def __init__(self) -> None:
        super().__init__("Alphabet cannot contain multibyte characters")


class AlphabetContainsSpacesError(AlphabetError):
    def __init__(self) -> None:
        super().__init__("Alphabet cannot contain whitespace characters")


class MinLengthOutOfRangeError(MintError, ValueError):
    def __init__(self, minimum: int, maximum: int) -> None:
        super().__init__(f"Minimum length has to be between {minimum} and {maximum}")


class NumberOutOfRangeError(MintError, ValueError):
    def __init__(self, max_value: int) -> None:
        super().__init__(f"Encoding supports numbers between 0 and {max_value}")


class MaxRegenerationAttemptsError(MintError, ValueError):
    def __init__(self) -> None:
        super().__init__("Reached max attempts to re-generate the ID")


class InvalidSqidFormatError(MintError, ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f'Invalid Sqid format: "{value}"')
        self.value = value


class ConfigFileNotFound(MintError):
    pass


class SchemaValidationError(MintError):
    pass


class InvalidConfigurationError(MintError):
    pass
