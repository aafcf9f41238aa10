"""Format enums shared across rwbin.

Keeping them in the domain layer lets the CLI, the settings and the codec
agree on one set of values without importing each other.
"""

from __future__ import annotations

from enum import Enum


class LiteralFormat(str, Enum):
    """Numeric base of a classified literal."""

    DECIMAL = "decimal"
    HEXADECIMAL = "hexadecimal"
    BINARY = "binary"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_prefix(cls, letter: str) -> "LiteralFormat":
        """Map the letter of an `X'` prefix to its format."""

        return _PREFIXES.get(letter, cls.UNSUPPORTED)

    @property
    def is_supported(self) -> bool:
        return self is not LiteralFormat.UNSUPPORTED


_PREFIXES = {
    "b": LiteralFormat.BINARY,
    "h": LiteralFormat.HEXADECIMAL,
    "d": LiteralFormat.DECIMAL,
}


class DumpFormat(str, Enum):
    """Printable representations of a byte sequence."""

    HEX = "hex"
    BIN = "bin"
    DEC = "dec"
    LITERAL = "literal"


class DumpSeparator(str, Enum):
    """Separator placed between bytes in `hex` and `bin` dumps."""

    SPACE = "space"
    NEWLINE = "newline"

    @property
    def joiner(self) -> str:
        return "\n" if self is DumpSeparator.NEWLINE else " "
