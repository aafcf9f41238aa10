"""Domain models (Pydantic v2).

Why Pydantic here:
- Literals are immutable once classified; `frozen=True` enforces it.
- Results carry their own field documentation for the CLI and JSON output.

These models describe *what* was parsed, written or read, never *how*.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

from rwbin.core.domain.formats import LiteralFormat


class NumericLiteral(BaseModel):
    """A user token after classification."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(
        ...,
        description="Token exactly as supplied on the command line.",
    )
    format: LiteralFormat = Field(
        ...,
        description="Detected numeric base, or UNSUPPORTED.",
    )
    payload: str = Field(
        default="",
        description="Significant digits without the `X'` or `0x` prefix.",
    )
    reason: str | None = Field(
        default=None,
        description="Why the token was rejected (only set for UNSUPPORTED).",
    )

    @property
    def is_supported(self) -> bool:
        return self.format.is_supported


class WriteResult(BaseModel):
    """Outcome of encoding a literal and writing it to disk."""

    literal: NumericLiteral
    path: Path = Field(..., description="File that received the bytes.")
    bits: str = Field(
        ...,
        description="Bit string before byte-boundary padding.",
    )
    padded_bits: str = Field(
        ...,
        description="Bit string after left-padding to a multiple of 8.",
    )
    data: bytes = Field(..., description="Packed bytes, most significant first.")

    @property
    def padding(self) -> int:
        return len(self.padded_bits) - len(self.bits)


class ByteDump(BaseModel):
    """Bytes read back from a file.

    `data` is left out of JSON dumps; `hex` carries the same bytes as text.
    """

    path: Path
    data: bytes = Field(default=b"", exclude=True)

    @computed_field
    @property
    def size(self) -> int:
        return len(self.data)

    @computed_field
    @property
    def hex(self) -> str:
        return self.data.hex()

    @computed_field
    @property
    def value(self) -> int:
        """Unsigned big-endian value of the bytes."""

        return int.from_bytes(self.data, "big")
