"""Byte encoder/decoder.

Encoding is three steps, each usable on its own (the CLI's verbose trace
prints the intermediate bit strings):

1. `to_bit_string`: payload -> bits, no byte padding yet
2. `pad_to_byte_boundary`: left-pad with zeros to a multiple of 8
3. `pack_bits`: 8-bit groups, most significant first -> bytes
"""

from __future__ import annotations

from rwbin.core.classifier import is_valid_payload
from rwbin.core.domain.errors import InvalidLiteral
from rwbin.core.domain.formats import DumpFormat, DumpSeparator, LiteralFormat

DEFAULT_MAX_DECIMAL_BITS = 64
BYTE_BITS = 8
NIBBLE_BITS = 4


def _hex_to_bits(payload: str) -> str:
    # Odd digit counts get one extra zero nibble so the digits pair into bytes.
    bits = "0" * NIBBLE_BITS if len(payload) % 2 else ""
    return bits + "".join(format(int(digit, 16), "04b") for digit in payload)


def to_bit_string(
    payload: str,
    fmt: LiteralFormat,
    *,
    max_decimal_bits: int | None = DEFAULT_MAX_DECIMAL_BITS,
) -> str:
    """Expand `payload` into a string of '0'/'1' characters."""

    if not fmt.is_supported:
        raise InvalidLiteral("Unsupported literal format.")
    if not is_valid_payload(payload, fmt):
        raise InvalidLiteral(f"'{payload}' is not a valid {fmt.value} number.")

    if fmt is LiteralFormat.BINARY:
        return payload
    if fmt is LiteralFormat.HEXADECIMAL:
        return _hex_to_bits(payload)

    try:
        value = int(payload, 10)
    except ValueError as exc:
        # int() refuses strings beyond sys.get_int_max_str_digits().
        raise InvalidLiteral(f"{payload[:16]}... is too long.") from exc
    if max_decimal_bits is not None and value.bit_length() > max_decimal_bits:
        raise InvalidLiteral(
            f"{payload} does not fit in {max_decimal_bits} bits."
        )
    return format(value, "b") if value else ""


def pad_to_byte_boundary(bits: str) -> str:
    """Left-pad `bits` with zeros to a whole number of bytes (at least one)."""

    if not bits:
        return "0" * BYTE_BITS
    return "0" * (-len(bits) % BYTE_BITS) + bits


def pack_bits(bits: str) -> bytes:
    """Pack a byte-aligned bit string into bytes, most significant first."""

    if len(bits) % BYTE_BITS:
        raise ValueError("Bit string length must be a multiple of 8")
    return bytes(int(bits[i : i + BYTE_BITS], 2) for i in range(0, len(bits), BYTE_BITS))


def encode(
    payload: str,
    fmt: LiteralFormat,
    *,
    max_decimal_bits: int | None = DEFAULT_MAX_DECIMAL_BITS,
) -> bytes:
    """Encode a payload to its minimal big-endian byte sequence.

    Raises `InvalidLiteral` for UNSUPPORTED formats, malformed payloads and
    decimal values wider than `max_decimal_bits`.
    """

    bits = to_bit_string(payload, fmt, max_decimal_bits=max_decimal_bits)
    return pack_bits(pad_to_byte_boundary(bits))


def decode(data: bytes) -> int:
    """Unsigned big-endian value of `data` (0 for no bytes)."""

    return int.from_bytes(data, "big")


def to_literal(data: bytes) -> str:
    """An `h'` literal that encodes back to exactly `data`."""

    if not data:
        return ""
    return "h'" + data.hex().upper()


def render(
    data: bytes,
    fmt: DumpFormat = DumpFormat.HEX,
    separator: DumpSeparator = DumpSeparator.SPACE,
) -> str:
    """Printable representation of `data`.

    `hex` and `bin` print one token per byte joined by `separator`; `dec`
    and `literal` describe the whole sequence as a single value.
    """

    if fmt is DumpFormat.HEX:
        return separator.joiner.join(f"{byte:02x}" for byte in data)
    if fmt is DumpFormat.BIN:
        return separator.joiner.join(f"{byte:08b}" for byte in data)
    if fmt is DumpFormat.DEC:
        return str(decode(data))
    return to_literal(data)
