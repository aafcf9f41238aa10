"""Literal classification.

Accepted surface syntaxes:
- `b'0110`, `h'00FF`, `d'10`   prefix letter plus apostrophe
- `0xFAB0` / `0XFAB0`          hexadecimal only
- `255`                         bare digits, decimal only

Anything else classifies as UNSUPPORTED with an empty payload and a reason.
"""

from __future__ import annotations

import re

from rwbin.core.domain.formats import LiteralFormat
from rwbin.core.domain.models import NumericLiteral

_PREFIXED = re.compile(r"^([bhd])'(.+)$", re.DOTALL)
_HEX_0X = re.compile(r"^0[xX]([0-9A-Fa-f]+)$")

_PAYLOAD_PATTERNS: dict[LiteralFormat, re.Pattern[str]] = {
    LiteralFormat.BINARY: re.compile(r"^[01]+$"),
    LiteralFormat.HEXADECIMAL: re.compile(r"^[0-9A-Fa-f]+$"),
    LiteralFormat.DECIMAL: re.compile(r"^[0-9]+$"),
}


def is_valid_payload(payload: str, fmt: LiteralFormat) -> bool:
    """True when `payload` is made only of digits legal in `fmt`."""

    pattern = _PAYLOAD_PATTERNS.get(fmt)
    if pattern is None:
        return False
    # fullmatch: `$` alone would accept a trailing newline.
    return pattern.fullmatch(payload) is not None


def _unsupported(token: str, reason: str) -> NumericLiteral:
    return NumericLiteral(token=token, format=LiteralFormat.UNSUPPORTED, reason=reason)


def classify(token: str) -> NumericLiteral:
    """Detect the format of `token` and extract its payload."""

    if not token:
        return _unsupported(token, "empty value")

    prefixed = _PREFIXED.fullmatch(token)
    if prefixed:
        letter, payload = prefixed.groups()
        fmt = LiteralFormat.from_prefix(letter)
        if not is_valid_payload(payload, fmt):
            return _unsupported(token, f"'{payload}' is not a valid {fmt.value} number")
        return NumericLiteral(token=token, format=fmt, payload=payload)

    hex_match = _HEX_0X.fullmatch(token)
    if hex_match:
        return NumericLiteral(
            token=token,
            format=LiteralFormat.HEXADECIMAL,
            payload=hex_match.group(1),
        )

    if is_valid_payload(token, LiteralFormat.DECIMAL):
        return NumericLiteral(token=token, format=LiteralFormat.DECIMAL, payload=token)

    if token.startswith("-") and is_valid_payload(token[1:], LiteralFormat.DECIMAL):
        return _unsupported(token, "negative values are not supported")
    return _unsupported(token, "not a decimal, hexadecimal or binary literal")
