"""Write/read orchestration.

The CLI delegates everything except flag parsing and printing to these
helpers, so the same flow is reusable from tests or other entry-points.

Ordering on the write path: classify, encode and sanitize the filename
first; the output file is opened only once all of that succeeded, so bad
input never leaves an empty file behind.
"""

from __future__ import annotations

from pathlib import Path

from rwbin.adapters.binary_file import BinaryFileStore
from rwbin.adapters.filenames import check_filename, resolve_filename, with_default_suffix
from rwbin.core.classifier import classify
from rwbin.core.codec import pack_bits, pad_to_byte_boundary, to_bit_string
from rwbin.core.config import AppSettings
from rwbin.core.domain.errors import InvalidLiteral
from rwbin.core.domain.models import ByteDump, WriteResult
from rwbin.core.interfaces.storage import ByteStore


def write_literal(
    token: str,
    filename: str | None = None,
    *,
    settings: AppSettings | None = None,
    store: ByteStore | None = None,
) -> WriteResult:
    """Encode `token` and write the bytes to `filename` (or the default output)."""

    settings = settings or AppSettings()
    store = store or BinaryFileStore()

    literal = classify(token)
    if not literal.is_supported:
        raise InvalidLiteral(f"Invalid value '{token}': {literal.reason}.")

    bits = to_bit_string(
        literal.payload,
        literal.format,
        max_decimal_bits=settings.max_decimal_bits,
    )
    padded = pad_to_byte_boundary(bits)
    data = pack_bits(padded)

    name = resolve_filename(settings.default_output if filename is None else filename)
    path = settings.resolve_path(name)
    store.write(path, data)

    return WriteResult(literal=literal, path=path, bits=bits, padded_bits=padded, data=data)


def locate_input(filename: str, *, settings: AppSettings, store: ByteStore) -> Path:
    """Path to read for `filename`.

    The name is used as given when it exists; a bare name falls back to the
    `.bin` file the write path would have produced.
    """

    check_filename(filename)
    path = settings.resolve_path(filename)
    if store.exists(path):
        return path
    fallback = settings.resolve_path(with_default_suffix(filename))
    if fallback != path and store.exists(fallback):
        return fallback
    return path


def read_file(
    filename: str,
    *,
    settings: AppSettings | None = None,
    store: ByteStore | None = None,
) -> ByteDump:
    """Read every byte of `filename`."""

    settings = settings or AppSettings()
    store = store or BinaryFileStore()

    path = locate_input(filename, settings=settings, store=store)
    return ByteDump(path=path, data=store.read(path))
