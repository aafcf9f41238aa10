"""Raw binary file I/O.

The file format is the byte sequence itself: no header, no length prefix and
no magic number.
"""

from __future__ import annotations

from pathlib import Path

from rwbin.core.domain.errors import (
    FileNotFound,
    FileOpenFailure,
    FileUnreadable,
    FileWriteFailure,
)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


class BinaryFileStore:
    """`ByteStore` backed by the local filesystem."""

    def write(self, path: Path, data: bytes) -> int:
        try:
            handle = path.open("wb")
        except ValueError as exc:
            raise FileOpenFailure(f"Cannot open {path!r} for writing: {exc}") from exc
        except OSError as exc:
            raise FileOpenFailure(f"Cannot open {path} for writing: {_describe(exc)}") from exc

        try:
            with handle:
                written = handle.write(data)
        except OSError as exc:
            raise FileWriteFailure(f"Error while writing {path}: {_describe(exc)}") from exc

        if written != len(data):
            raise FileWriteFailure(f"Wrote {written} of {len(data)} bytes to {path}")
        return written

    def read(self, path: Path) -> bytes:
        try:
            with path.open("rb") as handle:
                return handle.read()
        except FileNotFoundError as exc:
            raise FileNotFound(f"Cannot open {path}: no such file") from exc
        except ValueError as exc:
            raise FileUnreadable(f"Cannot read {path!r}: {exc}") from exc
        except OSError as exc:
            raise FileUnreadable(f"Cannot read {path}: {_describe(exc)}") from exc

    def exists(self, path: Path) -> bool:
        return path.is_file()
