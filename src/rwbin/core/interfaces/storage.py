"""Byte storage contract.

Why Protocol:
- Structural contract (duck typing) with no inheritance required.
- The conversion service runs against the real filesystem or an in-memory
  store in tests without knowing which.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteStore(Protocol):
    """Minimal raw-byte storage.

    Rules:
    - `write` truncates or creates and returns the number of bytes written.
    - Failures are reported as `rwbin.core.domain.errors` exceptions.
    """

    def write(self, path: Path, data: bytes) -> int:
        ...

    def read(self, path: Path) -> bytes:
        ...

    def exists(self, path: Path) -> bool:
        ...
