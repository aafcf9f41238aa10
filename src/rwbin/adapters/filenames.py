"""Filename sanitation.

A name is accepted when it is non-empty and free of `< > : ; , ? " * | /` and NUL.
Bare names get the `.bin` suffix. Appending the suffix cannot remove a
forbidden character, so a name that fails the character check is rejected.
"""

from __future__ import annotations

import re
from pathlib import PurePath

from rwbin.core.domain.errors import InvalidFilename

DEFAULT_SUFFIX = ".bin"
FORBIDDEN_CHARACTERS = '<>:;,?"*|/'

_FILENAME = re.compile(r"^[^<>:;,?\"*|/\x00]+$")


def is_valid_filename(name: str) -> bool:
    return _FILENAME.fullmatch(name) is not None and bool(name.strip())


def with_default_suffix(name: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """Append `suffix` when `name` has no extension."""

    if PurePath(name).suffix:
        return name
    return name + suffix


def check_filename(name: str) -> str:
    """Return `name` unchanged or raise `InvalidFilename`."""

    if not name.strip():
        raise InvalidFilename("Incorrect filename: the name is empty.")
    if not is_valid_filename(name):
        raise InvalidFilename(
            f"Incorrect filename '{name}': it may not contain any of {FORBIDDEN_CHARACTERS}"
        )
    return name


def resolve_filename(candidate: str, *, suffix: str = DEFAULT_SUFFIX) -> str:
    """Sanitize a user-supplied output name.

    >>> resolve_filename("report")
    'report.bin'
    >>> resolve_filename("dec.bin")
    'dec.bin'
    """

    check_filename(candidate)
    return check_filename(with_default_suffix(candidate, suffix))
