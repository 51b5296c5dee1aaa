"""Input file checks run before any processing begins."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from docaudit.domain.errors import (
    EXIT_INVALID_ARGUMENT,
    EXIT_NOT_A_FILE,
    EXIT_NOT_FOUND,
    EXIT_PERMISSION_DENIED,
    PreconditionError,
)

ASCIIDOC_SUFFIXES = frozenset({".adoc"})


def require_file(path: Path, suffixes: Iterable[str], kind: str = "an AsciiDoc") -> Path:
    """Return *path* if it is a readable regular file with an accepted suffix.

    Raises:
        PreconditionError: With the exit status matching the problem
            (22 wrong extension, 2 missing, 13 unreadable, 21 not a file).
    """
    path = Path(path)
    if path.suffix.lower() not in {s.lower() for s in suffixes}:
        raise PreconditionError(f"{path}: Not {kind} file", EXIT_INVALID_ARGUMENT)
    if not path.exists():
        raise PreconditionError(f"{path}: No such file or directory", EXIT_NOT_FOUND)
    if not os.access(path, os.R_OK):
        raise PreconditionError(f"{path}: Permission denied", EXIT_PERMISSION_DENIED)
    if not path.is_file():
        raise PreconditionError(f"{path}: Not a file", EXIT_NOT_A_FILE)
    return path
