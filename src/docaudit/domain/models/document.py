"""One source file opened for testing."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

from docaudit.domain.models.enums import DocumentType
from docaudit.markup import (
    Heading,
    classify,
    has_steps,
    iter_attributes,
    iter_headings,
    iter_ids,
    strip_comments,
)


@dataclass
class Document:
    """A file path plus its raw text.

    ``type`` is inferred from the file name at construction; ``content`` and
    every extracted element are computed on first access and cached for the
    lifetime of the object, which is a single validation pass.
    """

    path: Path
    raw: str
    type: DocumentType = field(init=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.type = classify(self.path)

    @classmethod
    def from_file(cls, path: Path) -> Document:
        """Read *path* as UTF-8 and wrap it."""
        path = Path(path)
        return cls(path=path, raw=path.read_text(encoding="utf-8", errors="replace"))

    # -- Derived views ---------------------------------------------------

    @cached_property
    def content(self) -> str:
        """Comment-stripped text every rule operates on."""
        return strip_comments(self.raw)

    @cached_property
    def ids(self) -> list[str]:
        return list(iter_ids(self.content))

    @cached_property
    def headings(self) -> list[Heading]:
        return list(iter_headings(self.content))

    @cached_property
    def has_steps(self) -> bool:
        return has_steps(self.content)

    @cached_property
    def attributes(self) -> dict[str, str]:
        """Attribute definitions; the last definition of a name wins."""
        return dict(iter_attributes(self.content))

    @property
    def resolved_path(self) -> Path:
        return self.path.resolve()
