"""Document type detection from file names."""

from __future__ import annotations

from pathlib import PurePath

from docaudit.domain.models.enums import DocumentType

_PREFIXES = (
    ("con_", DocumentType.CONCEPT),
    ("ref_", DocumentType.REFERENCE),
    ("proc_", DocumentType.PROCEDURE),
    ("assembly_", DocumentType.ASSEMBLY),
)


def classify(filename: str | PurePath) -> DocumentType:
    """Deduce the document type from the base name of *filename*.

    Explicit prefixes win over everything else; ``master.<ext>`` is the
    master book file and any base name ending in ``attributes.<ext>``
    (``attributes.adoc``, ``local-attributes.adoc``, ...) is an attribute
    definition file. Anything else is ``unknown``.
    """
    name = PurePath(filename).name
    for prefix, doc_type in _PREFIXES:
        if name.startswith(prefix):
            return doc_type

    stem, dot, _ext = name.rpartition(".")
    if not dot:
        return DocumentType.UNKNOWN
    if stem == "master":
        return DocumentType.MASTER
    if stem.endswith("attributes"):
        return DocumentType.ATTRIBUTES
    return DocumentType.UNKNOWN
