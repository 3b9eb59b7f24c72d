"""Request and result types shared by every extraction strategy.

Extraction never raises. Each call produces exactly one of
:class:`ExtractionSuccess` or :class:`ExtractionFailure`, and failures carry an
:class:`ExtractionErrorKind` plus a human-readable message.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union


class DocumentFormat(str, Enum):
    """Document formats with a dedicated extraction strategy."""

    IMAGE = "image"
    PDF = "pdf"
    DOCX = "docx"


class ExtractionErrorKind(str, Enum):
    RESOURCE_MISSING = "resource_missing"
    ENGINE_FAILURE = "engine_failure"
    PARSE_FAILURE = "parse_failure"
    UNSUPPORTED_FORMAT = "unsupported_format"


# Lower-cased file suffix -> format
EXTENSION_FORMATS: Dict[str, DocumentFormat] = {
    ".jpg": DocumentFormat.IMAGE,
    ".jpeg": DocumentFormat.IMAGE,
    ".png": DocumentFormat.IMAGE,
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.DOCX,
}


def infer_format(path: Union[str, Path]) -> Optional[DocumentFormat]:
    """Return the format implied by the file suffix, or ``None``.

    Only the name is inspected; the file itself is never opened.
    """
    return EXTENSION_FORMATS.get(Path(path).suffix.lower())


@dataclass(frozen=True)
class ExtractionRequest:
    """A file to extract, with an optional explicit format."""

    path: Union[str, Path]
    declared_format: Optional[DocumentFormat] = None


@dataclass(frozen=True)
class ExtractionSuccess:
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ExtractionFailure:
    kind: ExtractionErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


ExtractionResult = Union[ExtractionSuccess, ExtractionFailure]
