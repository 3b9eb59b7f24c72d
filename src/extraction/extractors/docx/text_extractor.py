"""Body text extraction for Word (DOCX) packages.

The package is opened through python-docx's OPC layer rather than
:func:`docx.Document`, so a package whose main document part or body is
missing can still be read: it simply has no text. The text of every run
(``w:t``), deleted run (``w:delText``) and field instruction (``w:instrText``)
in the body is concatenated in document order without inserting paragraph
breaks.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Union

from docx.opc.package import OpcPackage
from docx.oxml.ns import qn

from ...types import (
    DocumentFormat,
    ExtractionErrorKind,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
)
from ..base import BaseExtractor

logger = logging.getLogger(__name__)

# Leaf elements whose content counts as document text: runs, deleted runs
# (tracked changes) and field instructions
_TEXT_TAGS = (qn("w:t"), qn("w:delText"), qn("w:instrText"))


@dataclass
class DocxTextExtractor(BaseExtractor):
    """Return the inner text of a DOCX document body."""

    format: ClassVar[DocumentFormat] = DocumentFormat.DOCX

    def extract(self, path: Union[str, Path]) -> ExtractionResult:
        try:
            package = OpcPackage.open(str(path))
            try:
                document_part = package.main_document_part
            except KeyError:
                logger.debug("DOCX %s has no main document part", path)
                return ExtractionSuccess("")

            body = getattr(getattr(document_part, "element", None), "body", None)
            if body is None:
                logger.debug("DOCX %s has no document body", path)
                return ExtractionSuccess("")

            text = "".join(node.text or "" for node in body.iter(*_TEXT_TAGS))
        except Exception as e:
            logger.warning("Could not parse DOCX %s: %s", path, e)
            return ExtractionFailure(ExtractionErrorKind.PARSE_FAILURE, str(e))

        return ExtractionSuccess(text)
