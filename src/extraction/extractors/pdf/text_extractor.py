"""Page-ordered text extraction for digitally generated PDFs.

Each page's text layer is read with ``pdfplumber`` and followed by a newline,
so the result always ends with a separator after the last page. Scanned PDFs
have no text layer; they still extract successfully, just to blank pages.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, List, Union

import pdfplumber

from ...types import (
    DocumentFormat,
    ExtractionErrorKind,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
)
from ..base import BaseExtractor

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n"


@dataclass
class PdfTextExtractor(BaseExtractor):
    """Concatenate the text of every page of a PDF."""

    format: ClassVar[DocumentFormat] = DocumentFormat.PDF

    def extract(self, path: Union[str, Path]) -> ExtractionResult:
        pages: List[str] = []
        try:
            with pdfplumber.open(path) as pdf:
                for page in pdf.pages:
                    pages.append(page.extract_text() or "")
        except Exception as e:
            logger.warning("Could not parse PDF %s: %s", path, e)
            return ExtractionFailure(ExtractionErrorKind.PARSE_FAILURE, str(e))

        if pages and not any(text.strip() for text in pages):
            logger.warning("PDF %s has no text layer; it is probably scanned", path)

        logger.debug("Extracted %d pages from %s", len(pages), path)
        return ExtractionSuccess("".join(text + PAGE_SEPARATOR for text in pages))
