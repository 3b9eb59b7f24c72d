"""
Document Text Extraction Module

This module turns documents into plain text through one interface:
- Extractors: one per supported format (image OCR, PDF, DOCX)
- Routers: format selection by declared type or file suffix
- Types: requests and tagged success/failure results

Extraction never raises; failures come back as ``ExtractionFailure`` values.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .extractors import BaseExtractor, DocxTextExtractor, ImageOcrExtractor, PdfTextExtractor
from .routers import ExtractionDispatcher
from .types import (
    DocumentFormat,
    ExtractionErrorKind,
    ExtractionFailure,
    ExtractionRequest,
    ExtractionResult,
    ExtractionSuccess,
    infer_format,
)


def extract_text(
    path: Union[str, Path],
    declared_format: Optional[DocumentFormat] = None,
) -> ExtractionResult:
    """Extract text from a single document.

    This is a convenience wrapper around :class:`ExtractionDispatcher`.
    """
    return ExtractionDispatcher().extract(path, declared_format)


__all__ = [
    "extract_text",
    "BaseExtractor",
    "DocxTextExtractor",
    "ImageOcrExtractor",
    "PdfTextExtractor",
    "ExtractionDispatcher",
    "DocumentFormat",
    "ExtractionErrorKind",
    "ExtractionFailure",
    "ExtractionRequest",
    "ExtractionResult",
    "ExtractionSuccess",
    "infer_format",
]
