"""Route extraction requests to the extractor for their document format.

The format is either declared by the caller or inferred from the file suffix.
Files whose suffix is not recognised are rejected with ``UNSUPPORTED_FORMAT``
before any extractor runs.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from ..extractors import BaseExtractor, DocxTextExtractor, ImageOcrExtractor, PdfTextExtractor
from ..types import (
    DocumentFormat,
    ExtractionErrorKind,
    ExtractionFailure,
    ExtractionRequest,
    ExtractionResult,
    infer_format,
)

logger = logging.getLogger(__name__)


def default_extractors() -> Dict[DocumentFormat, BaseExtractor]:
    return {
        DocumentFormat.IMAGE: ImageOcrExtractor(),
        DocumentFormat.PDF: PdfTextExtractor(),
        DocumentFormat.DOCX: DocxTextExtractor(),
    }


class ExtractionDispatcher:
    """Dispatch each request to exactly one extractor."""

    def __init__(self, extractors: Optional[Iterable[BaseExtractor]] = None) -> None:
        """
        Args:
            extractors: Replacement extractors, keyed by their ``format``.
                Formats not covered fall back to the default extractor.
        """
        self.extractors = default_extractors()
        for extractor in extractors or ():
            self.extractors[extractor.format] = extractor

    def dispatch(self, request: ExtractionRequest) -> ExtractionResult:
        """Extract the text of ``request.path``.

        A declared format is trusted as-is; otherwise the suffix decides. The
        selected extractor is invoked once, without retries.
        """
        doc_format = request.declared_format or infer_format(request.path)
        if doc_format is None:
            message = f"Unsupported file type: '{Path(request.path).suffix or request.path}'"
            logger.info(message)
            return ExtractionFailure(ExtractionErrorKind.UNSUPPORTED_FORMAT, message)

        extractor = self.extractors.get(doc_format)
        if extractor is None:
            message = f"No extractor for declared format: {doc_format!r}"
            logger.info(message)
            return ExtractionFailure(ExtractionErrorKind.UNSUPPORTED_FORMAT, message)

        logger.debug("Extracting %s as %s", request.path, getattr(doc_format, "value", doc_format))
        return extractor.extract(request.path)

    def extract(
        self,
        path: Union[str, Path],
        declared_format: Optional[DocumentFormat] = None,
    ) -> ExtractionResult:
        """Shorthand for :meth:`dispatch` with a freshly built request."""
        return self.dispatch(ExtractionRequest(path, declared_format))
