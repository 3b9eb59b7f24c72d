"""OCR text extraction for raster images (JPEG, PNG).

Recognition is delegated to Tesseract through ``pytesseract``. The engine
needs its language data (``tessdata``) at a fixed location relative to the
process base directory; when that directory is missing the extractor reports
a ``RESOURCE_MISSING`` failure without starting the engine.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Optional, Union

import pytesseract
from PIL import Image

from config import settings

from ...types import (
    DocumentFormat,
    ExtractionErrorKind,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
)
from ..base import BaseExtractor

logger = logging.getLogger(__name__)


@dataclass
class ImageOcrExtractor(BaseExtractor):
    """Recognise the text of an image file with Tesseract."""

    format: ClassVar[DocumentFormat] = DocumentFormat.IMAGE

    tessdata_dir: Optional[Path] = None
    language: str = field(default_factory=lambda: settings.extraction.ocr_language)

    def __post_init__(self) -> None:
        if self.tessdata_dir is None:
            self.tessdata_dir = settings.extraction.tessdata_path

    def extract(self, path: Union[str, Path]) -> ExtractionResult:
        """Return the text exactly as emitted by the OCR engine."""
        tessdata_dir = Path(self.tessdata_dir)
        if not tessdata_dir.is_dir():
            message = f"tessdata folder not found at {tessdata_dir}"
            logger.warning(message)
            return ExtractionFailure(ExtractionErrorKind.RESOURCE_MISSING, message)

        try:
            with Image.open(path) as image:
                text = pytesseract.image_to_string(
                    image,
                    lang=self.language,
                    config=f'--tessdata-dir "{tessdata_dir}"',
                )
        except Exception as e:
            logger.warning("OCR failed for %s: %s", path, e)
            return ExtractionFailure(ExtractionErrorKind.ENGINE_FAILURE, str(e))

        logger.debug("OCR extracted %d characters from %s", len(text), path)
        return ExtractionSuccess(text)
