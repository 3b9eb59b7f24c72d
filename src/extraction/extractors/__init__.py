"""Per-format text extractors.

Each supported format has its own subpackage exposing one extractor class that
implements :class:`BaseExtractor`.
"""

from .base import BaseExtractor
from .docx import DocxTextExtractor
from .image import ImageOcrExtractor
from .pdf import PdfTextExtractor

__all__ = [
    "BaseExtractor",
    "DocxTextExtractor",
    "ImageOcrExtractor",
    "PdfTextExtractor",
]
