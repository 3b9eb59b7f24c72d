from .text_extractor import PAGE_SEPARATOR, PdfTextExtractor

__all__ = ["PAGE_SEPARATOR", "PdfTextExtractor"]
