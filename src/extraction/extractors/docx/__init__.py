from .text_extractor import DocxTextExtractor

__all__ = ["DocxTextExtractor"]
