from .ocr_extractor import ImageOcrExtractor

__all__ = ["ImageOcrExtractor"]
