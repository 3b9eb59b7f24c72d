"""Routing of extraction requests to format-specific extractors."""

from .format_router import ExtractionDispatcher, default_extractors

__all__ = ["ExtractionDispatcher", "default_extractors"]
