"""Common interface for the per-format text extractors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Union

from ..types import DocumentFormat, ExtractionResult


class BaseExtractor(ABC):
    """Turn a file path into an :data:`ExtractionResult`.

    Implementations must not raise: library and engine errors are reported as
    :class:`~extraction.types.ExtractionFailure` values.
    """

    format: ClassVar[DocumentFormat]

    @abstractmethod
    def extract(self, path: Union[str, Path]) -> ExtractionResult:
        """Extract the plain text of the document at ``path``."""
