"""
Exceptions raised by the classification package.

Training and the model store raise these; prediction converts them into
:class:`~classification.types.PredictionFailure` values instead.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .types import PersistenceErrorKind, TrainingErrorKind


class SmartTextReaderError(Exception):
    """Base exception for all project-specific errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class TrainingError(SmartTextReaderError):
    """Training could not produce a pipeline."""

    def __init__(self, kind: TrainingErrorKind, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)
        self.kind = kind


class PersistenceError(SmartTextReaderError):
    """The model artifact is missing or unreadable."""

    def __init__(self, kind: PersistenceErrorKind, message: str, location: Optional[str] = None) -> None:
        super().__init__(message, {"location": location} if location else None)
        self.kind = kind
        self.location = location
