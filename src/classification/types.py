"""Data types of the text classification pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Tuple, Union

# Bumped whenever the pickled layout of TrainedPipeline changes
ARTIFACT_VERSION = 1


class TrainingErrorKind(str, Enum):
    EMPTY_DATASET = "empty_dataset"


class PredictionErrorKind(str, Enum):
    MODEL_UNAVAILABLE = "model_unavailable"


class PersistenceErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class LabeledSample:
    """One training example."""

    text: str
    label: str


@dataclass(frozen=True)
class TrainedPipeline:
    """Fitted featurizer and classifier plus the label vocabulary.

    ``model`` is a fitted scikit-learn pipeline whose classes are integer keys;
    ``labels[key]`` is the label string for a key. Instances are never
    modified after training, so they can be shared between threads.
    """

    model: Any
    labels: Tuple[str, ...]
    n_samples: int
    version: int = ARTIFACT_VERSION
    trained_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def label_for(self, key: int) -> str:
        return self.labels[int(key)]


@dataclass(frozen=True)
class PredictionResult:
    predicted_label: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class PredictionFailure:
    """Prediction could not run; ``kind`` tells the caller what to do next.

    ``MODEL_UNAVAILABLE`` means train first. ``CORRUPT`` means an artifact
    exists but is unreadable; the caller decides whether to retrain.
    """

    kind: Union[PredictionErrorKind, PersistenceErrorKind]
    message: str

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


Prediction = Union[PredictionResult, PredictionFailure]
