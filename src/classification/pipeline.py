"""Train-once, predict-many document classifier.

:class:`TextClassifier` owns the current :class:`TrainedPipeline`. Training
replaces it and persists it through a :class:`ModelStore`; prediction uses
the pipeline in memory, falls back to the stored artifact, and reports a
:class:`PredictionFailure` when neither is available.
"""
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from config import settings
from config.settings import ClassifierSettings

from .errors import PersistenceError, TrainingError
from .featurizer import build_pipeline
from .model_store import ModelStore
from .types import (
    LabeledSample,
    PersistenceErrorKind,
    Prediction,
    PredictionErrorKind,
    PredictionFailure,
    PredictionResult,
    TrainedPipeline,
    TrainingErrorKind,
)

logger = logging.getLogger(__name__)

SampleLike = Union[LabeledSample, Tuple[str, str]]


def _as_samples(samples: Iterable[SampleLike]) -> List[LabeledSample]:
    return [s if isinstance(s, LabeledSample) else LabeledSample(*s) for s in samples]


def label_vocabulary(samples: Sequence[LabeledSample]) -> Tuple[str, ...]:
    """Distinct labels in the order they first appear."""
    return tuple(dict.fromkeys(s.label for s in samples))


class TextClassifier:
    """Classify text into the labels seen at training time."""

    def __init__(
        self,
        store: Optional[ModelStore] = None,
        classifier_settings: Optional[ClassifierSettings] = None,
    ) -> None:
        self.store = store or ModelStore()
        self.settings = classifier_settings or settings.classifier
        self._pipeline: Optional[TrainedPipeline] = None
        self._lock = threading.Lock()

    @property
    def is_trained(self) -> bool:
        """True when a pipeline is held in memory."""
        return self._pipeline is not None

    def reset(self) -> None:
        """Forget the in-memory pipeline; the stored artifact is left alone."""
        with self._lock:
            self._pipeline = None

    def train(self, samples: Iterable[SampleLike]) -> TrainedPipeline:
        """Fit a new pipeline on ``samples``, persist it and make it current.

        Raises:
            TrainingError: ``EMPTY_DATASET`` when ``samples`` is empty.
        """
        samples = _as_samples(samples)
        if not samples:
            raise TrainingError(TrainingErrorKind.EMPTY_DATASET, "Cannot train on an empty dataset")

        labels = label_vocabulary(samples)
        keys = {label: key for key, label in enumerate(labels)}

        model = build_pipeline(len(labels), self.settings)
        model.fit([s.text for s in samples], [keys[s.label] for s in samples])

        pipeline = TrainedPipeline(model=model, labels=labels, n_samples=len(samples))
        logger.info("Trained classifier on %d samples with labels %s", len(samples), list(labels))

        # Artifact and in-memory reference change together
        with self._lock:
            self.store.save(pipeline)
            self._pipeline = pipeline
        return pipeline

    def _resolve(self) -> TrainedPipeline:
        with self._lock:
            if self._pipeline is None:
                self._pipeline = self.store.load()
                logger.info("Loaded classifier from %s", self.store.location)
            return self._pipeline

    def predict(self, text: str) -> Prediction:
        """Return the most likely label for ``text``.

        A missing model yields ``MODEL_UNAVAILABLE``; an unreadable artifact,
        or a loaded model that fails while predicting, yields ``CORRUPT`` and
        is not replaced.
        """
        try:
            pipeline = self._resolve()
        except PersistenceError as e:
            if e.kind is PersistenceErrorKind.NOT_FOUND:
                return PredictionFailure(
                    PredictionErrorKind.MODEL_UNAVAILABLE,
                    "Model not trained. Call train() first.",
                )
            logger.error("Stored model is unusable: %s", e)
            return PredictionFailure(e.kind, e.message)

        try:
            key = pipeline.model.predict([text])[0]
            label = pipeline.label_for(key)
        except Exception as e:
            logger.error("Model failed to predict: %s", e)
            return PredictionFailure(PersistenceErrorKind.CORRUPT, f"Model failed to predict: {e}")
        return PredictionResult(label)
