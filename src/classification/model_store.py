"""On-disk persistence of trained pipelines.

The artifact is a ``joblib`` dump of a small envelope holding the format
version, the save time and the :class:`TrainedPipeline`. Saves go to a
temporary file in the target directory which is then renamed over the
artifact, so readers see either the old or the new model, never a partial
one.
"""
from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import joblib

from config import settings

from .errors import PersistenceError
from .types import ARTIFACT_VERSION, PersistenceErrorKind, TrainedPipeline

logger = logging.getLogger(__name__)


def _keys_cover(classes, n_labels: int) -> bool:
    """True when every class key is a valid index into the label vocabulary."""
    try:
        return all(0 <= int(key) < n_labels for key in classes)
    except (TypeError, ValueError):
        return False


@dataclass
class ModelStore:
    """A single model artifact location."""

    location: Optional[Path] = field(default=None)

    def __post_init__(self) -> None:
        self.location = Path(self.location) if self.location is not None else settings.model_path

    def exists(self) -> bool:
        return self.location.is_file()

    def save(self, pipeline: TrainedPipeline) -> Path:
        """Write ``pipeline`` to :attr:`location`, replacing any previous artifact.

        Returns:
            The artifact path.
        """
        self.location.parent.mkdir(parents=True, exist_ok=True)
        envelope = {
            "format_version": ARTIFACT_VERSION,
            "saved_at": datetime.now(timezone.utc).isoformat(),
            "pipeline": pipeline,
        }

        fd, tmp_name = tempfile.mkstemp(
            dir=self.location.parent, prefix=f".{self.location.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                joblib.dump(envelope, f)
            os.replace(tmp_name, self.location)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.info("Saved model with labels %s to %s", list(pipeline.labels), self.location)
        return self.location

    def load(self) -> TrainedPipeline:
        """Read the pipeline stored at :attr:`location`.

        Raises:
            PersistenceError: ``NOT_FOUND`` when there is no artifact,
                ``CORRUPT`` when it cannot be turned back into a pipeline.
        """
        if not self.exists():
            raise PersistenceError(
                PersistenceErrorKind.NOT_FOUND,
                f"No model artifact at {self.location}",
                str(self.location),
            )

        try:
            envelope = joblib.load(self.location)
        except Exception as e:
            raise PersistenceError(
                PersistenceErrorKind.CORRUPT,
                f"Model artifact could not be deserialized: {e}",
                str(self.location),
            ) from e

        if not isinstance(envelope, dict) or envelope.get("format_version") != ARTIFACT_VERSION:
            raise PersistenceError(
                PersistenceErrorKind.CORRUPT,
                "Model artifact has an unexpected layout or format version",
                str(self.location),
            )

        pipeline = envelope.get("pipeline")
        if not isinstance(pipeline, TrainedPipeline) or not pipeline.labels:
            raise PersistenceError(
                PersistenceErrorKind.CORRUPT,
                "Model artifact does not contain a trained pipeline",
                str(self.location),
            )

        # Every class key the model can emit needs a label
        classes = getattr(pipeline.model, "classes_", None)
        if not callable(getattr(pipeline.model, "predict", None)) or classes is None:
            raise PersistenceError(
                PersistenceErrorKind.CORRUPT,
                "Model artifact holds no fitted classifier",
                str(self.location),
            )
        if not _keys_cover(classes, len(pipeline.labels)):
            raise PersistenceError(
                PersistenceErrorKind.CORRUPT,
                f"Model artifact has {len(classes)} classes but {len(pipeline.labels)} labels",
                str(self.location),
            )

        logger.debug("Loaded model trained at %s from %s", pipeline.trained_at, self.location)
        return pipeline
