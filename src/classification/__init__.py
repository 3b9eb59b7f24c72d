"""
Document Classification Module

This module assigns extracted text to one of a small set of categories:
- Pipeline: training, persistence and prediction (``TextClassifier``)
- Featurizer: hashed word/character n-grams and a softmax-regression model
- Model store: atomic on-disk storage of trained pipelines
"""

from .errors import PersistenceError, SmartTextReaderError, TrainingError
from .featurizer import build_featurizer, build_pipeline
from .model_store import ModelStore
from .pipeline import TextClassifier, label_vocabulary
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

__all__ = [
    "TextClassifier",
    "ModelStore",
    "build_featurizer",
    "build_pipeline",
    "label_vocabulary",
    "LabeledSample",
    "TrainedPipeline",
    "Prediction",
    "PredictionResult",
    "PredictionFailure",
    "TrainingErrorKind",
    "PredictionErrorKind",
    "PersistenceErrorKind",
    "SmartTextReaderError",
    "TrainingError",
    "PersistenceError",
]
