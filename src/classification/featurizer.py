"""Text featurization and classifier construction.

Text is mapped to a fixed-length sparse vector by hashing word n-grams and
character n-grams into ``n_features`` buckets each. Hashing keeps the
transform stateless: nothing is learned from the corpus, so the same text
always yields the same vector and no vocabulary has to be persisted
alongside the weights.
"""
from __future__ import annotations

from typing import Optional

from sklearn.dummy import DummyClassifier
from sklearn.feature_extraction.text import HashingVectorizer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import FeatureUnion, Pipeline

from config import settings
from config.settings import ClassifierSettings


def build_featurizer(cfg: Optional[ClassifierSettings] = None) -> FeatureUnion:
    """Return the word + character n-gram hashing transform."""
    cfg = cfg or settings.classifier
    common = dict(
        n_features=cfg.n_features,
        lowercase=True,
        alternate_sign=False,
        norm="l2",
    )
    return FeatureUnion([
        ("words", HashingVectorizer(analyzer="word", ngram_range=(1, cfg.word_ngram_max), **common)),
        ("chars", HashingVectorizer(analyzer="char_wb", ngram_range=tuple(cfg.char_ngram_range), **common)),
    ])


def build_classifier(n_labels: int, cfg: Optional[ClassifierSettings] = None):
    """Return an unfitted classifier for ``n_labels`` distinct labels.

    Softmax regression needs at least two classes, so a single-label training
    set gets a constant predictor instead.
    """
    cfg = cfg or settings.classifier
    if n_labels < 2:
        return DummyClassifier(strategy="most_frequent")
    return LogisticRegression(
        C=cfg.regularization_c,
        solver="lbfgs",
        max_iter=cfg.max_iter,
        random_state=cfg.random_state,
    )


def build_pipeline(n_labels: int, cfg: Optional[ClassifierSettings] = None) -> Pipeline:
    return Pipeline([
        ("features", build_featurizer(cfg)),
        ("classifier", build_classifier(n_labels, cfg)),
    ])
