"""
Trainer and predictor: CountVectorizer + MultinomialNB in one sklearn Pipeline.

Labels are encoded by their position in ``LABELS`` (spam=0, ham=1) so the
classifier's class order is the declaration order and argmax ties resolve
to ``spam``.
"""

import logging

import numpy as np
import pandas as pd
from sklearn.base import clone
from sklearn.exceptions import NotFittedError
from sklearn.naive_bayes import MultinomialNB
from sklearn.pipeline import Pipeline
from sklearn.utils.validation import check_is_fitted

from .config import DEFAULT_ALPHA, LABELS
from .errors import EmptyTextError, ModelNotFittedError, TrainingError
from .features import VectorizerConfig, build_vectorizer

logger = logging.getLogger(__name__)


def build_model(config: VectorizerConfig = None, alpha: float = DEFAULT_ALPHA) -> Pipeline:
    return Pipeline([
        ("vect", build_vectorizer(config)),
        ("clf", MultinomialNB(alpha=alpha, fit_prior=True)),
    ])


def encode_labels(labels) -> np.ndarray:
    codes = pd.Categorical(labels, categories=list(LABELS)).codes
    if (codes < 0).any():
        raise TrainingError(f"labels must be one of {LABELS}")
    return np.asarray(codes, dtype=int)


def decode_label(code) -> str:
    return LABELS[int(code)]


def is_fitted(model) -> bool:
    if model is None:
        return False
    try:
        check_is_fitted(model.named_steps["vect"], "vocabulary_")
        check_is_fitted(model.named_steps["clf"])
    except (NotFittedError, KeyError, AttributeError):
        return False
    return True


def ensure_fitted(model) -> None:
    if not is_fitted(model):
        raise ModelNotFittedError("model has not been trained")


def fit(dataset: pd.DataFrame, model: Pipeline = None) -> Pipeline:
    """Fit a fresh copy of ``model`` (or a default one) on ``dataset``."""
    if dataset is None or len(dataset) == 0:
        raise TrainingError("training dataset is empty")

    y = encode_labels(dataset["label"])
    counts = np.bincount(y, minlength=len(LABELS))
    if (counts == 0).any():
        missing = [lab for lab, n in zip(LABELS, counts) if n == 0]
        logger.warning("No training records for class(es) %s", ", ".join(missing))

    pipe = clone(model) if model is not None else build_model()
    try:
        pipe.fit(dataset["text"].tolist(), y)
    except ValueError as e:
        # e.g. empty vocabulary when no text contains a word character
        raise TrainingError(f"Error fitting model: {e}") from e

    logger.info("Fitted model on %d records, vocabulary size %d",
                len(dataset), len(pipe.named_steps["vect"].vocabulary_))
    return pipe


def predict_many(model: Pipeline, texts) -> list:
    ensure_fitted(model)
    codes = model.predict(list(texts))
    return [decode_label(c) for c in codes]


def predict(model: Pipeline, text: str) -> str:
    if not text or not text.strip():
        raise EmptyTextError("cannot classify empty text")
    return predict_many(model, [text])[0]


def predict_proba(model: Pipeline, texts) -> np.ndarray:
    """Class probabilities with columns in ``LABELS`` order."""
    ensure_fitted(model)
    raw = model.predict_proba(list(texts))
    proba = np.zeros((raw.shape[0], len(LABELS)))
    for j, code in enumerate(model.named_steps["clf"].classes_):
        proba[:, int(code)] = raw[:, j]
    return proba
