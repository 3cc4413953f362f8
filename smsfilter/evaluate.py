"""
Evaluation of a trained model over a labelled dataset.

The text report keeps the classic Weka layout: a summary statistics block
followed by a tab separated confusion matrix, rows = actual class and
columns = predicted class, both in ``LABELS`` order.
"""

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn.metrics import accuracy_score, confusion_matrix

from .config import LABELS
from .data import load_cached
from .errors import DatasetError
from .model import encode_labels, ensure_fitted, predict_proba

logger = logging.getLogger(__name__)

_LABEL_WIDTH = 35


def _num(value, width=12, decimals=4) -> str:
    s = f"{value:.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s.rjust(width)


def cohen_kappa(cm: np.ndarray) -> float:
    total = cm.sum()
    observed = np.trace(cm) / total
    expected = float((cm.sum(axis=0) * cm.sum(axis=1)).sum()) / total ** 2
    if expected == 1.0:
        return 1.0 if observed == 1.0 else 0.0
    return float((observed - expected) / (1.0 - expected))


@dataclass
class EvaluationResult:
    confusion: np.ndarray
    accuracy: float
    kappa: float
    mae: float
    rmse: float

    @property
    def n(self) -> int:
        return int(self.confusion.sum())

    @property
    def correct(self) -> int:
        return int(np.trace(self.confusion))

    @property
    def incorrect(self) -> int:
        return self.n - self.correct

    @property
    def tp(self) -> int:
        return int(self.confusion[0, 0])

    @property
    def fn(self) -> int:
        return int(self.confusion[0, 1])

    @property
    def fp(self) -> int:
        return int(self.confusion[1, 0])

    @property
    def tn(self) -> int:
        return int(self.confusion[1, 1])

    def summary(self) -> str:
        pct_ok = 100.0 * self.correct / self.n
        pct_bad = 100.0 * self.incorrect / self.n
        rows = [
            ("Correctly Classified Instances", _num(self.correct) + "     " + _num(pct_ok) + " %"),
            ("Incorrectly Classified Instances", _num(self.incorrect) + "     " + _num(pct_bad) + " %"),
            ("Kappa statistic", _num(self.kappa)),
            ("Mean absolute error", _num(self.mae)),
            ("Root mean squared error", _num(self.rmse)),
            ("Total Number of Instances", _num(self.n)),
        ]
        return "\n" + "".join(f"{k.ljust(_LABEL_WIDTH)}{v}\n" for k, v in rows)

    def confusion_block(self) -> str:
        spam, ham = LABELS
        return (
            "\n=== Confusion Matrix ===\n\n"
            f"\t{spam}\t{ham}\t<-- classified as\n"
            f"{spam}\t{self.tp}\t{self.fn}\n"
            f"{ham}\t{self.fp}\t{self.tn}\n"
        )

    def report(self) -> str:
        return self.summary() + self.confusion_block()

    def to_dict(self) -> dict:
        return {
            "accuracy": float(self.accuracy),
            "kappa": float(self.kappa),
            "mae": float(self.mae),
            "rmse": float(self.rmse),
            "n": self.n,
            "TP": self.tp, "FN": self.fn, "FP": self.fp, "TN": self.tn,
        }


def evaluate(model, dataset: pd.DataFrame) -> EvaluationResult:
    """Score ``model`` on ``dataset``; the model is only read, never refit."""
    ensure_fitted(model)
    if dataset is None or len(dataset) == 0:
        raise DatasetError("evaluation dataset is empty")

    y_true = encode_labels(dataset["label"])
    texts = dataset["text"].tolist()
    y_pred = np.asarray(model.predict(texts), dtype=int)
    proba = predict_proba(model, texts)

    cm = confusion_matrix(y_true, y_pred, labels=list(range(len(LABELS))))
    actual = np.eye(len(LABELS))[y_true]
    err = proba - actual

    result = EvaluationResult(
        confusion=cm,
        accuracy=float(accuracy_score(y_true, y_pred)),
        kappa=cohen_kappa(cm),
        mae=float(np.abs(err).mean()),
        rmse=float(np.sqrt((err ** 2).mean())),
    )
    logger.info("Evaluated %d records, accuracy %.4f", result.n, result.accuracy)
    return result


def evaluate_file(model, raw_path, cache_path) -> EvaluationResult:
    return evaluate(model, load_cached(raw_path, cache_path))
