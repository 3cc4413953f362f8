"""Multinomial Naive Bayes SMS spam classification pipeline."""

from .config import LABELS
from .data import load_cached, load_raw
from .errors import (
    DatasetError, EmptyTextError, InvalidInputError, ModelNotFittedError,
    ModelStoreError, PipelineError, TrainingError,
)
from .evaluate import EvaluationResult, evaluate
from .features import VectorizerConfig, build_vectorizer
from .model import build_model, fit, predict
from .pipeline import SpamPipeline
from .store import load_model, save_model

__all__ = [
    "LABELS",
    "load_raw", "load_cached",
    "PipelineError", "DatasetError", "ModelStoreError", "ModelNotFittedError",
    "TrainingError", "InvalidInputError", "EmptyTextError",
    "VectorizerConfig", "build_vectorizer",
    "build_model", "fit", "predict",
    "EvaluationResult", "evaluate",
    "save_model", "load_model",
    "SpamPipeline",
]

__version__ = "0.1.0"
