"""Persist the fitted vectorizer + classifier as one joblib artifact."""

import logging
import pickle
from pathlib import Path

import joblib
from sklearn.pipeline import Pipeline

from .errors import ModelNotFittedError, ModelStoreError
from .model import is_fitted

logger = logging.getLogger(__name__)


def save_model(model: Pipeline, path) -> Path:
    if not is_fitted(model):
        raise ModelNotFittedError("refusing to save a model that has not been trained")
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        joblib.dump(model, path)
    except (OSError, pickle.PicklingError) as e:
        raise ModelStoreError(f"Error saving model {path}: {e}") from e
    logger.info("Saved model: %s", path)
    return path


def load_model(path) -> Pipeline:
    path = Path(path)
    try:
        model = joblib.load(path)
    except (OSError, EOFError, pickle.UnpicklingError, ValueError,
            AttributeError, ImportError, IndexError, KeyError) as e:
        raise ModelStoreError(f"Error loading model {path}: {e}") from e
    if not isinstance(model, Pipeline):
        raise ModelStoreError(f"{path} does not hold a text classification pipeline "
                              f"(got {type(model).__name__})")
    if not is_fitted(model):
        raise ModelStoreError(f"{path} holds a model that has not been trained")
    logger.info("Loaded model: %s", path)
    return model
