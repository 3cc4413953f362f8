"""
SpamPipeline: the single active model plus the load/train/predict/evaluate glue.

Methods never raise the project's own errors. A failure is logged once,
kept in ``last_error`` and signalled by a ``None`` (or ``False``) return, so
callers can tell e.g. ``ModelNotFittedError`` from ``EmptyTextError`` by type.
"""

import logging

from . import data, model as nb, store
from .evaluate import evaluate as score_dataset
from .config import DEFAULT_ALPHA
from .errors import InvalidInputError, PipelineError

logger = logging.getLogger(__name__)


class SpamPipeline:

    def __init__(self, config=None, alpha=DEFAULT_ALPHA):
        self.model = nb.build_model(config, alpha=alpha)
        self.last_error = None

    @property
    def is_fitted(self):
        return nb.is_fitted(self.model)

    def _fail(self, err):
        self.last_error = err
        level = logging.INFO if isinstance(err, InvalidInputError) else logging.WARNING
        logger.log(level, "%s: %s", type(err).__name__, err)
        return None

    def load_dataset(self, raw_path, cache_path=None):
        self.last_error = None
        try:
            if cache_path is None:
                return data.load_raw(raw_path)
            return data.load_cached(raw_path, cache_path)
        except PipelineError as e:
            return self._fail(e)

    def fit(self, dataset):
        """Replace the classifier state with one fitted on ``dataset``."""
        self.last_error = None
        try:
            self.model = nb.fit(dataset, self.model)
        except PipelineError as e:
            return self._fail(e)
        return self.model

    def train(self, raw_path, cache_path=None):
        dataset = self.load_dataset(raw_path, cache_path)
        if dataset is None:
            return None
        return self.fit(dataset)

    def predict(self, text):
        self.last_error = None
        try:
            return nb.predict(self.model, text)
        except PipelineError as e:
            return self._fail(e)

    def evaluate(self, dataset):
        self.last_error = None
        try:
            return score_dataset(self.model, dataset)
        except PipelineError as e:
            return self._fail(e)

    def evaluate_file(self, raw_path, cache_path=None):
        dataset = self.load_dataset(raw_path, cache_path)
        if dataset is None:
            return None
        return self.evaluate(dataset)

    def save_model(self, path):
        self.last_error = None
        try:
            store.save_model(self.model, path)
        except PipelineError as e:
            self._fail(e)
            return False
        return True

    def load_model(self, path):
        """Swap in the model stored at ``path``; the current one survives a failure."""
        self.last_error = None
        try:
            self.model = store.load_model(path)
        except PipelineError as e:
            self._fail(e)
            return False
        return True
