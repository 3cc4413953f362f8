"""Error kinds raised by the pipeline modules."""


class PipelineError(Exception):
    """Base class for every recoverable pipeline failure."""


class DatasetError(PipelineError):
    """A dataset file or its cached artifact could not be read or written."""


class ModelStoreError(PipelineError):
    """The model artifact could not be saved or loaded."""


class ModelNotFittedError(PipelineError):
    """Prediction or evaluation was requested before the model was trained."""


class TrainingError(PipelineError):
    """The training data cannot produce a model."""


class InvalidInputError(PipelineError):
    """Input handed to the predictor cannot be classified."""


class EmptyTextError(InvalidInputError):
    """The text to classify is empty or only whitespace."""
