class PreconditionError(ValueError):
    """A query was made with a missing argument or on a model that cannot answer it."""


class ModelNotTrainedError(PreconditionError):
    """A probability was requested before `train_batch` was called."""


class UnsupportedOperationError(NotImplementedError):
    """The model does not support this kind of operation at all (e.g. online training)."""


class NumericInvariantError(ArithmeticError):
    """A log-probability came out NaN, or non-finite where a finite value is required."""
