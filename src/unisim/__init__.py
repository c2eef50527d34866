from unisim.core import (
    ModelNotTrainedError,
    NumericInvariantError,
    PreconditionError,
    UnsupportedOperationError,
    WordCounts,
    log_sum_exp,
    word_counts,
)
from unisim.models import CrossLanguageModel, LanguageModel, UnigramConfig

__version__ = "0.1.0"
