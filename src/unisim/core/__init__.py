from unisim.core.errors import (
    ModelNotTrainedError,
    NumericInvariantError,
    PreconditionError,
    UnsupportedOperationError,
)
from unisim.core.numeric import log_sum_exp
from unisim.core.word_counts import WordCounts, as_word_counts, word_counts
