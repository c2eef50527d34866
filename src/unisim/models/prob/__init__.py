from unisim.models.prob.base import ProbLanguageModel
from unisim.models.prob.cross import (
    CrossLanguageModel,
    SentencePair,
    Similarity,
    as_sentence_pair,
)
from unisim.models.prob.unigram import LanguageModel, UnigramStatistics, build_statistics

__all__ = [
    "ProbLanguageModel",
    "CrossLanguageModel",
    "SentencePair",
    "Similarity",
    "as_sentence_pair",
    "LanguageModel",
    "UnigramStatistics",
    "build_statistics",
]
