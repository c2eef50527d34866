from typing import Mapping

from unisim.models.base import BaseLanguageModel


class ProbLanguageModel(BaseLanguageModel):
    """Base class for count-based models that answer log-probability queries."""

    def get_all_word_counts(self) -> Mapping[str, int]:
        raise NotImplementedError(
            "Probabilistic models must expose the word counts they were trained on."
        )

    def log_prob_sentence_given_dataset(self, sentence_counts: Mapping[str, int]) -> float:
        """
        Log-probability of a sentence under the whole training corpus.
        """
        raise NotImplementedError
