"""Smoothed unigram language model.

Based on: Leuski Anton, Traum David. A Statistical Approach for Text
Processing in Virtual Humans. Tech. rep., University of Southern California,
Institute for Creative Technologies, 2008.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from unisim.core.errors import PreconditionError
from unisim.core.numeric import check_log_prob, log_sum_exp, safe_log
from unisim.core.word_counts import WordCounts, as_word_counts
from unisim.models.config import UnigramConfig
from unisim.models.prob.base import ProbLanguageModel
from unisim.utils import progress_bar, validate_config
from unisim.utils.logging import DEFAULT_LOGGER


@dataclass(frozen=True)
class UnigramStatistics:
    """Everything a trained unigram model knows. Never mutated after creation."""

    smoothing_coefficient: float
    dataset: Tuple[WordCounts, ...]
    word_totals: WordCounts
    smoothing_factors: Mapping[str, float]


def build_statistics(
    dataset: Iterable[Mapping[str, int]],
    smoothing_coefficient: float,
    background_floor_count: float = 1.0,
    progress: bool = False,
) -> UnigramStatistics:
    """Counts words across the dataset and derives the background distribution.

    Args:
        dataset: One word-count mapping per training sentence.
        smoothing_coefficient: Weight of the local frequency, in (0, 1].
        background_floor_count: Extra count given to every training word in
            the background distribution.
        progress: Show a progress bar while counting.

    Returns:
        The statistics for the dataset. Each sentence is stored with its
        total computed.
    """
    totals: Counter = Counter()
    sentences = []
    for sentence in progress_bar(
        dataset, desc="Counting words", unit="sentence", disable=not progress
    ):
        sentence = as_word_counts(sentence).with_total()
        totals.update(sentence)
        sentences.append(sentence)

    word_totals = WordCounts(totals).with_total()
    grand_total = word_totals.total

    smoothing_factors = {}
    for word, count in word_totals.items():
        if grand_total == 0:
            # 0/0: left undefined so that scoring this word fails loudly.
            smoothing_factors[word] = math.nan
        else:
            smoothing_factors[word] = (
                (1 - smoothing_coefficient) * count + background_floor_count
            ) / grand_total

    return UnigramStatistics(
        smoothing_coefficient=smoothing_coefficient,
        dataset=tuple(sentences),
        word_totals=word_totals,
        smoothing_factors=MappingProxyType(smoothing_factors),
    )


class LanguageModel(ProbLanguageModel):
    """A unigram language model over a corpus of sentences.

    The probability of a word given a sentence interpolates the word's
    frequency in that sentence with its frequency in the whole corpus::

        p(w | s) = λ * count(w, s) / |s| + background(w)

    and the corpus itself is treated as a uniform mixture of its sentences.
    Queries are only valid after `train_batch`.
    """

    def __init__(self, model_config: Optional[UnigramConfig] = None, **kwargs):
        super().__init__(model_config or validate_config(UnigramConfig, **kwargs))
        self.config: UnigramConfig
        self.statistics: Optional[UnigramStatistics] = None

    @property
    def smoothing_coefficient(self) -> float:
        return self.config.smoothing_coefficient

    @property
    def dataset(self) -> Tuple[WordCounts, ...]:
        return self._trained_statistics().dataset

    def train_batch(
        self, dataset: Iterable[Mapping[str, int]], progress: bool = False
    ) -> LanguageModel:
        """Trains the model on all the given sentences.

        Args:
            dataset: One word-count mapping per sentence, tokenized in advance.
            progress: Show a progress bar while counting.

        Returns:
            The model itself. Earlier training is discarded, not extended.
        """
        dataset = list(dataset)
        DEFAULT_LOGGER.check_and_raise(
            "Cannot train a language model on an empty dataset",
            PreconditionError,
            len(dataset) > 0,
        )

        statistics = build_statistics(
            dataset,
            smoothing_coefficient=self.config.smoothing_coefficient,
            background_floor_count=self.config.background_floor_count,
            progress=progress,
        )
        DEFAULT_LOGGER.debug(
            f"Counted {statistics.word_totals.total} words "
            f"({len(statistics.word_totals)} distinct) in {len(dataset)} sentences"
        )

        self.statistics = statistics
        self._is_trained_or_fitted = True
        return self

    def _trained_statistics(self) -> UnigramStatistics:
        self._check_trained()
        assert self.statistics is not None
        return self.statistics

    def get_all_word_counts(self) -> WordCounts:
        """Returns every training word with its total count in the dataset."""
        return self._trained_statistics().word_totals

    def log_prob_word_given_sentence(
        self, word: str, given_sentence_counts: Mapping[str, int]
    ) -> float:
        """Smoothed log-probability that `word` is drawn from the given sentence.

        Returns -inf for a word that never occurs in the training data and is
        absent from the given sentence.
        """
        statistics = self._trained_statistics()
        DEFAULT_LOGGER.check_and_raise(
            "no given_sentence_counts", PreconditionError, given_sentence_counts is not None
        )
        given = as_word_counts(given_sentence_counts)

        background = statistics.smoothing_factors.get(word, 0.0)
        if word in given:
            total = given.total_count
            local = given[word] / total if total else math.nan
            prob = statistics.smoothing_coefficient * local + background
        else:
            prob = background

        check_log_prob(prob, "word probability", word=word, given=given)
        return safe_log(prob)

    def log_prob_sentence_given_sentence(
        self,
        sentence_counts: Mapping[str, int],
        given_sentence_counts: Mapping[str, int],
    ) -> float:
        """Log-likelihood of drawing the words of `sentence_counts`, with repetition, from the given sentence."""
        DEFAULT_LOGGER.check_and_raise(
            "no sentence_counts", PreconditionError, sentence_counts is not None
        )
        log_product = 0.0
        for word, count in sentence_counts.items():
            if count == 0:
                continue
            log_product += count * self.log_prob_word_given_sentence(
                word, given_sentence_counts
            )
        return log_product

    def log_prob_sentence_given_dataset(self, sentence_counts: Mapping[str, int]) -> float:
        """Log-probability of the sentence under the uniform mixture of all training sentences."""
        statistics = self._trained_statistics()
        log_products = [
            self.log_prob_sentence_given_sentence(sentence_counts, datum)
            for datum in statistics.dataset
        ]
        return log_sum_exp(log_products) - math.log(len(statistics.dataset))

    def explain_model_type(self) -> None:
        print(
            f"{self.__class__.__name__} is a smoothed unigram language model. "
            "It scores a sentence as a bag of independent words, mixing each "
            "word's frequency in a training sentence with its frequency in the "
            "whole corpus."
        )

    def explain_what_is_learned(self) -> None:
        print(
            f"During training, {self.__class__.__name__} learns the total count "
            "of every word in the corpus and, from it, the background "
            "probability each word keeps regardless of the sentence it is "
            "scored against."
        )
