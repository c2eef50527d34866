"""Cross-language model: ranks output sentences by their divergence from an input sentence.

Based on: Leuski Anton, Traum David. A Statistical Approach for Text
Processing in Virtual Humans. Tech. rep., University of Southern California,
Institute for Creative Technologies, 2008.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from unisim.core.errors import PreconditionError
from unisim.core.numeric import check_log_prob, log_sum_exp
from unisim.core.word_counts import WordCounts, as_word_counts
from unisim.models.config import UnigramConfig
from unisim.models.prob.base import ProbLanguageModel
from unisim.models.prob.unigram import LanguageModel
from unisim.utils import progress_bar, validate_config
from unisim.utils.logging import DEFAULT_LOGGER


class SentencePair(NamedTuple):
    input: WordCounts
    output: WordCounts


class Similarity(NamedTuple):
    output: WordCounts
    similarity: float


def as_sentence_pair(datum: Any) -> SentencePair:
    """Accepts a SentencePair, an ``(input, output)`` tuple or an ``{"input", "output"}`` mapping."""
    if isinstance(datum, SentencePair):
        return datum
    if isinstance(datum, Mapping):
        return SentencePair(as_word_counts(datum["input"]), as_word_counts(datum["output"]))
    input_counts, output_counts = datum
    return SentencePair(as_word_counts(input_counts), as_word_counts(output_counts))


class CrossLanguageModel(ProbLanguageModel):
    """A model for two languages, the input language and the output language.

    Trained on pairs of (input sentence, output sentence), it estimates how
    likely each output-language word (a "feature") is given an input
    sentence, and measures how far that estimate is from the word
    distribution of a candidate output sentence.

    Attributes:
        input_language_model (LanguageModel): Trained on the input sides.
        output_language_model (LanguageModel): Trained on the output sides.
        dataset (Tuple[SentencePair, ...]): The training pairs, index-aligned
            with both models' datasets.

    Note:
        Training replaces state that queries read, so calls to `train_batch`
        must not overlap with queries on the same instance.
    """

    def __init__(self, model_config: Optional[UnigramConfig] = None, **kwargs):
        super().__init__(model_config or validate_config(UnigramConfig, **kwargs))
        self.config: UnigramConfig
        self.input_language_model = LanguageModel(model_config=self.config)
        self.output_language_model = LanguageModel(model_config=self.config)
        self.dataset: Tuple[SentencePair, ...] = ()

    @property
    def smoothing_coefficient(self) -> float:
        return self.config.smoothing_coefficient

    def train_batch(self, dataset: Iterable[Any], progress: bool = False) -> CrossLanguageModel:
        """Trains both language models on all the given pairs.

        Args:
            dataset: Pairs of word counts, each either a `SentencePair`, an
                ``(input, output)`` tuple or a mapping with ``"input"`` and
                ``"output"`` keys.
            progress: Show progress bars while counting.

        Returns:
            The model itself.
        """
        pairs = [as_sentence_pair(datum) for datum in dataset]
        DEFAULT_LOGGER.info(f"Training {self.__class__.__name__} on {len(pairs)} pairs")

        self.input_language_model.train_batch([pair.input for pair in pairs], progress)
        self.output_language_model.train_batch([pair.output for pair in pairs], progress)

        # Keep the total-annotated copies so later queries reuse the cached totals.
        self.dataset = tuple(
            SentencePair(input_counts, output_counts)
            for input_counts, output_counts in zip(
                self.input_language_model.dataset, self.output_language_model.dataset
            )
        )
        self._is_trained_or_fitted = True
        return self

    def get_all_word_counts(self) -> WordCounts:
        """Returns the output language's words with their total counts."""
        return self.output_language_model.get_all_word_counts()

    def classify(self, sentence: Mapping[str, int], explain: int = 0):
        raise NotImplementedError(
            f"{self.__class__.__name__} does not classify, use similarities instead"
        )

    def log_prob_sentence_given_dataset(self, sentence_counts: Mapping[str, int]) -> float:
        return self.input_language_model.log_prob_sentence_given_dataset(sentence_counts)

    def _input_log_likelihoods(self, sentence_counts: Mapping[str, int]) -> List[float]:
        """log P(sentence | input_i) for every training pair i."""
        return [
            self.input_language_model.log_prob_sentence_given_sentence(
                sentence_counts, pair.input
            )
            for pair in self.dataset
        ]

    def _log_prob_feature_and_likelihoods(
        self, feature: str, input_log_likelihoods: List[float]
    ) -> float:
        log_products = [
            log_likelihood
            + self.output_language_model.log_prob_word_given_sentence(feature, pair.output)
            for log_likelihood, pair in zip(input_log_likelihoods, self.dataset)
        ]
        return log_sum_exp(log_products) - math.log(len(self.dataset))

    def log_prob_sentence_and_feature_given_dataset(
        self, feature: str, sentence_counts: Mapping[str, int]
    ) -> float:
        """Joint log-probability of an input sentence and an output feature under the paired dataset.

        Args:
            feature: A single word from the OUTPUT language.
            sentence_counts: Word counts of a sentence from the INPUT language.
        """
        DEFAULT_LOGGER.check_and_raise(
            "no sentence_counts", PreconditionError, sentence_counts is not None
        )
        self._check_trained()
        return self._log_prob_feature_and_likelihoods(
            feature, self._input_log_likelihoods(sentence_counts)
        )

    def log_prob_feature_given_sentence(
        self, feature: str, given_sentence_counts: Mapping[str, int]
    ) -> float:
        """log P(feature | sentence), by Bayes' rule over the joint estimate.

        Args:
            feature: A single word from the OUTPUT language.
            given_sentence_counts: Word counts of a sentence from the INPUT language.
        """
        self._require_sentence(given_sentence_counts)
        self._check_trained()
        input_log_likelihoods = self._input_log_likelihoods(given_sentence_counts)
        return self._log_prob_feature_given_likelihoods(feature, input_log_likelihoods)

    def _require_sentence(self, sentence_counts: Optional[Mapping[str, int]]) -> None:
        DEFAULT_LOGGER.check_and_raise(
            "no given_sentence_counts", PreconditionError, bool(sentence_counts)
        )

    def _log_prob_feature_given_likelihoods(
        self,
        feature: str,
        input_log_likelihoods: List[float],
        log_sentence: Optional[float] = None,
    ) -> float:
        log_sentence_and_feature = check_log_prob(
            self._log_prob_feature_and_likelihoods(feature, input_log_likelihoods),
            "log P(sentence, feature)",
            allow_infinite=False,
            feature=feature,
        )
        if log_sentence is None:
            log_sentence = self._log_prob_sentence_from_likelihoods(input_log_likelihoods)
        return log_sentence_and_feature - log_sentence

    def _log_prob_sentence_from_likelihoods(self, input_log_likelihoods: List[float]) -> float:
        # Same mixture as input_language_model.log_prob_sentence_given_dataset.
        return check_log_prob(
            log_sum_exp(input_log_likelihoods) - math.log(len(self.dataset)),
            "log P(sentence)",
            allow_infinite=False,
        )

    def _feature_log_probs(self, input_sentence_counts: Mapping[str, int]) -> Dict[str, float]:
        """log P(feature | input) for every feature of the output vocabulary."""
        self._require_sentence(input_sentence_counts)
        self._check_trained()
        input_log_likelihoods = self._input_log_likelihoods(input_sentence_counts)
        log_sentence = self._log_prob_sentence_from_likelihoods(input_log_likelihoods)
        return {
            feature: self._log_prob_feature_given_likelihoods(
                feature, input_log_likelihoods, log_sentence
            )
            for feature in self.output_language_model.get_all_word_counts()
        }

    def _divergence_from_feature_log_probs(
        self, feature_log_probs: Dict[str, float], output_sentence_counts: Mapping[str, int]
    ) -> float:
        elements = []
        for feature, log_feature_given_input in feature_log_probs.items():
            log_feature_given_output = check_log_prob(
                self.output_language_model.log_prob_word_given_sentence(
                    feature, output_sentence_counts
                ),
                "log P(feature | output)",
                allow_infinite=False,
                feature=feature,
                output=output_sentence_counts,
            )
            prob_feature_given_input = math.exp(log_feature_given_input)
            element = check_log_prob(
                prob_feature_given_input
                * (log_feature_given_input - log_feature_given_output),
                "divergence term",
                allow_infinite=False,
                feature=feature,
                prob_feature_given_input=prob_feature_given_input,
                log_feature_given_input=log_feature_given_input,
                log_feature_given_output=log_feature_given_output,
            )
            elements.append(element)
        return math.fsum(elements)

    def divergence(
        self, input_sentence_counts: Mapping[str, int], output_sentence_counts: Mapping[str, int]
    ) -> float:
        """Kullback-Leibler divergence D(P(F | input) || P(F | output)) over the output vocabulary.

        Lower means more similar. Not symmetric: ``divergence(a, b)`` and
        ``divergence(b, a)`` differ in general.

        Args:
            input_sentence_counts: Word counts of a sentence from the INPUT language.
            output_sentence_counts: Word counts of a sentence from the OUTPUT language.

        Raises:
            PreconditionError: If either sentence is missing.
            NumericInvariantError: If any intermediate log-probability is not finite.
        """
        DEFAULT_LOGGER.check_and_raise(
            "no output_sentence_counts", PreconditionError, output_sentence_counts is not None
        )
        return self._divergence_from_feature_log_probs(
            self._feature_log_probs(input_sentence_counts),
            as_word_counts(output_sentence_counts),
        )

    def similarities(
        self, input_sentence_counts: Mapping[str, int], progress: bool = False
    ) -> List[Similarity]:
        """Scores every training output against the input sentence.

        Returns:
            One `Similarity` per training pair, holding the output sentence
            and minus its divergence from the input, sorted from most to
            least similar.
        """
        feature_log_probs = self._feature_log_probs(input_sentence_counts)
        sims = [
            Similarity(
                output=pair.output,
                similarity=-self._divergence_from_feature_log_probs(
                    feature_log_probs, pair.output
                ),
            )
            for pair in progress_bar(
                self.dataset, desc="Scoring outputs", unit="output", disable=not progress
            )
        ]
        sims.sort(key=lambda sim: sim.similarity, reverse=True)
        return sims

    def explain_model_type(self) -> None:
        print(
            f"{self.__class__.__name__} pairs two unigram language models, one per "
            "language, and ranks output sentences by the Kullback-Leibler "
            "divergence between the output words predicted for an input "
            "sentence and the words of each candidate output."
        )

    def explain_what_is_learned(self) -> None:
        print(
            f"During training, {self.__class__.__name__} learns word counts for "
            "the input and the output language separately and keeps the "
            "training pairs, whose alignment links the two languages."
        )
