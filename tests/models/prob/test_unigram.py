import math

import pytest

from unisim.core.errors import (
    ModelNotTrainedError,
    NumericInvariantError,
    PreconditionError,
    UnsupportedOperationError,
)
from unisim.core.word_counts import WordCounts, word_counts
from unisim.models.prob.unigram import LanguageModel, build_statistics

CORPUS = ["I want aa", "I want bb", "I want cc"]


def prob_sentence(model, sentence):
    return math.exp(model.log_prob_sentence_given_dataset(word_counts(sentence)))


@pytest.fixture
def model():
    return LanguageModel(smoothing_coefficient=0.9).train_batch(
        [word_counts(sentence) for sentence in CORPUS]
    )


@pytest.fixture
def plain_model():
    return LanguageModel(smoothing_coefficient=0.9, background_floor_count=0).train_batch(
        [word_counts(sentence) for sentence in CORPUS]
    )


class TestBuildStatistics:
    def test_counts_and_smoothing_factors(self):
        statistics = build_statistics(
            [word_counts(sentence) for sentence in CORPUS],
            smoothing_coefficient=0.9,
            background_floor_count=0,
        )
        assert statistics.word_totals == {"I": 3, "want": 3, "aa": 1, "bb": 1, "cc": 1}
        assert statistics.word_totals.total == 9
        assert statistics.smoothing_factors["I"] == pytest.approx(0.1 * 3 / 9)
        assert statistics.smoothing_factors["aa"] == pytest.approx(0.1 * 1 / 9)

    def test_floor_adds_one_count_per_word(self):
        statistics = build_statistics(
            [word_counts(sentence) for sentence in CORPUS], smoothing_coefficient=0.9
        )
        assert statistics.smoothing_factors["I"] == pytest.approx((0.1 * 3 + 1) / 9)

    def test_annotates_sentence_totals(self):
        statistics = build_statistics([{"a": 2, "b": 1}], smoothing_coefficient=0.9)
        assert statistics.dataset[0].total == 3

    def test_smoothing_factors_are_read_only(self):
        statistics = build_statistics([{"a": 1}], smoothing_coefficient=0.9)
        with pytest.raises(TypeError):
            statistics.smoothing_factors["a"] = 1.0  # type: ignore[index]


class TestLanguageModelScenario:
    @pytest.mark.parametrize(
        "sentence, expected",
        [
            ("I", 0.4444444444444444),
            ("I want", 0.19753086419753085),
            ("I want aa", 0.04389574759945128),
            ("I want aa bb", 0.007779301935680535),
            ("I want aa bb cc", 0.0012458805398905997),
        ],
    )
    def test_produces_predictable_probabilities(self, model, sentence, expected):
        assert prob_sentence(model, sentence) == pytest.approx(expected, rel=0.01)

    @pytest.mark.parametrize(
        "sentence, expected",
        [
            ("I", 1 / 3),
            ("I want", 1 / 9),
            ("I want aa", 0.0123456),
        ],
    )
    def test_plain_interpolation(self, plain_model, sentence, expected):
        assert prob_sentence(plain_model, sentence) == pytest.approx(expected, rel=0.01)

    def test_training_sentences_have_probability_below_one(self, model):
        for sentence in CORPUS:
            assert 0 < prob_sentence(model, sentence) <= 1

    @pytest.mark.parametrize("floor, expected", [(1.0, 2.0), (0.0, 1.0)])
    def test_floor_scores_are_not_normalized(self, floor, expected):
        model = LanguageModel(background_floor_count=floor).train_batch([word_counts("a")])
        assert math.exp(
            model.log_prob_word_given_sentence("a", word_counts("a"))
        ) == pytest.approx(expected)


class TestLogProbWordGivenSentence:
    def test_formula(self, plain_model):
        log_prob = plain_model.log_prob_word_given_sentence("aa", word_counts("I want aa"))
        assert log_prob == pytest.approx(math.log(0.9 * 1 / 3 + 0.1 * 1 / 9))

    def test_word_absent_from_sentence_gets_background(self, plain_model):
        log_prob = plain_model.log_prob_word_given_sentence("aa", word_counts("I want bb"))
        assert log_prob == pytest.approx(math.log(0.1 * 1 / 9))

    def test_unseen_word_is_impossible(self, model):
        assert model.log_prob_word_given_sentence("zz", word_counts("I want aa")) == -math.inf

    def test_total_computed_when_missing(self, model):
        with_total = model.log_prob_word_given_sentence("aa", WordCounts({"I": 1, "aa": 1}, total=2))
        without_total = model.log_prob_word_given_sentence("aa", {"I": 1, "aa": 1})
        assert with_total == without_total

    def test_repeated_queries_are_identical(self, model):
        given = word_counts("I want aa")
        first = model.log_prob_word_given_sentence("want", given)
        assert all(
            model.log_prob_word_given_sentence("want", given) == first for _ in range(5)
        )

    def test_nan_probability_fails(self, model):
        with pytest.raises(NumericInvariantError, match="word probability is nan"):
            model.log_prob_word_given_sentence("aa", WordCounts({"aa": 0}))

    def test_untrained_model_fails(self):
        with pytest.raises(ModelNotTrainedError):
            LanguageModel().log_prob_word_given_sentence("a", {"a": 1})

    def test_missing_sentence_fails(self, model):
        with pytest.raises(PreconditionError):
            model.log_prob_word_given_sentence("I", None)

    def test_word_named_like_a_total(self):
        model = LanguageModel(background_floor_count=0).train_batch([{"_total": 2, "x": 1}])
        assert model.get_all_word_counts()["_total"] == 2
        assert model.get_all_word_counts().total == 3
        log_prob = model.log_prob_word_given_sentence("_total", {"_total": 2, "x": 1})
        assert math.exp(log_prob) == pytest.approx(0.9 * 2 / 3 + 0.1 * 2 / 3)


class TestCombiningProbabilities:
    def test_word_probabilities_of_a_sentence(self, random_text):
        model = LanguageModel(smoothing_coefficient=1, background_floor_count=0)
        model.train_batch([word_counts(random_text)])
        given = word_counts(random_text)

        prob = sum(
            math.exp(model.log_prob_word_given_sentence(word, given)) for word in given
        )
        assert prob == pytest.approx(1, abs=0.1)

    def test_word_probabilities_with_floor_converge_to_two(self, random_text):
        model = LanguageModel(smoothing_coefficient=1)
        model.train_batch([word_counts(random_text)])
        given = word_counts(random_text)

        prob = sum(
            math.exp(model.log_prob_word_given_sentence(word, given)) for word in given
        )
        assert prob == pytest.approx(2, abs=0.1)

    def test_sentence_given_sentence_is_product_of_words(self, random_text):
        model = LanguageModel(smoothing_coefficient=1)
        model.train_batch([word_counts(random_text)])
        given = word_counts(random_text)

        prob = math.exp(model.log_prob_sentence_given_sentence(given, given))
        expected = 1.0
        for word in random_text.split(" "):
            expected *= math.exp(model.log_prob_word_given_sentence(word, given))
        assert prob == pytest.approx(expected, rel=1e-6)

    def test_single_sentence_dataset(self, random_text):
        model = LanguageModel(smoothing_coefficient=1)
        model.train_batch([word_counts(random_text)])
        given = word_counts(random_text)

        assert model.log_prob_sentence_given_dataset(given) == pytest.approx(
            model.log_prob_sentence_given_sentence(given, given)
        )

    def test_zero_counts_are_skipped(self, model):
        assert model.log_prob_sentence_given_sentence(
            {"I": 1, "zz": 0}, word_counts("I want aa")
        ) == model.log_prob_sentence_given_sentence({"I": 1}, word_counts("I want aa"))


class TestTraining:
    def test_retraining_replaces_state(self, model):
        model.train_batch([word_counts("x y")])
        assert model.get_all_word_counts() == {"x": 1, "y": 1}
        assert len(model.dataset) == 1
        assert model.log_prob_word_given_sentence("I", word_counts("x y")) == -math.inf

    def test_empty_dataset_fails(self):
        with pytest.raises(PreconditionError):
            LanguageModel().train_batch([])

    def test_online_training_is_unsupported(self, model):
        with pytest.raises(UnsupportedOperationError):
            model.train_online(word_counts("I want dd"))

    def test_progress_bar(self, capsys):
        model = LanguageModel().train_batch([word_counts("a b")], progress=True)
        assert model.is_trained

    def test_introspection(self, model, capsys):
        model.summary()
        model.explain_model_type()
        model.explain_what_is_learned()
        out = capsys.readouterr().out
        assert "LanguageModel" in out
        assert "smoothing_coefficient: 0.9" in model.get_hyperparameters_table()
