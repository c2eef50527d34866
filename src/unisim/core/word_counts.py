from __future__ import annotations

from collections import Counter
from typing import Any, Iterator, Mapping, Optional

from unisim.core.errors import PreconditionError
from unisim.core.tokenizer import (
    NormalizedString,
    Normalizer,
    PreTokenizer,
    WhitespacePreTokenizer,
)
from unisim.utils.logging import DEFAULT_LOGGER


class WordCounts(Mapping[str, int]):
    """Bag-of-words view of a sentence: word -> number of occurrences.

    The total number of words is kept next to the counts rather than inside
    them, so any token (``"_total"`` included) is an ordinary word here.

    Args:
        counts: Mapping from word to its (non-negative) count.
        total: Cached sum of ``counts``. ``None`` means "not computed yet";
            `total_count` then sums the counts on demand.
    """

    __slots__ = ("_counts", "total")

    def __init__(self, counts: Optional[Mapping[str, int]] = None, total: Optional[int] = None):
        self._counts = dict(counts or {})
        self.total = total

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._counts!r}, total={self.total!r})"

    def __eq__(self, other: Any) -> bool:
        # Totals are a cache, so they do not take part in equality.
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    @property
    def total_count(self) -> int:
        if self.total is not None:
            return self.total
        return sum(self._counts.values())

    def with_total(self) -> WordCounts:
        return WordCounts(self._counts, total=sum(self._counts.values()))


def as_word_counts(counts: Optional[Mapping[str, int]]) -> WordCounts:
    DEFAULT_LOGGER.check_and_raise("missing word counts", PreconditionError, counts is not None)
    if isinstance(counts, WordCounts):
        return counts
    return WordCounts(counts)


def word_counts(
    text: str,
    normalizer: Optional[Normalizer] = None,
    pre_tokenizer: Optional[PreTokenizer] = None,
) -> WordCounts:
    """Counts the words of `text`.

    Args:
        text: The raw sentence.
        normalizer: Applied before splitting. No normalization by default,
            so ``"I"`` and ``"i"`` are different words.
        pre_tokenizer: How the text is cut into words. Splits on whitespace
            by default.

    Returns:
        The sentence's `WordCounts`, with its total already computed.
    """
    normalized = NormalizedString.from_str(text)
    if normalizer is not None:
        normalized = normalizer.normalize(normalized)

    pre_tokenizer = pre_tokenizer or WhitespacePreTokenizer()
    return WordCounts(Counter(pre_tokenizer.pre_tokenize(normalized))).with_total()
