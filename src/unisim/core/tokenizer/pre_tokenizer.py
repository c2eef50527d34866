from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import List

from unisim.core.tokenizer.normalizers import NormalizedString


class PreTokenizer(ABC):
    @abstractmethod
    def pre_tokenize(self, normalized: NormalizedString) -> List[str]:
        """
        Splits a NormalizedString into its word tokens.
        """


class WhitespacePreTokenizer(PreTokenizer):
    def pre_tokenize(self, normalized: NormalizedString) -> List[str]:
        return re.findall(r"\S+", normalized.normalized, re.UNICODE)


class PunctuationPreTokenizer(PreTokenizer):
    def pre_tokenize(self, normalized: NormalizedString) -> List[str]:
        """Reference: https://stackoverflow.com/questions/367155/splitting-a-string-into-words-and-punctuation"""
        return re.findall(r"\w+|[^\w\s]", normalized.normalized, re.UNICODE)
