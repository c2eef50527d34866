from __future__ import annotations

import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Type


@dataclass(frozen=True)
class NormalizedString:
    """A piece of text together with the raw string it was derived from."""

    original: str  # Before modification
    normalized: str  # After modification

    def __len__(self):
        return len(self.normalized)

    @classmethod
    def from_str(cls, s: str) -> NormalizedString:
        return cls(original=s, normalized=s)

    def transform(self, change_fn: Callable[[str], str]) -> NormalizedString:
        return replace(self, normalized=change_fn(self.normalized))


class Normalizer(ABC):
    @abstractmethod
    def normalize(self, normalized: NormalizedString) -> NormalizedString:
        """
        Applies normalization to a NormalizedString.
        """

    def __call__(self, text: str) -> str:
        return self.normalize(NormalizedString.from_str(text)).normalized


class StripNormalizer(Normalizer):
    def __init__(self, strip_left: bool = True, strip_right: bool = True):
        self.left = strip_left
        self.right = strip_right

    def normalize(self, normalized: NormalizedString) -> NormalizedString:
        def strip(s: str) -> str:
            if self.left:
                s = s.lstrip()
            if self.right:
                s = s.rstrip()
            return s

        return normalized.transform(strip)


class LowercaseNormalizer(Normalizer):
    def normalize(self, normalized: NormalizedString) -> NormalizedString:
        return normalized.transform(str.lower)


class NFCNormalizer(Normalizer):
    def normalize(self, normalized: NormalizedString) -> NormalizedString:
        return normalized.transform(lambda s: unicodedata.normalize("NFC", s))


class SequenceNormalizer(Normalizer):
    def __init__(self, sequences: List[Normalizer] | Normalizer):
        self.sequences = sequences if isinstance(sequences, list) else [sequences]

    def normalize(self, normalized: NormalizedString) -> NormalizedString:
        result = normalized
        for normalizer in self.sequences:
            result = normalizer.normalize(result)
        return result


NORMALIZER_FACTORY: Dict[str, Type[Normalizer]] = {
    "strip": StripNormalizer,
    "lowercase": LowercaseNormalizer,
    "nfc": NFCNormalizer,
}


def build_normalizer(names: List[str]) -> Normalizer:
    """Chains the normalizers registered under `names`, in order."""
    unknown = [name for name in names if name not in NORMALIZER_FACTORY]
    if unknown:
        raise ValueError(
            f"Unknown normalizers {unknown}, expected one of {list(NORMALIZER_FACTORY)}"
        )
    return SequenceNormalizer([NORMALIZER_FACTORY[name]() for name in names])
