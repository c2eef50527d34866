from unisim.core.tokenizer.normalizers import (
    NORMALIZER_FACTORY,
    LowercaseNormalizer,
    NFCNormalizer,
    NormalizedString,
    Normalizer,
    SequenceNormalizer,
    StripNormalizer,
    build_normalizer,
)
from unisim.core.tokenizer.pre_tokenizer import (
    PreTokenizer,
    PunctuationPreTokenizer,
    WhitespacePreTokenizer,
)

__all__ = [
    "NORMALIZER_FACTORY",
    "LowercaseNormalizer",
    "NFCNormalizer",
    "NormalizedString",
    "Normalizer",
    "SequenceNormalizer",
    "StripNormalizer",
    "build_normalizer",
    "PreTokenizer",
    "PunctuationPreTokenizer",
    "WhitespacePreTokenizer",
]
