from unisim.models.base import BaseLanguageModel
from unisim.models.config import ModelConfig, UnigramConfig
from unisim.models.prob import CrossLanguageModel, LanguageModel

__all__ = [
    "BaseLanguageModel",
    "ModelConfig",
    "UnigramConfig",
    "CrossLanguageModel",
    "LanguageModel",
]
