from pydantic import BaseModel, field_validator


class ModelConfig(BaseModel):
    def __str__(self):
        params = ", ".join(f"{k}={v}" for k, v in self.model_dump().items())
        return f"{self.__class__.__name__}({params})"


class UnigramConfig(ModelConfig):
    """Configuration shared by the unigram and cross-language models.

    Attributes:
        smoothing_coefficient: Weight of the sentence-local word frequency
            against the corpus-wide background frequency. Must lie in (0, 1].
            Defaults to 0.9.
        background_floor_count: Extra count every training word receives in
            the background distribution, so that its background mass is
            ``((1 - smoothing_coefficient) * count + background_floor_count) / total``.
            ``0`` gives plain linear interpolation. Defaults to 1.0.

    Note:
        With a positive ``background_floor_count`` the word probabilities of
        a sentence are scores rather than a normalized distribution: they sum
        to more than 1 and, on small corpora, a single value can exceed 1.
        Set it to ``0`` for probabilities that sum to 1 over the vocabulary.
    """

    smoothing_coefficient: float = 0.9
    background_floor_count: float = 1.0

    @field_validator("smoothing_coefficient")
    @classmethod
    def check_smoothing_coefficient(cls, value: float) -> float:
        if not 0 < value <= 1:
            raise ValueError(
                f"smoothing_coefficient must be in (0, 1], got {value}"
            )
        return value

    @field_validator("background_floor_count")
    @classmethod
    def check_background_floor_count(cls, value: float) -> float:
        if value < 0:
            raise ValueError(
                f"background_floor_count must be non-negative, got {value}"
            )
        return value
