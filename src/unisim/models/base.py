from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any

from unisim.core.errors import ModelNotTrainedError, UnsupportedOperationError
from unisim.models.config import ModelConfig
from unisim.utils.logging import DEFAULT_LOGGER


class BaseLanguageModel(metaclass=ABCMeta):
    """Abstract base class for all language models in unisim.

    Attributes:
        config (ModelConfig): The configuration object for the model.
        _is_trained_or_fitted (bool): Whether `train_batch` has completed.
    """

    def __init__(self, model_config: ModelConfig):
        self.config = model_config
        self._is_trained_or_fitted: bool = False
        DEFAULT_LOGGER.info(
            f"Initializing {self.__class__.__name__} with config: {self.config}"
        )

    def get_config(self) -> ModelConfig:
        """Returns the configuration object of the model."""
        return self.config

    @property
    def is_trained(self) -> bool:
        return self._is_trained_or_fitted

    @abstractmethod
    def train_batch(self, dataset, progress: bool = False) -> BaseLanguageModel:
        """Trains the model on the whole dataset at once, replacing any previous state."""

    def train_online(self, *args: Any, **kwargs: Any):
        DEFAULT_LOGGER.error(
            f"{self.__class__.__name__} was asked for online training"
        )
        raise UnsupportedOperationError(
            f"{self.__class__.__name__} does not support online training"
        )

    def _check_trained(self) -> None:
        DEFAULT_LOGGER.check_and_raise(
            f"{self.__class__.__name__} hasn't been trained yet, call train_batch first",
            ModelNotTrainedError,
            self._is_trained_or_fitted,
        )

    def summary(self) -> None:
        """Prints a human-readable summary of the model."""
        print(f"\n--- Model Summary: {self.__class__.__name__} ---")
        print(f"  Configuration: {str(self.config)}")
        print(f"  Trained/Fitted: {self._is_trained_or_fitted}")

    def get_hyperparameters_table(self) -> str:
        """
        Returns a string formatted as a list of key hyperparameters and their current values.
        """
        table = f"Hyperparameters for {self.__class__.__name__}:\n"
        for key, value in self.config.model_dump().items():
            table += f"  - {key}: {value}\n"
        return table

    def explain_model_type(self) -> None:
        """
        Prints a brief, simple explanation of what this type of model is.
        """
        raise NotImplementedError("Subclasses should provide a model type explanation.")

    def explain_what_is_learned(self) -> None:
        """
        Prints an explanation of what the model learns during training.
        """
        raise NotImplementedError("Subclasses should explain what they learn.")
