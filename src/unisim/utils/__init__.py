import sys
from enum import Enum, auto

from tqdm.auto import tqdm

import __main__


class RuntimeEnv(Enum):
    JUPYTER = auto()
    SHELL = auto()
    IPYTHON = auto()
    COLAB = auto()


def get_runtime() -> RuntimeEnv:
    if "google.colab" in sys.modules:
        return RuntimeEnv.COLAB
    elif "ipykernel" in sys.modules:
        return RuntimeEnv.JUPYTER
    elif sys.platform == "win32" or sys.platform == "darwin":
        return RuntimeEnv.SHELL
    else:
        if hasattr(__main__, "__file__"):
            return RuntimeEnv.SHELL
        else:
            return RuntimeEnv.IPYTHON


def validate_config(config_cls, **kwargs):
    """Builds `config_cls` from the kwargs it knows, warning about the rest."""
    from unisim.utils.logging import DEFAULT_LOGGER

    current_config = dict()
    for k, v in kwargs.items():
        if k in config_cls.model_fields:
            current_config[k] = v
        else:
            DEFAULT_LOGGER.warning(
                f"Ignoring unknown kwarg '{k}' during {config_cls.__name__} creation"
            )

    return config_cls(**current_config)


progress_bar = tqdm
