import math
from typing import Any, Iterable

import numpy as np

from unisim.core.errors import NumericInvariantError
from unisim.utils.logging import DEFAULT_LOGGER

# Terms this many nats below the maximum add less than exp(-10) ~ 4.5e-5 each.
LOG_SUM_EXP_THRESHOLD = 10.0


def safe_log(prob: float) -> float:
    """Natural log where a zero probability maps to -inf instead of raising."""
    if prob == 0:
        return -math.inf
    return math.log(prob)


def check_log_prob(
    value: float, name: str, allow_infinite: bool = True, **context: Any
) -> float:
    """Returns `value` unchanged, raising NumericInvariantError when it is NaN.

    -inf is a legitimate log-probability (an impossible event); pass
    ``allow_infinite=False`` where the caller needs a finite number.
    `context` holds the inputs that produced `value` and is only rendered
    into the error message.
    """
    if math.isnan(value) or (not allow_infinite and math.isinf(value)):
        details = ", ".join(f"{key}={item!r}" for key, item in context.items())
        msg = f"{name} is {value}" + (f" ({details})" if details else "")
        DEFAULT_LOGGER.error(msg)
        raise NumericInvariantError(msg)
    return value


def log_sum_exp(log_values: Iterable[float]) -> float:
    """Computes log(sum(exp(a_i))) without leaving log space.

    Shifts every term by the maximum ``m`` and returns
    ``m + log(sum(exp(a_i - m)))``, skipping terms more than
    `LOG_SUM_EXP_THRESHOLD` below ``m``.

    Args:
        log_values: The log-values a_1..a_n. May contain -inf.

    Returns:
        The log of the summed probabilities; -inf for an empty input or when
        every term is -inf.

    Raises:
        NumericInvariantError: If any of the values is NaN.
    """
    values = np.fromiter(log_values, dtype=np.float64)
    if values.size == 0:
        return -math.inf

    if np.isnan(values).any():
        msg = f"log_sum_exp received NaN among {values.tolist()}"
        DEFAULT_LOGGER.error(msg)
        raise NumericInvariantError(msg)

    m = values.max()
    if np.isinf(m):
        return float(m)

    shifted = values - m
    kept = shifted[shifted >= -LOG_SUM_EXP_THRESHOLD]
    return float(m + np.log(np.exp(kept).sum()))
