import functools
import os
import random
from typing import Optional

RANDOM_WORD_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghiklmnopqrstuvwxyz"


@functools.lru_cache(maxsize=None)
def getenv(key, default=0):
    return type(default)(os.getenv(key, default))


def random_sentence(length: int = 10, rng: Optional[random.Random] = None) -> str:
    """Generates `length` space-separated random words of 2 to 11 characters each."""
    rng = rng or random.Random()
    words = []
    for _ in range(length):
        word_length = rng.randint(2, 11)
        words.append("".join(rng.choice(RANDOM_WORD_CHARS) for _ in range(word_length)))
    return " ".join(words)
