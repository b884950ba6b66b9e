"""
Secret code generation.
Each digit is drawn independently and uniformly from 0..9, so repeats are allowed.
The source only has to be fair, not secure: the standard `random` module is enough.
Pass your own random.Random to get a reproducible secret (--seed, tests).
"""

import logging
import random
from typing import Optional

from .types import Code

logger = logging.getLogger(__name__)


def generate_code(length: int, rng: Optional[random.Random] = None) -> Code:
    if length < 0:
        raise ValueError(f"Code length cannot be negative, got {length}.")

    source = rng if rng is not None else random

    digits = []
    k = 0
    while k < length:
        # randint is inclusive on both ends -> 0..9
        digits.append(source.randint(0, 9))
        k += 1

    logger.debug("Generated a %d-digit secret", length)
    return digits
