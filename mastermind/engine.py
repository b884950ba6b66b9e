"""
Pure game logic (no I/O, no state).
We compute two feedback numbers for each guess:
- exact: how many indices are exactly correct (right digit, right place) -> "green"
- partial: how many of the remaining digits appear somewhere else in the secret -> "yellow"

Duplicates are allowed in both secret and guess. A secret digit is used at most
once: either by an exact match or by a single partial match.
"""

from typing import Tuple

from .types import Code


class LengthMismatchError(ValueError):
    """Secret and guess do not have the same number of digits."""


def evaluate(secret: Code, guess: Code) -> Tuple[int, int]:
    """
    Example:
      secret = [1, 1, 2]
      guess  = [2, 2, 1]
      exact   = 0  (no position lines up)
      partial = 2  (one 1 and one 2; the guess's second 2 has no partner left)
      Returns a tuple: (exact, partial)
    """

    # 0. Validate lengths match
    n = len(secret)
    if len(guess) != n:
        raise LengthMismatchError(
            f"Secret has {n} digits but guess has {len(guess)}."
        )

    # 1. Exact pass: count position matches, everything else is left over
    exact = 0
    secret_counts = [0] * 10
    guess_counts = [0] * 10

    i = 0
    while i < n:
        s = secret[i]
        g = guess[i]
        if not 0 <= s <= 9 or not 0 <= g <= 9:
            raise ValueError(f"Digits must be between 0 and 9, got {s} and {g} at index {i}.")
        if s == g:
            exact += 1
        else:
            # only unconsumed positions take part in the partial pass
            secret_counts[s] += 1
            guess_counts[g] += 1
        i += 1

    # 2. Partial pass: each leftover digit value can pair up min(secret, guess) times
    partial = 0
    digit = 0
    while digit <= 9:
        partial += min(secret_counts[digit], guess_counts[digit])
        digit += 1

    return (exact, partial)


def is_win(secret: Code, guess: Code) -> bool:
    """
    Win = all digits match in order, for all positions.
    Works for any length, as long as lengths match.
    """
    n = len(secret)
    if len(guess) != n:
        return False

    i = 0
    while i < n:
        if secret[i] != guess[i]:
            return False
        i += 1
    return True
