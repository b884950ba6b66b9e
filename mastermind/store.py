"""
In-memory game state
Holds the secret, the attempt counter and the guess history of ONE game.
Nothing outlives the process.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config import MAX_ATTEMPTS
from .engine import evaluate, is_win
from .types import Code, GameStatus

logger = logging.getLogger(__name__)


@dataclass
class GuessEntry:
    guess: Code
    exact: int
    partial: int
    message: str


@dataclass
class Game:
    secret: Code
    max_attempts: int = MAX_ATTEMPTS
    # number of the attempt the player is on, 1..max_attempts
    attempt: int = 1
    status: GameStatus = "in_progress"
    history: List[GuessEntry] = field(default_factory=list)


def feedback_message(exact: int, partial: int) -> str:
    # two lines: greens, then yellows
    return (
        f"🟩 {exact} correct and in the right position\n"
        f"🟨 {partial} correct but in the wrong position"
    )


class GameSession:
    def __init__(self, secret: Code, max_attempts: int = MAX_ATTEMPTS) -> None:
        if max_attempts < 1:
            raise ValueError("A game needs at least one attempt.")
        self.game = Game(secret=list(secret), max_attempts=max_attempts)

    @property
    def attempts_left(self) -> int:
        return self.game.max_attempts - len(self.game.history)

    @property
    def is_over(self) -> bool:
        return self.game.status != "in_progress"

    def guess(self, attempt: Code) -> Game:
        game = self.game

        if game.status != "in_progress":
            # finished games stay as they are
            return game

        # raises LengthMismatchError before anything is recorded
        exact, partial = evaluate(game.secret, attempt)
        entry = GuessEntry(
            guess=list(attempt),
            exact=exact,
            partial=partial,
            message=feedback_message(exact, partial),
        )
        game.history.append(entry)
        logger.debug("Attempt %d/%d: exact=%d partial=%d", game.attempt, game.max_attempts, exact, partial)

        # counter stays put once the game is decided
        if is_win(game.secret, attempt):
            game.status = "won"
        elif game.attempt >= game.max_attempts:
            game.status = "lost"
        else:
            game.attempt += 1

        if game.status != "in_progress":
            logger.debug("Game %s after %d attempt(s)", game.status, len(game.history))
        return game

    def reveal(self) -> Optional[Code]:
        """Return the secret code ONLY for finished games; else None."""
        if self.is_over:
            return list(self.game.secret)
        return None
