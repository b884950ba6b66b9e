'''
Mastermind on the command line

Flow:
choose a length   -> "1" = 3 digits, "2" = 5 digits, "3" = 7 digits
play              -> up to 10 attempts, feedback after every guess
game over         -> secret revealed on a win or a loss

Options:
--seed INT        -> reproducible secret
-v / --verbose    -> debug logging on stderr
'''

import argparse
import logging
import random
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .codegen import generate_code
from .config import DEFAULT_CONFIG, GameConfig
from .console import Console, InputClosedError, StdConsole
from .schemas import GuessInput, LengthChoice, first_error
from .store import Game, GameSession
from .types import Code

logger = logging.getLogger(__name__)


def format_code(code: Code) -> str:
    return ", ".join(str(d) for d in code)


def choose_length(console: Console, config: GameConfig = DEFAULT_CONFIG) -> int:
    console.write_line("Choose a code length:")
    for key, length in config.length_choices.items():
        console.write_line(f"{key}. {length} digits")

    while True:
        line = console.read_line()
        try:
            selection = LengthChoice.parse(line, config)
        except ValidationError:
            logger.debug("Rejected menu choice %r", line)
            console.write_line(f"Invalid choice. Enter {config.menu_keys()}.")
            continue
        return selection.length(config)


def read_guess(console: Console, length: int) -> Code:
    # re-prompt until the line is valid; a bad line never costs an attempt
    while True:
        console.write_line(f"Enter your guess ({length} digits):")
        line = console.read_line()
        try:
            guess = GuessInput(text=line, length=length)
        except ValidationError as exc:
            reason = first_error(exc)
            logger.debug("Rejected guess %r: %s", line, reason)
            console.write_line(f"Invalid input. {reason} Try again.")
            continue
        return guess.digits


def play(
    console: Console,
    config: GameConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> Game:
    console.write_line("🎯 Welcome to Mastermind!")
    length = choose_length(console, config)

    session = GameSession(generate_code(length, rng), max_attempts=config.max_attempts)
    game = session.game
    logger.debug("Game started: length=%d attempts=%d", length, game.max_attempts)

    console.write_line()
    console.write_line(f"Great! I've picked a {length}-digit secret code.")
    console.write_line(f"You have {game.max_attempts} attempts to guess it.")
    console.write_line("🟩 = Correct digit in correct place")
    console.write_line("🟨 = Correct digit but wrong place")
    console.write_line()

    while not session.is_over:
        console.write_line(f"🔢 Attempt {game.attempt}/{game.max_attempts}:")
        guess = read_guess(console, length)
        session.guess(guess)

        if game.status == "in_progress":
            for line in game.history[-1].message.splitlines():
                console.write_line(line)
            console.write_line()

    secret = format_code(session.reveal() or [])
    if game.status == "won":
        console.write_line(f"🎉 You guessed it! The code was {secret}.")
    else:
        console.write_line(f"❌ You've used all attempts! The secret code was {secret}.")
    return game


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastermind",
        description="Guess the secret digit code in 10 attempts.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the secret code (reproducible games).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    console = console or StdConsole()

    try:
        play(console, DEFAULT_CONFIG, rng)
    except InputClosedError as exc:
        # nothing sensible to do without a player
        logger.debug("Input closed: %s", exc)
        console.write_line(f"Input closed: {exc}. Exiting.")
        return 1
    return 0

