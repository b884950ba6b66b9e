"""
Testing the game loop through a scripted console
- Trick: replace main.generate_code so the secret is predictable.
- Tool: pytest's "monkeypatch" fixture does that for just one test at a time.
"""

import logging

import pytest

import mastermind.main as app_main
from mastermind.console import InputClosedError


def make_fake_generate_code():
    """
    Returns a function that ignores randomness and gives us:
      - length 3 -> [1, 2, 3]
      - length 5 -> [4, 2, 3, 5, 1]
      - length 7 -> [0, 1, 2, 3, 4, 5, 6]
    """
    def fake_generate_code(length, rng=None):
        if length == 3:
            return [1, 2, 3]
        elif length == 5:
            return [4, 2, 3, 5, 1]
        elif length == 7:
            return [0, 1, 2, 3, 4, 5, 6]
        return [0 for _ in range(length)]
    return fake_generate_code


@pytest.fixture(autouse=True)
def fixed_secret(monkeypatch):
    # Patch the bound symbol that main.py actually uses
    monkeypatch.setattr(app_main, "generate_code", make_fake_generate_code())


def test_win_on_second_attempt(scripted):
    console = scripted(["2", "12453", "42351"])

    game = app_main.play(console)

    assert game.status == "won"
    assert len(game.history) == 2
    assert game.history[0].exact == 2
    assert game.history[0].partial == 3
    assert "🟩 2 correct and in the right position" in console.output
    assert "🟨 3 correct but in the wrong position" in console.output
    assert console.output[-1] == "🎉 You guessed it! The code was 4, 2, 3, 5, 1."


def test_loss_after_ten_attempts_no_eleventh(scripted):
    # an 11th line is available but must never be read
    console = scripted(["1"] + ["999"] * 10 + ["123"])

    game = app_main.play(console)

    assert game.status == "lost"
    assert len(game.history) == 10
    assert console.count("🔢 Attempt") == 10
    assert "🔢 Attempt 10/10:" in console.output
    assert console.lines == ["123"]
    assert console.output[-1] == "❌ You've used all attempts! The secret code was 1, 2, 3."


def test_invalid_guesses_do_not_consume_attempts(scripted):
    console = scripted(["1", "12", "12a", " 123 "])

    game = app_main.play(console)

    assert game.status == "won"
    assert len(game.history) == 1
    # still on the first attempt while re-prompting
    assert console.count("🔢 Attempt") == 1
    assert console.count("Enter your guess (3 digits):") == 3
    assert "Invalid input. Guess must have exactly 3 digits. Try again." in console.output
    assert "Invalid input. Guess must contain digits 0-9 only. Try again." in console.output


def test_invalid_menu_choice_reprompts(scripted):
    console = scripted(["", "4", "seven", "3", "0123456"])

    game = app_main.play(console)

    assert console.count("Invalid choice. Enter 1, 2, or 3.") == 3
    assert len(game.secret) == 7
    assert game.status == "won"


def test_play_raises_when_input_closes(scripted):
    console = scripted(["1", "000"])

    with pytest.raises(InputClosedError):
        app_main.play(console)


def test_main_exits_nonzero_on_closed_input(scripted):
    console = scripted(["2"])

    status = app_main.main([], console=console)

    assert status == 1
    assert console.output[-1] == "Input closed: end of input. Exiting."


def test_main_full_game(scripted):
    console = scripted(["1", "123"])

    assert app_main.main(["--verbose"], console=console) == 0
    assert console.output[0] == "🎯 Welcome to Mastermind!"


def test_main_seed_is_passed_through(scripted, monkeypatch):
    seen = []

    def recording_generate_code(length, rng=None):
        seen.append(rng.randint(0, 10**6))
        return [1, 2, 3]

    monkeypatch.setattr(app_main, "generate_code", recording_generate_code)

    app_main.main(["--seed", "5"], console=scripted(["1", "123"]))
    app_main.main(["--seed", "5"], console=scripted(["1", "123"]))

    assert seen[0] == seen[1]


def test_format_code():
    assert app_main.format_code([0, 7, 3]) == "0, 7, 3"
    assert app_main.format_code([]) == ""


def test_main_closed_input_not_logged_at_default_level(scripted, caplog):
    # the user already sees the message on the console; stderr stays quiet
    caplog.set_level(logging.WARNING)
    console = scripted(["1"])

    assert app_main.main([], console=console) == 1
    assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []
    assert console.count("Input closed:") == 1
