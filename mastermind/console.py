"""
Line-oriented I/O the game loop talks through.
The loop only ever needs two things: read one line, write one line.
"""

from abc import ABC, abstractmethod


class InputClosedError(Exception):
    """No more input can be read (stream closed or failing)."""


class Console(ABC):
    @abstractmethod
    def read_line(self) -> str:
        """Block until the user enters a line; raise InputClosedError if that can't happen."""

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        ...


class StdConsole(Console):
    """stdin / stdout."""

    def read_line(self) -> str:
        try:
            return input()
        except EOFError as exc:
            raise InputClosedError("end of input") from exc
        except OSError as exc:
            raise InputClosedError(str(exc)) from exc

    def write_line(self, text: str = "") -> None:
        print(text, flush=True)
