"""
- Provide a ScriptedConsole: feeds canned lines to the game and records everything it prints.
- Running out of lines behaves like a closed stdin (InputClosedError).
"""
from typing import List

import pytest

from mastermind.console import Console, InputClosedError


class ScriptedConsole(Console):
    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.output: List[str] = []
        self.reads = 0

    def read_line(self) -> str:
        if not self.lines:
            raise InputClosedError("end of input")
        self.reads += 1
        return self.lines.pop(0)

    def write_line(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)

    def count(self, prefix: str) -> int:
        return sum(1 for line in self.output if line.startswith(prefix))


@pytest.fixture
def scripted():
    # usage: console = scripted(["1", "123"])
    def _make(lines: List[str]) -> ScriptedConsole:
        return ScriptedConsole(lines)
    return _make
