from __future__ import annotations

from typing import Iterable, List

import pytest

from librarycatalog.prompts import Console


class ScriptedConsole(Console):
    """Feeds canned lines; raises EOFError once they run out."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines: List[str] = list(lines)
        self.output: List[str] = []
        self.reads = 0
        super().__init__(read_line=self._next_line, write=self.output.append)

    def _next_line(self) -> str:
        if not self.lines:
            raise EOFError
        self.reads += 1
        return self.lines.pop(0)


@pytest.fixture
def scripted():
    return ScriptedConsole
