"""Console-backed input source for the battle engine."""
from __future__ import annotations

from typing import Callable, Sequence

Reader = Callable[[str], str]

# Tried in order when stdin closes: run from the fight, else back out of a submenu.
CLOSED_INPUT_ANSWERS = ("R", "0")


class ConsoleChoiceSource:
    """Reads battle decisions from standard input.

    Validation is left to the battle engine, which re-prompts on anything
    outside ``valid_options``.
    """

    def __init__(self, reader: Reader | None = None) -> None:
        self._reader = reader

    def request_choice(self, prompt: str, valid_options: Sequence[str]) -> str:
        try:
            if self._reader is None:
                return input(prompt)
            return self._reader(prompt)
        except EOFError:
            for answer in CLOSED_INPUT_ANSWERS:
                if answer in valid_options:
                    return answer
            raise
