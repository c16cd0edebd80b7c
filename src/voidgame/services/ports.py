"""Capabilities the battle engine consumes from the outside world."""
from __future__ import annotations

from typing import Protocol, Sequence


class ChoiceSource(Protocol):
    """Blocking source of player decisions (console, scripted test input...)."""

    def request_choice(self, prompt: str, valid_options: Sequence[str]) -> str:
        ...


class BattleLogger(Protocol):
    """Append-only transcript of everything that happens in a battle."""

    def log(self, line: str) -> None:
        """Record ``line`` and show it in the visible transcript."""
        ...

    def record(self, line: str) -> None:
        """Record ``line`` without echoing it."""
        ...
