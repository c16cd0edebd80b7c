"""In-memory combat transcript."""
from __future__ import annotations

from typing import Callable, List, Tuple

Writer = Callable[[str], None]


class CombatLog:
    """Ordered transcript of battle output and raw player input.

    ``log`` lines are echoed through ``writer`` as they arrive; ``record``
    lines (player keystrokes) are only kept, unless ``echo_records`` is set.
    """

    def __init__(self, writer: Writer | None = print, *, echo_records: bool = False) -> None:
        self._writer = writer
        self._echo_records = echo_records
        self._lines: List[str] = []

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    def log(self, line: str) -> None:
        self._lines.append(line)
        if self._writer is not None:
            self._writer(line)

    def record(self, line: str) -> None:
        self._lines.append(line)
        if self._echo_records and self._writer is not None:
            self._writer(f"[input] {line}")

    def clear(self) -> None:
        """Drop every line; used between encounters."""
        self._lines.clear()
