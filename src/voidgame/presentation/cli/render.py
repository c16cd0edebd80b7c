"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, List, Sequence

LOG_HEADER = "======== Start Combat Log ========"
LOG_FOOTER = "======== End Combat Log ========"


def debug_enabled() -> bool:
    """Return True only when VOID_DEBUG is explicitly set to '1'."""
    return os.getenv("VOID_DEBUG") == "1"


def render_combat_log(lines: Iterable[str]) -> str:
    """Frame a combat transcript for display after a battle."""
    return "\n".join([f"\n{LOG_HEADER}", *lines, f"{LOG_FOOTER}\n"])


def render_node(node_id: str, text: str, choices: Sequence[str], *, show_id: bool = False) -> List[str]:
    """Return the lines used to show a story node and its choices."""
    lines = [f"[{node_id}]", text] if show_id else [text]
    if choices:
        lines.append("Choices:")
        lines.extend(f"  {idx}. {label}" for idx, label in enumerate(choices, start=1))
    return lines
