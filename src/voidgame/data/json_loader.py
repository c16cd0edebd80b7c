"""Read JSON definition files from disk."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path) -> object:
    """Parse ``path`` as UTF-8 JSON, wrapping I/O and decode failures in DataLoadError."""
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise DataLoadError(f"Missing definition file: {path}", path) from exc
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"{path} is not valid JSON (line {exc.lineno}, column {exc.colno}).", path) from exc
    except OSError as exc:
        raise DataLoadError(f"Could not read {path}: {exc.strerror}", path) from exc
