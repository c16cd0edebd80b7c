"""Exceptions raised while loading bundled story data."""
from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """A definition file could not be read or parsed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DataValidationError(DataError):
    """A definition file parsed but has the wrong shape."""


class DataReferenceError(DataError):
    """A story node points at a node or monster that does not exist."""
