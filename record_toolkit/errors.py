"""Errors raised by record_toolkit.

Missing keys and ``None`` selector results are never errors; only the three
conditions below are.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class RecordToolkitError(Exception):
    """Base class for every error raised by the toolkit."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConfigurationError(RecordToolkitError, ValueError):
    """Per-key sort options do not line up with the sort keys."""


class InvalidInputError(RecordToolkitError, TypeError):
    """A haystack that can not be iterated was passed to ``is_in``."""


class ConversionError(RecordToolkitError, AttributeError):
    """A property declared for ``to_array`` does not exist on the object."""
