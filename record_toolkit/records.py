from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from typing import Any

_MISSING = object()
_REQUIRED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def _takes_no_arguments(func) -> bool:
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # builtins without an introspectable signature
        return True
    return not any(p.default is p.empty and p.kind in _REQUIRED_KINDS for p in params)


class MappingRecord:
    """Record backed by a mapping; keys are looked up as-is."""

    __slots__ = ('data',)

    def __init__(self, data: Mapping) -> None:
        self.data = data

    def has(self, key: Any) -> bool:
        try:
            return key in self.data
        except TypeError:
            # unhashable key
            return False

    def get(self, key: Any) -> Any:
        if not self.has(key):
            return None
        return self.data[key]


class SequenceRecord:
    """Record backed by a list or tuple; keys are non-negative positions."""

    __slots__ = ('data',)

    def __init__(self, data: Sequence) -> None:
        self.data = data

    def has(self, key: Any) -> bool:
        if isinstance(key, bool) or not isinstance(key, int):
            return False
        return 0 <= key < len(self.data)

    def get(self, key: Any) -> Any:
        if not self.has(key):
            return None
        return self.data[key]


class ObjectRecord:
    """Record backed by a plain object.

    A zero-argument ``get_<name>`` method wins over the attribute itself, so
    classes exposing explicit getters are read through them.
    """

    __slots__ = ('obj',)

    def __init__(self, obj: Any) -> None:
        self.obj = obj

    def _accessor(self, key: Any):
        if not isinstance(key, str):
            return None
        accessor = getattr(self.obj, f'get_{key}', None)
        if not callable(accessor) or not _takes_no_arguments(accessor):
            return None
        return accessor

    def has(self, key: Any) -> bool:
        if self._accessor(key) is not None:
            return True
        if not isinstance(key, str):
            return False
        return getattr(self.obj, key, _MISSING) is not _MISSING

    def get(self, key: Any) -> Any:
        accessor = self._accessor(key)
        if accessor is not None:
            return accessor()
        if not isinstance(key, str):
            return None
        return getattr(self.obj, key, None)


def as_record(value: Any):
    """Wrap *value* in the record variant matching its shape."""
    if isinstance(value, (MappingRecord, SequenceRecord, ObjectRecord)):
        return value
    if isinstance(value, Mapping):
        return MappingRecord(value)
    if isinstance(value, (list, tuple)):
        return SequenceRecord(value)
    return ObjectRecord(value)


def iter_entries(container: Any):
    """Yield ``(key, element)`` pairs of a dict or a sequence in order."""
    if isinstance(container, Mapping):
        return iter(container.items())
    return enumerate(container)
