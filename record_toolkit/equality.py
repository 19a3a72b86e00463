"""Strict and loose value comparison.

``strict_equals`` is type-exact: scalars must share their exact type and
value, containers must hold strictly equal items under the same keys in the
same order, and any other object only equals itself.

``loose_equals`` coerces between numbers, numeric strings, booleans and
``None`` before comparing, and ignores key order for mappings.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Optional

_NUMERIC_RE = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')
_SCALARS = (bool, int, float, complex, str, bytes, type(None))


class EqualityMode(Enum):
    STRICT = 'strict'
    LOOSE = 'loose'


def parse_numeric(text: str) -> Optional[float]:
    """Return the float value of a numeric string, ``None`` otherwise."""
    if not isinstance(text, str) or not _NUMERIC_RE.match(text):
        return None
    return float(text)


def strict_equals(a: Any, b: Any) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, Mapping):
        if len(a) != len(b) or list(a.keys()) != list(b.keys()):
            return False
        return all(strict_equals(a[k], b[k]) for k in a)
    if isinstance(a, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(strict_equals(x, y) for x, y in zip(a, b))
    if isinstance(a, _SCALARS):
        return a == b
    return a is b


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def loose_truthy(value: Any) -> bool:
    """Truthiness of a loosely typed language: ``''`` and ``'0'`` are false."""
    if isinstance(value, str):
        return value not in ('', '0')
    return bool(value)


def loose_equals(a: Any, b: Any) -> bool:
    if a is b:
        return True

    if a is None or b is None:
        other = b if a is None else a
        if isinstance(other, str):
            return other == ''
        if isinstance(other, (Mapping, list, tuple)):
            return len(other) == 0
        return not loose_truthy(other)

    if isinstance(a, bool) or isinstance(b, bool):
        return loose_truthy(a) == loose_truthy(b)

    if _is_number(a) and _is_number(b):
        return a == b

    if _is_number(a) or _is_number(b):
        number, other = (a, b) if _is_number(a) else (b, a)
        if isinstance(other, str):
            parsed = parse_numeric(other)
            if parsed is None:
                return str(number) == other
            return float(number) == parsed
        return number == other

    if isinstance(a, str) and isinstance(b, str):
        left, right = parse_numeric(a), parse_numeric(b)
        if left is not None and right is not None:
            return left == right
        return a == b

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        return all(k in b and loose_equals(v, b[k]) for k, v in a.items())

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(loose_equals(x, y) for x, y in zip(a, b))

    return a == b


def comparator(mode: EqualityMode) -> Callable[[Any, Any], bool]:
    mode = EqualityMode(mode)
    return strict_equals if mode is EqualityMode.STRICT else loose_equals
