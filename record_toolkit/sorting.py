"""Multi-key sorting of record collections.

Sort keys are compared lexicographically: the second key only decides
between records tied on the first, and so on. The original position of each
record is always appended as the final key, which makes the order total and
keeps fully tied records in their input order.
"""
from __future__ import annotations

import logging
import re
from enum import Enum, IntFlag
from functools import cmp_to_key
from typing import Any, Callable, List

from .equality import loose_truthy, parse_numeric
from .errors import ConfigurationError
from .selectors import as_selector_list
from .transforms import column

logger = logging.getLogger(__name__)

_NUMERIC_PREFIX_RE = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')
_NATURAL_SPLIT_RE = re.compile(r'(\d+)')


class SortDirection(Enum):
    ASC = 'asc'
    DESC = 'desc'


class SortFlag(IntFlag):
    REGULAR = 0
    NUMERIC = 1
    STRING = 2
    NATURAL = 4
    FLAG_CASE = 8


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_number(value: Any):
    if _is_number(value):
        return value
    if isinstance(value, bool):
        return int(value)
    if value is None:
        return 0
    if isinstance(value, str):
        match = _NUMERIC_PREFIX_RE.match(value)
        return float(match.group(0)) if match else 0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _as_text(value: Any) -> str:
    if value is None or value is False:
        return ''
    if value is True:
        return '1'
    return str(value)


def _natural_key(text: str) -> List[Any]:
    return [(0, int(part), '') if part.isdigit() else (1, 0, part)
            for part in _NATURAL_SPLIT_RE.split(text) if part]


def compare_regular(a: Any, b: Any) -> int:
    """Compare two values the way a loosely typed language would."""
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return -1 if a is None else 1

    if isinstance(a, bool) or isinstance(b, bool):
        return _cmp(loose_truthy(a), loose_truthy(b))

    left = a if _is_number(a) else parse_numeric(a)
    right = b if _is_number(b) else parse_numeric(b)
    if left is not None and right is not None:
        return _cmp(left, right)

    if isinstance(a, str) and isinstance(b, str):
        return _cmp(a, b)
    if _is_number(a) and isinstance(b, str) or isinstance(a, str) and _is_number(b):
        return _cmp(str(a), str(b))

    try:
        return _cmp(a, b)
    except TypeError:
        return _cmp((type(a).__name__, repr(a)), (type(b).__name__, repr(b)))


def _value_comparator(flag: SortFlag) -> Callable[[Any, Any], int]:
    flag = SortFlag(flag)
    fold_case = bool(flag & SortFlag.FLAG_CASE)
    base = flag & ~SortFlag.FLAG_CASE

    def text(value: Any) -> str:
        value = _as_text(value)
        return value.casefold() if fold_case else value

    if base & SortFlag.NATURAL:
        return lambda a, b: _cmp(_natural_key(text(a)), _natural_key(text(b)))
    if base & SortFlag.STRING:
        return lambda a, b: _cmp(text(a), text(b))
    if base & SortFlag.NUMERIC:
        return lambda a, b: _cmp(_as_number(a), _as_number(b))
    return compare_regular


def _per_key(option: Any, count: int, name: str) -> List[Any]:
    if isinstance(option, (list, tuple)):
        if len(option) != count:
            raise ConfigurationError(
                f'The length of {name} must be the same as that of keys '
                f'({len(option)} != {count})',
                {name: list(option), 'keys': count},
            )
        return list(option)
    return [option] * count


def _sorted_positions(records: Any, keys: Any, directions: Any, sort_flags: Any) -> List[int]:
    selectors = as_selector_list(keys)
    count = len(selectors)
    directions = [SortDirection(d) for d in _per_key(directions, count, 'directions')]
    flags = [SortFlag(f) for f in _per_key(sort_flags, count, 'sort_flags')]

    columns = [column(records, s, keep_keys=False) for s in selectors]
    comparators = [_value_comparator(f) for f in flags]
    logger.debug('Sorting %d records by %d key(s): %s', len(columns[0]), count, list(zip(directions, flags)))

    def compare(i: int, j: int) -> int:
        for values, cmp, direction in zip(columns, comparators, directions):
            outcome = cmp(values[i], values[j])
            if outcome:
                return -outcome if direction is SortDirection.DESC else outcome
        # original position as the final, always ascending key
        return _cmp(i, j)

    return sorted(range(len(columns[0])), key=cmp_to_key(compare))


def multisort(
    records: Any,
    keys: Any,
    directions: Any = SortDirection.ASC,
    sort_flags: Any = SortFlag.REGULAR,
) -> None:
    """Sort *records* in place by one or more keys.

    *records* is a list (reordered) or a dict (entries reordered; string keys
    are kept, integer keys are renumbered from 0 in the new order).
    *keys* is a selector or a sequence of selectors. *directions* and
    *sort_flags* are either one value for all keys or one value per key.

    Raises ConfigurationError when a per-key list does not match *keys* in
    length. Does nothing for empty records or keys.
    """
    if not records or keys is None or (isinstance(keys, (list, tuple)) and not keys):
        return

    positions = _sorted_positions(records, keys, directions, sort_flags)
    if isinstance(records, dict):
        entries = list(records.items())
        records.clear()
        next_index = 0
        for p in positions:
            key, value = entries[p]
            if isinstance(key, int) and not isinstance(key, bool):
                key = next_index
                next_index += 1
            records[key] = value
    else:
        items = list(records)
        records[:] = [items[p] for p in positions]


def sorted_records(
    records: Any,
    keys: Any,
    directions: Any = SortDirection.ASC,
    sort_flags: Any = SortFlag.REGULAR,
):
    """Return a sorted copy of *records*; see ``multisort``."""
    result = dict(records) if isinstance(records, dict) else list(records)
    multisort(result, keys, directions, sort_flags)
    return result
