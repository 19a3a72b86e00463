from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from .records import iter_entries
from .selectors import Selector, as_selector, as_selector_list, extract
from .strings import float_to_string

logger = logging.getLogger(__name__)


def _elements(records: Any):
    return records.values() if isinstance(records, Mapping) else records


def map_records(records: Any, from_: Selector, to: Selector, group: Optional[Selector] = None) -> Dict[Any, Any]:
    """Build a ``{from: to}`` lookup, optionally nested under ``group``.

    >>> rows = [{'id': 1, 'name': 'a'}, {'id': 2, 'name': 'b'}, {'id': 1, 'name': 'c'}]
    >>> map_records(rows, 'id', 'name')
    {1: 'c', 2: 'b'}
    """
    from_, to = as_selector(from_), as_selector(to)
    group = as_selector(group) if group is not None else None

    result: Dict[Any, Any] = {}
    for element in _elements(records):
        key = extract(element, from_)
        value = extract(element, to)
        if group is not None:
            result.setdefault(extract(element, group), {})[key] = value
        else:
            result[key] = value
    return result


def column(records: Any, selector: Selector, keep_keys: bool = True):
    """Project one value out of every record.

    A dict of records keeps its keys when *keep_keys* is set; every other case
    produces a list in iteration order.
    """
    selector = as_selector(selector)
    if keep_keys and isinstance(records, Mapping):
        return {k: extract(element, selector) for k, element in records.items()}
    return [extract(element, selector) for element in _elements(records)]


def index(records: Any, key: Optional[Selector], groups: Any = (), keep_keys: bool = False) -> Dict[Any, Any]:
    """Index and/or group records.

    Each selector in *groups* adds one nesting level keyed by the value it
    resolves to. Below the last level:

    - with *key* set, the record is stored under the value *key* resolves to
      (float values are normalized to text); records resolving to ``None``
      are dropped and later records overwrite earlier ones;
    - with *key* ``None``, records are collected in a list, or in a dict under
      their original keys when *keep_keys* is set. Without groups there is
      nowhere to put them and every record is dropped.
    """
    groups = as_selector_list(groups)
    key = as_selector(key) if key is not None else None

    if key is None and not groups:
        logger.debug('index() called without key or groups; every record is dropped')
        return {}

    result: Dict[Any, Any] = {}
    for original_key, element in iter_entries(records):
        level = result
        for depth, group in enumerate(groups):
            group_value = extract(element, group)
            if group_value not in level:
                innermost = depth == len(groups) - 1
                level[group_value] = [] if innermost and key is None and not keep_keys else {}
            level = level[group_value]

        if key is None:
            if keep_keys:
                level[original_key] = element
            else:
                level.append(element)
            continue

        value = extract(element, key)
        if value is None:
            logger.debug('Dropping record %r: index key resolved to None', original_key)
            continue
        if isinstance(value, float):
            value = float_to_string(value)
        level[value] = element

    return result
