from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

from .predicates import is_container, is_indexed
from .records import iter_entries


def _next_index(container: Dict[Any, Any]) -> int:
    int_keys = [k for k in container if isinstance(k, int) and not isinstance(k, bool)]
    return max(int_keys) + 1 if int_keys else 0


def _merge_into(result: Any, incoming: Any) -> Any:
    """Fold *incoming* into *result*, which is already a private copy."""
    if isinstance(result, tuple):
        result = list(result)
    if isinstance(result, list) and isinstance(incoming, (list, tuple)):
        # every position of incoming already exists or is the next free one
        result.extend(deepcopy(list(incoming)))
        return result

    was_list = isinstance(result, list)
    if was_list:
        result = dict(enumerate(result))

    next_index = _next_index(result)
    for key, value in iter_entries(incoming):
        if isinstance(key, int) and not isinstance(key, bool):
            if key in result:
                key = next_index
            result[key] = deepcopy(value)
            next_index = max(next_index, key + 1)
        elif is_container(value) and is_container(result.get(key)):
            result[key] = _merge_into(result[key], value)
        else:
            result[key] = deepcopy(value)

    if was_list and is_indexed(result, consecutive=True):
        return list(result.values())
    return result


def merge(a: Any, b: Any, *more: Any) -> Any:
    """Deep-merge two or more containers into a new one.

    - Integer keys never collide: a value whose key is already taken is
      appended under the next free integer key.
    - String keys overwrite, except that two containers under the same key
      are merged recursively.

    The arguments are left untouched.
    """
    result = deepcopy(a)
    for incoming in (b, *more):
        result = _merge_into(result, incoming)
    return result
