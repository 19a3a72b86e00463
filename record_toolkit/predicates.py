from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .equality import loose_equals, strict_equals
from .errors import InvalidInputError


def is_container(value: Any) -> bool:
    """True for the containers the toolkit builds results from: dict and list."""
    return isinstance(value, (dict, list))


def _is_int_key(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def is_indexed(container: Any, consecutive: bool = False) -> bool:
    """Whether every key of *container* is an integer.

    With *consecutive*, the keys must also be exactly ``0..n-1`` in order.
    An empty container is indexed; lists always are.
    """
    if isinstance(container, list):
        return True
    if not isinstance(container, dict):
        return False
    if not container:
        return True
    keys = list(container.keys())
    if not all(_is_int_key(k) for k in keys):
        return False
    return keys == list(range(len(keys))) if consecutive else True


def is_associative(container: Any, all_strings: bool = True) -> bool:
    """Whether *container* is keyed by strings.

    An empty container is never associative. With *all_strings* false a
    single string key is enough.
    """
    if not isinstance(container, (dict, list)) or not container:
        return False
    if isinstance(container, list):
        return False
    if all_strings:
        return all(isinstance(k, str) for k in container)
    return any(isinstance(k, str) for k in container)


def is_traversable(value: Any) -> bool:
    """Containers and iterable objects; strings and bytes are scalars here."""
    if isinstance(value, Mapping):
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Iterable)


def is_in(needle: Any, haystack: Any, strict: bool = False) -> bool:
    if not is_traversable(haystack):
        raise InvalidInputError(
            'Argument haystack must be a container or an iterable object, '
            f'got {type(haystack).__name__}',
            {'haystack_type': type(haystack).__name__},
        )
    values = haystack.values() if isinstance(haystack, Mapping) else haystack
    equals = strict_equals if strict else loose_equals
    for value in values:
        if equals(needle, value):
            return True
    return False
