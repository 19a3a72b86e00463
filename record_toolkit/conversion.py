from __future__ import annotations

import dataclasses
import datetime
import enum
import logging
import numbers
import uuid
from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional, Tuple

from .equality import EqualityMode, comparator
from .errors import ConversionError
from .records import ObjectRecord
from .selectors import Derive, as_selector

logger = logging.getLogger(__name__)

# values kept as they are; enum members, decimals and fractions included
_LEAF_TYPES = (str, bytes, bytearray, numbers.Number, enum.Enum, uuid.UUID)


def _date_fields(value: Any) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    if isinstance(value, datetime.date):
        fields.update(year=value.year, month=value.month, day=value.day)
    if isinstance(value, (datetime.datetime, datetime.time)):
        fields.update(
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            microsecond=value.microsecond,
            timezone=str(value.tzinfo) if value.tzinfo is not None else None,
        )
    return fields


def _public_attributes(obj: Any) -> Dict[str, Any]:
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}

    result: Dict[str, Any] = {}
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if not name.startswith('_') and hasattr(obj, name):
                result[name] = getattr(obj, name)
    for name, value in getattr(obj, '__dict__', {}).items():
        if not name.startswith('_'):
            result[name] = value
    return result


def _lookup_properties(obj: Any, properties: Optional[Mapping]) -> Any:
    if not properties:
        return None
    cls = type(obj)
    for key in (cls, f'{cls.__module__}.{cls.__qualname__}', cls.__qualname__, cls.__name__):
        entries = properties.get(key)
        if entries:
            return entries
    return None


def _property_items(entries: Any) -> List[Tuple[Any, Any]]:
    if isinstance(entries, Mapping):
        return list(entries.items())
    items: List[Tuple[Any, Any]] = []
    for entry in entries:
        if isinstance(entry, tuple):
            result_key, source = entry
            items.append((result_key, source))
        else:
            items.append((entry, entry))
    return items


def _resolve_property(obj: Any, result_key: Any, source: Any) -> Any:
    selector = as_selector(source)
    if isinstance(selector, Derive):
        return selector.func(obj)
    record = ObjectRecord(obj)
    if not record.has(selector.name):
        raise ConversionError(
            f'Property {selector.name!r} (for key {result_key!r}) is not defined '
            f'on {type(obj).__name__}',
            {'property': selector.name, 'class': type(obj).__name__},
        )
    return record.get(selector.name)


def _convert_value(value: Any, properties: Optional[Mapping]) -> Any:
    if value is None or isinstance(value, _LEAF_TYPES):
        return value
    return to_array(value, properties, True)


def to_array(obj: Any, properties: Optional[Mapping] = None, recursive: bool = True):
    """Convert a record, a collection of records or a date into plain containers.

    *properties* maps a class (or its qualified or bare name) to the entries
    that make up its converted form::

        {
            Post: [
                'id',
                'title',
                ('createTime', 'created_at'),
                ('length', lambda post: len(post.content)),
            ],
        }

    Entries are property names, ``(result_key, source)`` pairs, or a mapping
    ``{result_key: source}``; a source is a property name or a function of the
    object. Objects without an entry contribute every public attribute.

    Values that are neither containers, dates nor objects come back wrapped
    in a one-element list.
    """
    if isinstance(obj, dict):
        if not recursive:
            return dict(obj)
        return {k: _convert_value(v, properties) for k, v in obj.items()}

    if isinstance(obj, list):
        if not recursive:
            return list(obj)
        return [_convert_value(v, properties) for v in obj]

    if isinstance(obj, (datetime.date, datetime.time)):
        return _date_fields(obj)

    if obj is None or isinstance(obj, _LEAF_TYPES):
        return [obj]

    if isinstance(obj, Mapping):
        return to_array(dict(obj), properties, recursive)

    if isinstance(obj, (tuple, set, frozenset)):
        return to_array(list(obj), properties, recursive)

    entries = _lookup_properties(obj, properties)
    if entries is not None:
        result = {
            result_key: _resolve_property(obj, result_key, source)
            for result_key, source in _property_items(entries)
        }
    elif dataclasses.is_dataclass(obj) or hasattr(obj, '__dict__') or hasattr(type(obj), '__slots__'):
        result = _public_attributes(obj)
    elif isinstance(obj, Iterable):
        logger.debug('Converting iterable %s to a list', type(obj).__name__)
        return to_array(list(obj), properties, recursive)
    else:
        result = {}

    return to_array(result, properties) if recursive else result


def remove_value(container: Any, value: Any, mode: EqualityMode = EqualityMode.STRICT) -> Dict[Any, Any]:
    """Remove every entry equal to *value* from *container* in place.

    Returns the removed entries under their original keys (list positions for
    lists). Anything that is not a dict or a list is left alone.
    """
    equals = comparator(mode)
    removed: Dict[Any, Any] = {}
    if isinstance(container, dict):
        for key, item in list(container.items()):
            if equals(item, value):
                removed[key] = item
                del container[key]
    elif isinstance(container, list):
        kept = []
        for pos, item in enumerate(container):
            if equals(item, value):
                removed[pos] = item
            else:
                kept.append(item)
        container[:] = kept
    return removed
