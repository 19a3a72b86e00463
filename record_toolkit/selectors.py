from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List

from .records import as_record


@dataclass(frozen=True)
class Field:
    """Selects a mapping key, a sequence position or an object property."""

    name: Any


@dataclass(frozen=True)
class Derive:
    """Selects whatever *func* returns for the record."""

    func: Callable[[Any], Any]


Selector = Any  # Field | Derive | key name | callable


def as_selector(selector: Selector):
    if isinstance(selector, (Field, Derive)):
        return selector
    if callable(selector):
        return Derive(selector)
    return Field(selector)


def as_selector_list(selectors: Any) -> List[Any]:
    """Normalize ``None``, a single selector or a sequence of them to a list."""
    if selectors is None:
        return []
    if isinstance(selectors, (list, tuple)):
        return [as_selector(s) for s in selectors]
    return [as_selector(selectors)]


def extract(record: Any, selector: Selector) -> Any:
    """Resolve *selector* against *record*.

    Derivation results are returned verbatim. Missing keys and properties
    resolve to ``None``; nothing is raised for absent data.
    """
    selector = as_selector(selector)
    if isinstance(selector, Derive):
        return selector.func(record)
    return as_record(record).get(selector.name)
