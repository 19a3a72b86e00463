"""In-memory helpers for reshaping collections of records.

This package contains pure functions that:
- extract values from mappings, sequences and plain objects
- convert objects into plain dicts and lists
- index, group, map and project record collections
- sort records by several keys at once
- deep-merge containers
"""
from __future__ import annotations

import logging

from .conversion import remove_value, to_array
from .equality import EqualityMode, loose_equals, strict_equals
from .errors import ConfigurationError, ConversionError, InvalidInputError, RecordToolkitError
from .merging import merge
from .predicates import is_associative, is_container, is_in, is_indexed, is_traversable
from .records import MappingRecord, ObjectRecord, SequenceRecord, as_record
from .selectors import Derive, Field, as_selector, extract
from .sorting import SortDirection, SortFlag, multisort, sorted_records
from .transforms import column, index, map_records

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'ConfigurationError',
    'ConversionError',
    'Derive',
    'EqualityMode',
    'Field',
    'InvalidInputError',
    'MappingRecord',
    'ObjectRecord',
    'RecordToolkitError',
    'SequenceRecord',
    'SortDirection',
    'SortFlag',
    'as_record',
    'as_selector',
    'column',
    'extract',
    'index',
    'is_associative',
    'is_container',
    'is_in',
    'is_indexed',
    'is_traversable',
    'loose_equals',
    'map_records',
    'merge',
    'multisort',
    'remove_value',
    'sorted_records',
    'strict_equals',
    'to_array',
]
