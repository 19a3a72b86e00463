"""Tests for record_toolkit.sorting."""

import pytest

from record_toolkit.errors import ConfigurationError
from record_toolkit.sorting import SortDirection, SortFlag, compare_regular, multisort, sorted_records


def test_single_key_stable():
    records = [{'k': 2, 'n': 'first'}, {'k': 1, 'n': 'only'}, {'k': 2, 'n': 'second'}]
    multisort(records, 'k')
    assert [r['n'] for r in records] == ['only', 'first', 'second']


def test_ties_keep_identity_and_order():
    records = [{'k': 2}, {'k': 1}, {'k': 2}]
    first_two = records[0]
    multisort(records, 'k')
    assert records == [{'k': 1}, {'k': 2}, {'k': 2}]
    assert records[1] is first_two


def test_descending():
    records = [{'k': 1}, {'k': 3}, {'k': 2}]
    multisort(records, 'k', SortDirection.DESC)
    assert [r['k'] for r in records] == [3, 2, 1]


def test_descending_ties_keep_input_order():
    records = [{'k': 1, 'n': 'a'}, {'k': 1, 'n': 'b'}]
    multisort(records, 'k', 'desc')
    assert [r['n'] for r in records] == ['a', 'b']


def test_multiple_keys():
    records = [
        {'age': 30, 'name': 'bob'},
        {'age': 25, 'name': 'zed'},
        {'age': 30, 'name': 'amy'},
    ]
    multisort(records, ['age', 'name'], [SortDirection.DESC, SortDirection.ASC])
    assert [r['name'] for r in records] == ['amy', 'bob', 'zed']


def test_function_key():
    records = ['ccc', 'a', 'bb']
    multisort(records, len)
    assert records == ['a', 'bb', 'ccc']


def test_idempotent():
    records = [{'k': 2, 'i': 0}, {'k': 1, 'i': 1}, {'k': 2, 'i': 2}, {'k': 1, 'i': 3}]
    multisort(records, 'k')
    once = list(records)
    multisort(records, 'k')
    assert records == once


def test_dict_keeps_keys():
    records = {'x': {'k': 2}, 'y': {'k': 1}}
    multisort(records, 'k')
    assert list(records) == ['y', 'x']


def test_empty_is_noop():
    records = []
    multisort(records, 'k')
    assert records == []
    records = [{'k': 2}, {'k': 1}]
    multisort(records, [])
    assert records == [{'k': 2}, {'k': 1}]


def test_direction_length_mismatch():
    with pytest.raises(ConfigurationError):
        multisort([{'a': 1}], ['a', 'b'], [SortDirection.ASC])


def test_flag_length_mismatch():
    with pytest.raises(ConfigurationError):
        multisort([{'a': 1}], ['a'], SortDirection.ASC, [SortFlag.STRING, SortFlag.NUMERIC])


class TestFlags:
    def test_regular_numeric_strings(self):
        records = [{'v': '10'}, {'v': '9'}, {'v': '100'}]
        multisort(records, 'v')
        assert [r['v'] for r in records] == ['9', '10', '100']

    def test_string(self):
        records = [{'v': 10}, {'v': 9}, {'v': 100}]
        multisort(records, 'v', sort_flags=SortFlag.STRING)
        assert [r['v'] for r in records] == [10, 100, 9]

    def test_numeric(self):
        records = [{'v': '10px'}, {'v': '9px'}, {'v': 'abc'}]
        multisort(records, 'v', sort_flags=SortFlag.NUMERIC)
        assert [r['v'] for r in records] == ['abc', '9px', '10px']

    def test_natural(self):
        records = [{'v': 'img12'}, {'v': 'img10'}, {'v': 'img2'}]
        multisort(records, 'v', sort_flags=SortFlag.NATURAL)
        assert [r['v'] for r in records] == ['img2', 'img10', 'img12']

    def test_case_insensitive(self):
        records = [{'v': 'b'}, {'v': 'A'}, {'v': 'a'}]
        multisort(records, 'v', sort_flags=SortFlag.STRING | SortFlag.FLAG_CASE)
        assert [r['v'] for r in records] == ['A', 'a', 'b']

    def test_none_sorts_first(self):
        records = [{'v': 1}, {}, {'v': 0}]
        multisort(records, 'v')
        assert records == [{}, {'v': 0}, {'v': 1}]


def test_compare_regular_mixed_types():
    assert compare_regular(1, '2') < 0
    assert compare_regular('b', 'a') > 0
    assert compare_regular(None, None) == 0
    assert compare_regular([1], {'a': 1}) != 0


def test_sorted_records_leaves_input():
    records = [{'k': 2}, {'k': 1}]
    result = sorted_records(records, 'k')
    assert result == [{'k': 1}, {'k': 2}]
    assert records == [{'k': 2}, {'k': 1}]


def test_regular_false_ties_with_zero_string():
    assert compare_regular(False, '0') == 0
    assert compare_regular(True, '0') > 0
    records = [{'v': '0', 'n': 'a'}, {'v': False, 'n': 'b'}]
    multisort(records, 'v')
    assert [r['n'] for r in records] == ['a', 'b']


def test_dict_int_keys_renumbered():
    records = {5: {'k': 3}, 'x': {'k': 1}, 9: {'k': 2}}
    multisort(records, 'k')
    assert list(records.items()) == [('x', {'k': 1}), (0, {'k': 2}), (1, {'k': 3})]
