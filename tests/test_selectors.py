"""Tests for record_toolkit.selectors and record_toolkit.records."""

from dataclasses import dataclass

from record_toolkit.records import MappingRecord, ObjectRecord, SequenceRecord, as_record
from record_toolkit.selectors import Derive, Field, as_selector, as_selector_list, extract


@dataclass
class Post:
    id: int
    title: str


class Account:
    def __init__(self, balance):
        self._balance = balance
        self.owner = 'joe'

    def get_balance(self):
        return self._balance * 100


class TestAsSelector:
    def test_name_becomes_field(self):
        assert as_selector('id') == Field('id')

    def test_callable_becomes_derive(self):
        fn = len
        assert as_selector(fn) == Derive(fn)

    def test_selector_passthrough(self):
        sel = Field(0)
        assert as_selector(sel) is sel

    def test_list_normalization(self):
        assert as_selector_list(None) == []
        assert as_selector_list('a') == [Field('a')]
        assert as_selector_list(['a', 'b']) == [Field('a'), Field('b')]


class TestAsRecord:
    def test_variants(self):
        assert isinstance(as_record({'a': 1}), MappingRecord)
        assert isinstance(as_record([1, 2]), SequenceRecord)
        assert isinstance(as_record(Post(1, 'x')), ObjectRecord)

    def test_sequence_bounds(self):
        record = as_record(['a', 'b'])
        assert record.get(1) == 'b'
        assert record.get(2) is None
        assert record.get(True) is None
        assert not record.has('0')


def test_extract_mapping_key():
    assert extract({'id': 5}, 'id') == 5


def test_extract_missing_key_is_none():
    assert extract({'id': 5}, 'name') is None


def test_extract_present_none_is_none():
    assert extract({'id': None}, 'id') is None


def test_extract_object_property():
    assert extract(Post(3, 'hello'), 'title') == 'hello'


def test_extract_prefers_getter():
    account = Account(2)
    assert extract(account, 'balance') == 200
    assert extract(account, 'owner') == 'joe'


def test_extract_missing_property_is_none():
    assert extract(Post(3, 'hello'), 'body') is None


def test_extract_derive_result_is_verbatim():
    assert extract({'a': 2}, lambda r: r['a'] * 10) == 20
    assert extract({'a': 2}, Derive(lambda r: 'a')) == 'a'


def test_extract_unhashable_key_on_mapping():
    assert extract({'a': 1}, Field(['a'])) is None


class Settings:
    def __init__(self):
        self.theme = 'dark'
        self.size = 3

    def get_theme(self, default):
        return default

    def get_size(self, scale=2):
        return self.size * scale


def test_extract_skips_getter_with_required_arguments():
    assert extract(Settings(), 'theme') == 'dark'


def test_extract_uses_getter_with_optional_arguments():
    assert extract(Settings(), 'size') == 6
