"""
Unit tests for value coercion.
"""

import pytest

from uritemplates.values import AssocValue, ListValue, StringValue, stringify, to_value


class Options:
    """Supplies its own conversion to an associative array."""

    def __init__(self, fmt):
        self.fmt = fmt

    def __uritemplate_value__(self):
        return {'fmt': self.fmt}


class TestToValue:
    """Tests for to_value()."""

    @pytest.mark.parametrize('value, expected', [
        ('text', StringValue('text')),
        (['a', 'b'], ListValue(['a', 'b'])),
        (('a', 'b'), ListValue(['a', 'b'])),
        ({'k': 'v'}, AssocValue({'k': 'v'})),
        (2, StringValue('2')),
        (True, StringValue('true')),
        (420.0, StringValue('420')),
        (2.5, StringValue('2.5')),
    ])
    def test_to_value_when_plain_python_then_coerces(self, value, expected):
        assert to_value(value) == expected

    def test_to_value_when_value_then_returns_it(self):
        value = ListValue(['a'])

        assert to_value(value) is value

    def test_to_value_when_hook_then_uses_it(self):
        assert to_value(Options('pdf')) == AssocValue({'fmt': 'pdf'})

    def test_assoc_when_non_string_keys_then_stringifies_keys(self):
        assert AssocValue({1: 'a'}).items == {'1': 'a'}


class TestValue:
    """Tests for the value classes."""

    @pytest.mark.parametrize('value, kind', [
        (StringValue('a'), 'string'),
        (ListValue(['a']), 'array'),
        (AssocValue({'a': 'b'}), 'map'),
    ])
    def test_kind_when_checked_then_names_type(self, value, kind):
        assert value.kind == kind

    def test_len_when_empty_then_zero(self):
        assert len(StringValue('')) == 0
        assert len(ListValue()) == 0
        assert len(AssocValue()) == 0

    def test_list_when_created_then_copies_items(self):
        items = ['a']
        value = ListValue(items)
        items.append('b')

        assert value.items == ['a']

    def test_eq_when_different_kinds_then_not_equal(self):
        assert StringValue('a') != ListValue(['a'])


class TestStringify:
    """Tests for stringify()."""

    @pytest.mark.parametrize('value, expected', [
        ('a', 'a'),
        (False, 'false'),
        (1234, '1234'),
        (3.0, '3'),
        (None, 'None'),
    ])
    def test_stringify_when_scalar_then_default_format(self, value, expected):
        assert stringify(value) == expected
