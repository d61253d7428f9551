"""
Unit tests for term parsing.
"""

import pytest

from uritemplates.term import (InvalidModifierCombinationError, InvalidPrefixLengthError, InvalidTermNameError,
                               MultipleColonsInTermError, Term, TermInvalidError, URITemplateError)


class TestParse:
    """Tests for Term.parse()."""

    @pytest.mark.parametrize('text, expected', [
        ('var', Term('var')),
        ('var:3', Term('var', prefix_length=3)),
        ('var:9999', Term('var', prefix_length=9999)),
        ('list*', Term('list', explode=True)),
        ('a.b', Term('a.b')),
        ('%20x', Term('%20x')),
    ])
    def test_parse_when_valid_then_returns_term(self, text, expected):
        assert Term.parse(text) == expected

    def test_parse_when_two_colons_then_raises_multiple_colons(self):
        with pytest.raises(MultipleColonsInTermError):
            Term.parse('opts:1:2')

    @pytest.mark.parametrize('text', ['a:', 'a:0', 'a:x', 'a:-1', 'a:12345'])
    def test_parse_when_bad_prefix_then_raises_invalid_prefix(self, text):
        with pytest.raises(InvalidPrefixLengthError):
            Term.parse(text)

    @pytest.mark.parametrize('text', ['', 'a-b', 'a b', '%2', '*', 'a**'])
    def test_parse_when_bad_name_then_raises_invalid_name(self, text):
        with pytest.raises(InvalidTermNameError):
            Term.parse(text)

    def test_parse_when_explode_and_prefix_then_raises_invalid_combination(self):
        with pytest.raises(InvalidModifierCombinationError):
            Term.parse('a:3*')

    def test_errors_when_raised_then_share_base_classes(self):
        """All term errors can be caught as TermInvalidError or URITemplateError."""
        with pytest.raises(TermInvalidError) as info:
            Term.parse('a-b')

        assert isinstance(info.value, URITemplateError)
        assert 'a-b' in str(info.value)


class TestStr:
    """Tests for Term.__str__()."""

    @pytest.mark.parametrize('text', ['var', 'var:3', 'list*'])
    def test_str_when_parsed_then_restates_varspec(self, text):
        assert str(Term.parse(text)) == text
