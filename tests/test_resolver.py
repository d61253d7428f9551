"""
Unit tests for LocationResolver.
"""

import pytest

from uritemplates import MalformedTemplateError, Var
from uritemplates.resolver import LocationResolver, fixup_address


class TestFixupAddress:
    """Tests for fixup_address()."""

    @pytest.mark.parametrize('address, expected', [
        ('example.com', 'http://example.com'),
        (':8080/status', 'http://localhost:8080/status'),
        ('https://example.com', 'https://example.com'),
        ('http://example.com', 'http://example.com'),
        ('/relative', '/relative'),
        ('', ''),
    ])
    def test_fixup_when_shorthand_then_completes(self, address, expected):
        assert fixup_address(address) == expected


class TestResolve:
    """Tests for LocationResolver.resolve()."""

    @pytest.mark.parametrize('locations, expected', [
        (['example.com'], ['http://example.com']),
        (['https://example.com', 'hello'], ['https://example.com', 'https://example.com/hello']),
        (['https://example.com/a/', 'b', '../c'], ['https://example.com/a/', 'https://example.com/a/b',
                                                     'https://example.com/c']),
    ])
    def test_resolve_when_locations_then_relative_to_previous(self, locations, expected):
        resolver = LocationResolver()
        for location in locations:
            resolver.add(location)

        assert resolver.resolve() == expected

    def test_resolve_when_vars_then_expands_templates(self):
        resolver = LocationResolver()
        resolver.add('https://example.com{/path*}{?q}')
        resolver.add_var(Var.parse('array,path=a'), Var.parse('array,path=b'))

        assert resolver.resolve() == ['https://example.com/a/b']

    def test_resolve_when_no_vars_then_templates_untouched(self):
        resolver = LocationResolver()
        resolver.add('https://example.com/{x}')

        assert resolver.resolve() == ['https://example.com/{x}']

    def test_resolve_when_vars_and_bad_template_then_raises(self):
        resolver = LocationResolver()
        resolver.add('https://example.com/{x')
        resolver.add_var(Var.string('x', '1'))

        with pytest.raises(MalformedTemplateError):
            resolver.resolve()

    def test_resolve_when_base_then_first_location_relative_to_base(self):
        resolver = LocationResolver()
        resolver.set_base('https://example.com/api/')
        resolver.add('/users')

        assert resolver.resolve() == ['https://example.com/users']

    def test_set_base_when_twice_then_resolves_against_previous(self):
        resolver = LocationResolver()
        resolver.set_base('https://example.com/api/')
        resolver.set_base('v2/')

        assert resolver.base == 'https://example.com/api/v2/'
