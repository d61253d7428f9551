"""
Tests for the toupee command line tool.
"""

import json

import pytest

from uritemplates.cli import main


@pytest.mark.parametrize('argv, expected', [
    (['https://example.com'], 'https://example.com'),
    (['{+baseURL}/{var}', '-TbaseURL=https://example.com', '-Tvar=f'], 'https://example.com/f'),
    (['https://example.com{/path*}{?query}', '-Tarray,path=a', '-Tarray,path=b'], 'https://example.com/a/b'),
    (['{?opts*}', '-T', 'map,opts=fmt=pdf'], '?fmt=pdf'),
    (['{?terms*}', '-t', 'terms=[a,b]'], '?terms=a&terms=b'),
    (['https://example.com', '{?q}', '-T', 'q=x'], 'https://example.com?q=x'),
    (['{scheme}://{.domain}', '-T', 'scheme=https', '-P'], 'https://{.domain}'),
    (['https://example.com{?a,b}', '--param', 'a=a', '--partial'], 'https://example.com?a=a{&b}'),
])
def test_main_when_template_then_prints_expansion(capsys, argv, expected):
    assert main(argv) == 0

    assert capsys.readouterr().out == expected + '\n'


def test_main_when_vars_file_then_loads_json(capsys, tmp_path):
    path = tmp_path / 'vars.json'
    path.write_text(json.dumps({'id': 420, 'terms': ['asdf', 'jkl;']}))

    assert main(['{/id}{?terms}', '-t', f'@{path}']) == 0

    assert capsys.readouterr().out == '/420?terms=asdf,jkl%3B\n'


def test_main_when_no_template_then_prints_help(capsys):
    assert main([]) == 0

    assert 'usage: toupee' in capsys.readouterr().out


@pytest.mark.parametrize('argv, message', [
    (['{a'], 'Malformed template'),
    (['{opts:1:2}'], 'Multiple colons'),
    (['{a}', '-T', 'a=1', '-T', 'a=2'], 'cannot apply string'),
    (['{a}', '-T', 'bogus'], 'Invalid template var'),
    (['{?opts:3}', '-t', 'opts={fmt:pdf}'], 'Cannot truncate a map expansion'),
])
def test_main_when_error_then_logs_and_fails(capsys, argv, message):
    assert main(argv) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert message in captured.err


def test_main_when_vars_file_missing_then_fails(capsys, tmp_path):
    assert main(['{a}', '-t', f'@{tmp_path / "missing.json"}']) == 1

    assert 'missing.json' in capsys.readouterr().err
