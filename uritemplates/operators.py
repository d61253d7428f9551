"""Expression operators for URI templates."""

from __future__ import annotations


class Operator:
    """
    Expansion behaviour selected by the leading character of an expression.

    https://tools.ietf.org/html/rfc6570#appendix-A
    """

    __slots__ = ('key', 'first', 'separator', 'named', 'if_empty', 'allow_reserved')

    key: str
    first: str
    separator: str
    named: bool
    if_empty: str
    allow_reserved: bool

    def __init__(self, key: str, first: str, separator: str,
                 named: bool = False, if_empty: str = '', allow_reserved: bool = False) -> None:
        self.key = key
        """Operator character as written in the template, empty for simple expansion."""
        self.first = first
        """Written before the first expanded term."""
        self.separator = separator
        """Written between expanded terms."""
        self.named = named
        """Terms expand as name=value pairs."""
        self.if_empty = if_empty
        """Written after the name when a named value is empty."""
        self.allow_reserved = allow_reserved
        """Reserved characters pass through unencoded."""

    @classmethod
    def lookup(cls, body: str) -> tuple[Operator, str]:
        """Find the operator of an expression body, return it and the remaining body."""
        operator = OPERATORS.get(body[0:1])
        if (operator is None):
            return SIMPLE, body
        return operator, body[1:]

    def __repr__(self) -> str:
        """Convert to representation."""
        return f'Operator({self.key!r})'


SIMPLE = Operator('', '', ',')

OPERATORS: dict[str, Operator] = {
    '+': Operator('+', '', ',', allow_reserved=True),
    '.': Operator('.', '.', '.'),
    '/': Operator('/', '/', '/'),
    ';': Operator(';', ';', ';', named=True),
    '?': Operator('?', '?', '&', named=True, if_empty='='),
    '&': Operator('&', '&', '&', named=True, if_empty='='),
    '#': Operator('#', '#', ',', allow_reserved=True),
}
