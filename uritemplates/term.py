"""Term class for URITemplate."""

from __future__ import annotations

from .charset import Charset, VALID_NAME


class URITemplateError(Exception):
    """Base class of all URI template errors."""


class TermInvalidError(URITemplateError):
    """Exception thrown for invalid terms."""

    term: str

    def __init__(self, term: str) -> None:
        self.term = term

    def __str__(self) -> str:
        """Convert to string."""
        return 'Bad term: ' + self.term


class InvalidTermNameError(TermInvalidError):
    """The term name is not a valid varname."""

    def __str__(self) -> str:
        """Convert to string."""
        return 'Not a valid name: ' + self.term


class MultipleColonsInTermError(TermInvalidError):
    """More than one prefix modifier on the same term."""

    def __str__(self) -> str:
        """Convert to string."""
        return 'Multiple colons in same term: ' + self.term


class InvalidPrefixLengthError(TermInvalidError):
    """The prefix modifier is not a length from 1 to 9999."""

    def __str__(self) -> str:
        """Convert to string."""
        return 'Bad prefix length: ' + self.term


class InvalidModifierCombinationError(TermInvalidError):
    """Both explode and prefix modifiers on the same term."""

    def __str__(self) -> str:
        """Convert to string."""
        return 'Both explode and prefix modifiers on same term: ' + self.term


class Term:
    """
    A variable reference inside an expression.

    https://tools.ietf.org/html/rfc6570#section-2.3
    """

    __slots__ = ('name', 'explode', 'prefix_length')

    name: str
    explode: bool
    prefix_length: int

    def __init__(self, name: str, explode: bool = False, prefix_length: int = 0) -> None:
        self.name = name
        """Variable name."""
        self.explode = explode
        """Explode values."""
        self.prefix_length = prefix_length
        """Max length in bytes, 0 for unlimited."""

    @classmethod
    def parse(cls, var_spec: str) -> Term:
        """Parse a varspec into a term."""
        explode = False
        prefix_length = 0
        name = var_spec

        if ('*' == name[-1:]):
            name = name[:-1]
            explode = True

        if (1 < name.count(':')):
            raise MultipleColonsInTermError(var_spec)

        if (':' in name):
            name, max_length = name.split(':', 1)
            if (not ((0 < len(max_length)) and (len(max_length) < 5))):
                raise InvalidPrefixLengthError(var_spec)
            for digit in max_length:
                if (digit not in Charset.DIGIT):
                    raise InvalidPrefixLengthError(var_spec)
            prefix_length = int(max_length)
            if (not prefix_length):
                raise InvalidPrefixLengthError(var_spec)

        if (not VALID_NAME.fullmatch(name)):
            raise InvalidTermNameError(name)

        if (explode and prefix_length):
            raise InvalidModifierCombinationError(var_spec)

        return cls(name, explode, prefix_length)

    def __eq__(self, other: object) -> bool:
        """Compare terms."""
        if (not isinstance(other, Term)):
            return NotImplemented
        return ((self.name, self.explode, self.prefix_length)
                == (other.name, other.explode, other.prefix_length))

    def __hash__(self) -> int:
        """Hash term."""
        return hash((self.name, self.explode, self.prefix_length))

    def __repr__(self) -> str:
        """Convert to representation."""
        return f'Term({str(self)!r})'

    def __str__(self) -> str:
        """Convert to string."""
        return (self.name + (f':{self.prefix_length}' if (self.prefix_length) else '')
                + ('*' if (self.explode) else ''))
