"""Process URI templates per http://tools.ietf.org/html/rfc6570."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .charset import escape
from .operators import Operator
from .term import Term, URITemplateError
from .values import AssocValue, ListValue, StringValue, stringify, to_value


class ExpansionFailedError(URITemplateError):
    """Exception thrown when expansions fail."""

    term: str

    def __init__(self, term: str) -> None:
        self.term = term

    def __str__(self) -> str:
        """Convert to string."""
        return 'Bad expansion: ' + self.term


class UnsupportedMapTruncationError(ExpansionFailedError):
    """A prefix modifier was applied to an associative array."""

    def __str__(self) -> str:
        """Convert to string."""
        return 'Cannot truncate a map expansion: ' + self.term


class Expansion:
    """
    Base class for template parts.

    https://tools.ietf.org/html/rfc6570#section-3
    """

    __slots__ = ()

    @property
    def terms(self) -> Iterable[Term]:
        """Get all terms in this part."""
        return []

    def expand(self, values: Mapping[str, Any]) -> str:
        """Expand values."""
        return ''

    def partial(self, values: Mapping[str, Any]) -> str:
        """Perform partial expansion."""
        return self.expand(values)


class Literal(Expansion):
    """
    A literal, copied to the output unchanged.

    https://tools.ietf.org/html/rfc6570#section-3.1
    """

    __slots__ = ('value', )

    value: str

    def __init__(self, value: str) -> None:
        self.value = value

    def expand(self, values: Mapping[str, Any]) -> str:
        """Perform exansion."""
        return self.value

    def __repr__(self) -> str:
        """Convert to representation."""
        return f'Literal({self.value!r})'

    def __str__(self) -> str:
        """Convert to string."""
        return self.value


class Expression(Expansion):
    """
    An expression: an operator applied to a list of terms.

    https://tools.ietf.org/html/rfc6570#section-3.2
    """

    __slots__ = ('operator', 'vars')

    operator: Operator
    vars: list[Term]

    def __init__(self, operator: Operator, terms: Iterable[Term]) -> None:
        self.operator = operator
        self.vars = list(terms)

    @property
    def terms(self) -> Iterable[Term]:
        """Get all terms."""
        return list(self.vars)

    def _encode(self, value: (str | bytes)) -> str:
        """Encode a value for this operator."""
        return escape(value, self.operator.allow_reserved)

    def _truncate(self, term: Term, value: str) -> bytes:
        """Apply the prefix modifier, counting bytes of UTF-8."""
        data = value.encode('utf8')
        if (term.prefix_length and (term.prefix_length < len(data))):
            return data[:term.prefix_length]
        return data

    def _expand_name(self, term: Term, empty: bool) -> str:
        """Write the name of a term for named operators."""
        if (self.operator.named):
            return term.name + (self.operator.if_empty if (empty) else '=')
        return ''

    def _expand_str(self, term: Term, value: str) -> str:
        """Expand a string value."""
        data = self._truncate(term, value)
        return self._expand_name(term, not data) + self._encode(data)

    def _expand_list(self, term: Term, items: list[Any]) -> str:
        """Expand a list value."""
        if (not items):
            return ''
        output = '' if (term.explode) else self._expand_name(term, False)
        for index, item in enumerate(items):
            if (index):
                output += self.operator.separator if (term.explode) else ','
            data = self._truncate(term, stringify(item))
            if (self.operator.named and term.explode):
                output += self._expand_name(term, not data)
            output += self._encode(data)
        return output

    def _expand_assoc(self, term: Term, items: dict[str, Any]) -> str:
        """Expand an associative array value."""
        if (term.prefix_length):
            raise UnsupportedMapTruncationError(str(term))
        if (not items):
            return ''
        if (term.explode):
            return self.operator.separator.join([self._encode(key) + '=' + self._encode(stringify(item))
                                                 for key, item in items.items()])
        return self._expand_name(term, False) + ','.join([self._encode(key) + ',' + self._encode(stringify(item))
                                                          for key, item in items.items()])

    def _expand_var(self, term: Term, value: Any) -> str:
        """Expand a single term."""
        value = to_value(value)
        if (isinstance(value, ListValue)):
            return self._expand_list(term, value.items)
        if (isinstance(value, AssocValue)):
            return self._expand_assoc(term, value.items)
        if (isinstance(value, StringValue)):
            return self._expand_str(term, value.value)
        return self._expand_str(term, stringify(value.raw))

    def _expand_present(self, values: Mapping[str, Any]) -> tuple[str, list[Term]]:
        """Expand the terms with values, return the output and the missing terms."""
        output = ''
        missing: list[Term] = []
        for term in self.vars:
            value = values.get(term.name)
            if (value is None):
                missing.append(term)
                continue
            if (output):
                output += self.operator.separator
            output += self._expand_var(term, value)
        if (output):
            return self.operator.first + output, missing
        return '', missing

    def expand(self, values: Mapping[str, Any]) -> str:
        """Expand all terms, skip missing values."""
        output, _ = self._expand_present(values)
        return output

    def partial(self, values: Mapping[str, Any]) -> str:
        """Expand all terms, replace missing values with an expression."""
        output, missing = self._expand_present(values)
        if (not missing):
            return output
        # all missing: start with first, otherwise continue after the output
        prefix = self.operator.first if (len(missing) == len(self.vars)) else self.operator.separator
        return output + '{' + prefix + ','.join([term.name + ('*' if (term.explode) else '') for term in missing]) + '}'

    def __repr__(self) -> str:
        """Convert to representation."""
        return f'Expression({str(self)!r})'

    def __str__(self) -> str:
        """Convert to string."""
        return '{' + self.operator.key + ','.join([str(term) for term in self.vars]) + '}'
