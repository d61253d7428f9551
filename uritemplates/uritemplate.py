"""Parse and expand URI templates."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .expansions import Expansion, Expression, Literal
from .operators import Operator
from .term import Term, URITemplateError


class MalformedTemplateError(URITemplateError):
    """Exception thrown for unbalanced braces or empty expressions."""

    template: str
    reason: str

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason

    def __str__(self) -> str:
        """Convert to string."""
        return f'Malformed template ({self.reason}): {self.template}'


def _merge_values(values: (Mapping[str, Any] | None), kwargs: dict[str, Any]) -> Mapping[str, Any]:
    if (not kwargs):
        return values if (values is not None) else {}
    merged = dict(values) if (values is not None) else {}
    merged.update(kwargs)
    return merged


class URITemplate:
    """
    URI Template object.

    Constructor may raise MalformedTemplateError or a TermInvalidError subclass.
    A parsed template is never modified and may be expanded any number of times.
    """

    __slots__ = ('template', 'expansions')

    template: str
    expansions: list[Expansion]

    def __init__(self, template: str) -> None:
        self.template = template
        self.expansions = []

        segments = template.split('{')
        if ('}' in segments[0]):
            raise MalformedTemplateError(template, 'unexpected }')
        if (segments[0]):
            self.expansions.append(Literal(segments[0]))

        for segment in segments[1:]:
            pieces = segment.split('}')
            if (2 != len(pieces)):
                raise MalformedTemplateError(template, 'expected single } after {')
            body, text = pieces
            if (not body):
                raise MalformedTemplateError(template, 'unexpected }')
            operator, body = Operator.lookup(body)
            self.expansions.append(Expression(operator, [Term.parse(var_spec) for var_spec in body.split(',')]))
            if (text):
                self.expansions.append(Literal(text))

    @property
    def variables(self) -> Iterable[Term]:
        """Get all terms in template, in order."""
        return [term for expansion in self.expansions for term in expansion.terms]

    @property
    def names(self) -> list[str]:
        """Get names of all variables in template, duplicates included."""
        return [term.name for term in self.variables]

    def expand(self, values: (Mapping[str, Any] | None) = None, **kwargs: Any) -> str:
        """
        Expand the template.

        Variables missing from `values` (or set to None) are skipped.
        """
        values = _merge_values(values, kwargs)
        return ''.join([expansion.expand(values) for expansion in self.expansions])

    def partial_expand(self, values: (Mapping[str, Any] | None) = None, **kwargs: Any) -> str:
        """
        Expand the template, keeping expressions for missing variables.

        The output is itself a template that a later pass can finish expanding.
        """
        values = _merge_values(values, kwargs)
        return ''.join([expansion.partial(values) for expansion in self.expansions])

    def partial(self, values: (Mapping[str, Any] | None) = None, **kwargs: Any) -> URITemplate:
        """Perform partial expansion, return a new template."""
        return URITemplate(self.partial_expand(values, **kwargs))

    @property
    def expanded(self) -> bool:
        """Determine if template is fully expanded."""
        return all(isinstance(expansion, Literal) for expansion in self.expansions)

    def __str__(self) -> str:
        """Convert to string, returns original template."""
        return self.template

    def __repr__(self) -> str:
        """Convert to string, returns original template."""
        return f'URITemplate({self.template!r})'

    def __eq__(self, other: object) -> bool:
        """Compare templates."""
        if (not isinstance(other, URITemplate)):
            return NotImplemented
        return (self.template == other.template)

    def __hash__(self) -> int:
        """Hash the template."""
        return hash(self.template)
