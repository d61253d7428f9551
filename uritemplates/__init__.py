"""RFC 6570 URI Template parsing, expansion and partial expansion."""

from __future__ import annotations

from typing import Any

from .expansions import ExpansionFailedError, UnsupportedMapTruncationError
from .operators import Operator
from .resolver import LocationResolver
from .term import (InvalidModifierCombinationError, InvalidPrefixLengthError, InvalidTermNameError,
                   MultipleColonsInTermError, Term, TermInvalidError, URITemplateError)
from .uritemplate import MalformedTemplateError, URITemplate
from .values import AssocValue, ListValue, StringValue, Value, to_value
from .vars import TypeConflictError, Var, VarSyntaxError, Vars


__all__ = (
    'URITemplate',
    'Term',
    'Operator',
    'Value',
    'StringValue',
    'ListValue',
    'AssocValue',
    'to_value',
    'Var',
    'Vars',
    'LocationResolver',
    'URITemplateError',
    'MalformedTemplateError',
    'TermInvalidError',
    'InvalidTermNameError',
    'InvalidModifierCombinationError',
    'InvalidPrefixLengthError',
    'MultipleColonsInTermError',
    'ExpansionFailedError',
    'UnsupportedMapTruncationError',
    'TypeConflictError',
    'VarSyntaxError',
)


def expand(template: str, **kwargs: Any) -> str:
    return URITemplate(template).expand(**kwargs)


def partial(template: str, **kwargs: Any) -> str:
    return URITemplate(template).partial_expand(**kwargs)


def validate(template: str) -> bool:
    try:
        URITemplate(template)
        return True
    except URITemplateError:
        return False
