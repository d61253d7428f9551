"""Template variables supplied by callers."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, IO

from .term import URITemplateError
from .values import AssocValue, ListValue, StringValue, Value, stringify, to_value


logger = logging.getLogger(__name__)

_INLINE_FORMAT = re.compile(r'^(array|string|map|a|s|m),(.+)=(.+)$')

_VAR_TYPES = {
    'a': 'array',
    'array': 'array',
    's': 'string',
    'string': 'string',
    'm': 'map',
    'map': 'map',
}

_QUOTED_CHARS = frozenset(' \t\n,"[]{}')


class TypeConflictError(URITemplateError):
    """Exception thrown when a value cannot be merged into an existing variable."""

    name: str
    existing: str
    added: str

    def __init__(self, name: str, existing: str, added: str) -> None:
        self.name = name
        self.existing = existing
        self.added = added

    def __str__(self) -> str:
        """Convert to string."""
        return f'Existing value of {self.name} is {self.existing}, cannot apply {self.added}'


class VarSyntaxError(URITemplateError):
    """Exception thrown for unparseable variable arguments."""

    text: str
    reason: str

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason

    def __str__(self) -> str:
        """Convert to string."""
        return f'Invalid template var {self.text!r}: {self.reason}'


def _quote(text: str) -> str:
    if ((not text) or any((char in _QUOTED_CHARS) for char in text)):
        return json.dumps(text)
    return text


def _copy(value: Value) -> Value:
    """Copy composite values so later merges do not modify the caller's object."""
    if (isinstance(value, ListValue)):
        return ListValue(value.items)
    if (isinstance(value, AssocValue)):
        return AssocValue(value.items)
    return value


def _typed_value(var_type: str, text: str) -> Value:
    if ('map' == var_type):
        key, _, item = text.partition('=')
        return AssocValue({key: item})
    if ('array' == var_type):
        return ListValue([text])
    return StringValue(text)


class Var:
    """
    A named variable value, as supplied by one command line argument.

    Syntax is `[type,]name=value` where type is one of `string`, `array` or
    `map` (or `s`, `a`, `m`). The type, name and value may also be supplied as
    separate arguments. Map values are written `key=value`.
    """

    __slots__ = ('name', 'value')

    name: str
    value: Value

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = to_value(value)

    @classmethod
    def string(cls, name: str, value: str) -> Var:
        """Create a string variable."""
        return cls(name, StringValue(value))

    @classmethod
    def array(cls, name: str, *items: Any) -> Var:
        """Create a list variable."""
        return cls(name, ListValue(items))

    @classmethod
    def map(cls, name: str, items: Mapping[str, Any]) -> Var:
        """Create an associative array variable."""
        return cls(name, AssocValue(items))

    @classmethod
    def parse(cls, *args: str) -> Var:
        """Parse command line arguments into a variable."""
        var_type = ''
        name = None
        remaining = list(args)
        while (remaining):
            arg = remaining.pop(0)
            if (name is not None):
                return cls._finish(name, _typed_value(var_type or 'string', arg), remaining, args)
            if ((not var_type) and _INLINE_FORMAT.match(arg)):
                var_type, rest = arg.split(',', 1)
                name, _, text = rest.partition('=')
                return cls._finish(name, _typed_value(_VAR_TYPES[var_type], text), remaining, args)
            if ('=' in arg):
                name, _, text = arg.partition('=')
                return cls._finish(name, _typed_value(var_type or 'string', text), remaining, args)
            if ((not var_type) and (arg in _VAR_TYPES)):
                var_type = _VAR_TYPES[arg]
            elif (var_type):
                name = arg
            else:
                raise VarSyntaxError(arg, 'expected [type,]name=value')
        raise VarSyntaxError(' '.join(args), 'missing value')

    @classmethod
    def _finish(cls, name: str, value: Value, remaining: list[str], args: tuple[str, ...]) -> Var:
        if (remaining):
            raise VarSyntaxError(' '.join(remaining), 'unexpected arguments after value')
        if (not name):
            raise VarSyntaxError(' '.join(args), 'missing name')
        return cls(name, value)

    @property
    def type(self) -> str:
        """Get the value type: string, array or map."""
        return self.value.kind

    def __iter__(self) -> Iterator[Any]:
        """Unpack as a (name, value) pair."""
        return iter((self.name, self.value))

    def __eq__(self, other: object) -> bool:
        """Compare variables."""
        if (not isinstance(other, Var)):
            return NotImplemented
        return ((self.name == other.name) and (self.value == other.value))

    def __repr__(self) -> str:
        """Convert to representation."""
        return f'Var({self.name!r}, {self.value!r})'

    def __str__(self) -> str:
        """Convert to string."""
        if (isinstance(self.value, ListValue)):
            text = ','.join([_quote(stringify(item)) for item in self.value.items])
        elif (isinstance(self.value, AssocValue)):
            text = ','.join([key + '=' + _quote(stringify(item)) for key, item in self.value.items.items()])
        else:
            text = _quote(stringify(self.value.raw))
        return f'{self.type},{_quote(self.name)}={text}'


class Vars(MutableMapping[str, Value]):
    """
    Variables used to expand templates, built up over several calls.

    Assigning a name that already holds a value merges the two:

    - list onto list appends
    - list onto string makes a list starting with the string
    - list onto map adds each item as a key with an empty value
    - map onto map adds keys, replacing existing ones

    Any other combination raises TypeConflictError.
    """

    __slots__ = ('_values', )

    _values: dict[str, Value]

    def __init__(self, values: (Mapping[str, Any] | None) = None, **kwargs: Any) -> None:
        self._values = {}
        self.update(values, **kwargs)

    def __getitem__(self, name: str) -> Value:
        """Get value of a variable."""
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        """Replace value of a variable."""
        self._values[name] = _copy(to_value(value))

    def __delitem__(self, name: str) -> None:
        """Remove a variable."""
        del self._values[name]

    def __iter__(self) -> Iterator[str]:
        """Iterate over variable names."""
        return iter(self._values)

    def __len__(self) -> int:
        """Get number of variables."""
        return len(self._values)

    def _merge(self, name: str, value: Value) -> None:
        current = self._values.get(name)
        if (current is None):
            self._values[name] = _copy(value)
        elif (isinstance(value, ListValue)):
            if (isinstance(current, ListValue)):
                current.items.extend(value.items)
            elif (isinstance(current, StringValue)):
                self._values[name] = ListValue([current.value] + value.items)
            elif (isinstance(current, AssocValue)):
                logger.debug('adding list items of %s as map keys', name)
                for item in value.items:
                    current.items[stringify(item)] = ''
            else:
                raise TypeConflictError(name, current.kind, value.kind)
        elif (isinstance(value, AssocValue) and isinstance(current, AssocValue)):
            current.items.update(value.items)
        else:
            raise TypeConflictError(name, current.kind, value.kind)

    def add(self, *variables: Var) -> None:
        """Merge variables."""
        for variable in variables:
            self._merge(variable.name, variable.value)

    def update(self, values: (Mapping[str, Any] | None) = None, **kwargs: Any) -> None:  # type: ignore[override]
        """Merge a mapping of values, None values are undefined and skipped."""
        for source in (values or {}, kwargs):
            for name, value in source.items():
                if (value is None):
                    continue
                self._merge(name, to_value(value))

    def items(self) -> list[Var]:  # type: ignore[override]
        """Get all variables, in order of first assignment."""
        return [Var(name, value) for name, value in self._values.items()]

    def set(self, arg: str) -> None:
        """
        Merge a variable written in abbreviated syntax.

        `name=value`, `name=[a, b]`, `name={key:value,key2:value2}` or a bare
        `name`, which sets the variable to its own name.
        """
        name, sep, text = arg.partition('=')
        if (not name):
            raise VarSyntaxError(arg, 'missing name')
        if (not sep):
            self._merge(name, StringValue(name))
        elif (text.startswith('[')):
            if (not text.endswith(']')):
                raise VarSyntaxError(arg, "expected ']' to end array")
            inner = text[1:-1]
            self._merge(name, ListValue([token.strip() for token in inner.split(',')] if (inner.strip()) else []))
        elif (text.startswith('{')):
            if (not text.endswith('}')):
                raise VarSyntaxError(arg, "expected '}' to end map")
            items: dict[str, Any] = {}
            inner = text[1:-1]
            for token in (inner.split(',') if (inner.strip()) else []):
                key, _, item = token.partition(':')
                items[key.strip()] = item.strip()
            self._merge(name, AssocValue(items))
        else:
            self._merge(name, StringValue(text))

    def loads(self, text: str) -> None:
        """Merge variables from a JSON object."""
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise VarSyntaxError(text, str(exc)) from exc
        if (not isinstance(data, Mapping)):
            raise VarSyntaxError(text, 'expected a JSON object')
        self.update(data)

    def load(self, fp: IO[str]) -> None:
        """Merge variables from a JSON file."""
        self.loads(fp.read())

    def __repr__(self) -> str:
        """Convert to representation."""
        return f'Vars({str(self)!r})'

    def __str__(self) -> str:
        """Convert to abbreviated syntax."""
        output: list[str] = []
        for name, value in self._values.items():
            if (isinstance(value, ListValue)):
                output.append(name + '=[' + ','.join([_quote(stringify(item)) for item in value.items]) + ']')
            elif (isinstance(value, AssocValue)):
                output.append(name + '={' + ','.join(sorted([key + ':' + _quote(stringify(item))
                                                             for key, item in value.items.items()])) + '}')
            elif (isinstance(value, StringValue) and (value.value == name)):
                output.append(name)
            else:
                output.append(name + '=' + stringify(value.raw))
        return ','.join(output)
