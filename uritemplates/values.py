"""Template variable values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar


class Value:
    """
    A variable value: a string, a list or an associative array.

    https://tools.ietf.org/html/rfc6570#section-2.4
    """

    __slots__ = ()

    kind: ClassVar[str] = ''

    def __len__(self) -> int:
        """Get number of items."""
        return 0

    def __repr__(self) -> str:
        """Convert to representation."""
        return f'{type(self).__name__}({self.raw!r})'

    @property
    def raw(self) -> Any:
        """Get the plain Python value."""
        return None


class StringValue(Value):
    """A string value."""

    __slots__ = ('value', )

    kind: ClassVar[str] = 'string'

    value: str

    def __init__(self, value: str) -> None:
        self.value = value

    def __len__(self) -> int:
        """Get length of the string."""
        return len(self.value)

    def __eq__(self, other: object) -> bool:
        """Compare values."""
        if (not isinstance(other, StringValue)):
            return NotImplemented
        return (self.value == other.value)

    @property
    def raw(self) -> str:
        """Get the plain Python value."""
        return self.value


class ListValue(Value):
    """An ordered list of string-coercible items."""

    __slots__ = ('items', )

    kind: ClassVar[str] = 'array'

    items: list[Any]

    def __init__(self, items: Sequence[Any] = ()) -> None:
        self.items = list(items)

    def __len__(self) -> int:
        """Get number of items."""
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        """Compare values."""
        if (not isinstance(other, ListValue)):
            return NotImplemented
        return (self.items == other.items)

    @property
    def raw(self) -> list[Any]:
        """Get the plain Python value."""
        return self.items


class AssocValue(Value):
    """An associative array of string keys to string-coercible items."""

    __slots__ = ('items', )

    kind: ClassVar[str] = 'map'

    items: dict[str, Any]

    def __init__(self, items: (Mapping[str, Any] | None) = None) -> None:
        self.items = {str(key): item for key, item in items.items()} if (items) else {}

    def __len__(self) -> int:
        """Get number of keys."""
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        """Compare values."""
        if (not isinstance(other, AssocValue)):
            return NotImplemented
        return (self.items == other.items)

    @property
    def raw(self) -> dict[str, Any]:
        """Get the plain Python value."""
        return self.items


def stringify(value: Any) -> str:
    """Convert a scalar to the string used in expansions."""
    if (isinstance(value, str)):
        return value
    if (isinstance(value, bool)):
        return str(value).lower()
    if (isinstance(value, float) and value.is_integer()):
        return str(int(value))
    return str(value)


def to_value(value: Any) -> Value:
    """
    Coerce a Python object into a template value.

    Objects may define `__uritemplate_value__()` returning a value (or any
    object accepted here) to control their own conversion.
    """
    if (isinstance(value, Value)):
        return value
    hook = getattr(value, '__uritemplate_value__', None)
    if (hook is not None):
        return to_value(hook())
    if (isinstance(value, str)):
        return StringValue(value)
    if (isinstance(value, Mapping)):
        return AssocValue(value)
    if (isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray))):
        return ListValue(value)
    return StringValue(stringify(value))
