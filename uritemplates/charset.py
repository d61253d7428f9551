"""Character classes for URI templates."""

from __future__ import annotations

import re


class Charset:
    """
    Character classes from RFC 3986 and RFC 6570.

    https://tools.ietf.org/html/rfc6570#section-1.5
    """

    ALPHA = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
    DIGIT = '0123456789'
    HEX_DIGIT = '0123456789ABCDEFabcdef'
    VAR_CHAR = ALPHA + DIGIT + '_.'
    UNRESERVED = ALPHA + DIGIT + '-._~'
    GEN_DELIMS = ':/?#[]@'
    SUB_DELIMS = "!$&'()*+,;="
    RESERVED = GEN_DELIMS + SUB_DELIMS


VALID_NAME = re.compile(r'^([A-Za-z0-9_.]|%[0-9A-Fa-f]{2})+$')

_HEX = '0123456789ABCDEF'
_UNRESERVED_BYTES = frozenset(Charset.UNRESERVED.encode('ascii'))
_RESERVED_BYTES = _UNRESERVED_BYTES | frozenset(Charset.RESERVED.encode('ascii'))


def escape(value: (str | bytes), allow_reserved: bool = False) -> str:
    """
    Percent-encode a value.

    Strings are encoded as UTF-8 first. Every byte outside the unreserved set
    (or the unreserved and reserved sets when `allow_reserved` is set) is
    written as `%XX`.
    """
    data = value.encode('utf8') if (isinstance(value, str)) else value
    legal = _RESERVED_BYTES if (allow_reserved) else _UNRESERVED_BYTES
    output = ''
    for byte in data:
        if (byte in legal):
            output += chr(byte)
        else:
            output += '%' + _HEX[byte // 16] + _HEX[byte % 16]
    return output
