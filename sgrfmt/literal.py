# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Unwrapping and wrapping of quoted string literals: plain ones (``"..."``)
and raw ones with N hash chars (``r"..."``, ``r#"..."#``, ...).

>>> unwrap_literal('r##"text"##')
UnwrappedLiteral(body='text', hashes=2)
>>> wrap_raw_literal('text', 1)
'r#"text"#'
"""
from __future__ import annotations

from dataclasses import dataclass

from .common import InvalidLiteralError
from .parse import parse_string

QUOTE = '"'
HASH = "#"
RAW_MARKER = "r"


@dataclass(frozen=True)
class UnwrappedLiteral:
    body: str
    hashes: int | None = None
    """ Hash count of a raw literal, *None* for a plain one. """

    @property
    def is_raw(self) -> bool:
        return self.hashes is not None

    def wrap(self, body: str = None) -> str:
        if body is None:
            body = self.body
        if self.is_raw:
            return wrap_raw_literal(body, self.hashes)
        return QUOTE + body + QUOTE


def unwrap_literal(s: str) -> UnwrappedLiteral:
    """
    :raises InvalidLiteralError: if ``s`` is not a quoted literal.
    """
    if not s.startswith(RAW_MARKER):
        if len(s) < 2 or not s.startswith(QUOTE) or not s.endswith(QUOTE):
            raise InvalidLiteralError(f"Not a string literal: {s!r}")
        return UnwrappedLiteral(s[1:-1])

    rest = s[len(RAW_MARKER):]
    stripped = rest.strip(HASH)
    leading = len(rest) - len(rest.lstrip(HASH))
    trailing = len(rest) - len(rest.rstrip(HASH))
    if leading != trailing:
        raise InvalidLiteralError(f"Unbalanced hashes in raw literal: {s!r}")
    if len(stripped) < 2 or not stripped.startswith(QUOTE) or not stripped.endswith(QUOTE):
        raise InvalidLiteralError(f"Not a raw string literal: {s!r}")
    return UnwrappedLiteral(stripped[1:-1], (leading + trailing) // 2)


def wrap_raw_literal(body: str, hashes: int) -> str:
    return RAW_MARKER + HASH * hashes + QUOTE + body + QUOTE + HASH * hashes


def min_hashes(body: str) -> int:
    """
    Smallest amount of hashes that makes a raw literal with ``body`` valid.
    """
    hashes = 0
    while QUOTE + HASH * hashes in body:
        hashes += 1
    return hashes


def rewrite_literal(s: str) -> str:
    """
    Rewrite styling parameters inside of a quoted literal and wrap the result
    as a raw literal. Escapes are decoded only in plain literals.

    >>> rewrite_literal('"{+Bold}\\\\n"')
    'r"\\x1b[1m\\n"'
    """
    literal = unwrap_literal(s)
    if literal.is_raw:
        return wrap_raw_literal(parse_string(literal.body, process_escapes=False), literal.hashes)

    body = parse_string(literal.body)
    return wrap_raw_literal(body, min_hashes(body))
