# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Static rewriting of the styling mini-language into raw escape sequences.

Styling parameter is a format parameter with a chain of directives inside:
``+Style`` adds a style, ``-Style`` removes it and ``#Color`` sets a color.
Everything before the first directive is an embedded value, which is kept
as a regular format parameter for the formatting engine:

>>> parse_string('{+Bold}bold{-Bold}')
'\\x1b[1mbold\\x1b[22m'
>>> parse_string('{name#RedFg}')
'\\x1b[31m{name}'

Directives placed after ``&`` marker are applied after the embedded value:

>>> parse_string('{name+Bold&-Bold}')
'\\x1b[1m{name}\\x1b[22m'
>>> parse_string('{+Bold#RedFg&name}')
'\\x1b[1;31m{name}\\x1b[0m'

Literal braces (``{{``, ``}}``) and plain parameters (``{}``, ``{0:>4}``)
are left untouched.
"""
from __future__ import annotations

import re
import typing as t
from dataclasses import dataclass, field

from .codes import IntCodes, resolve_directive
from .common import (
    logger,
    Delimiter,
    DIRECTIVE_CHARS,
    DELIMITER_CHARS,
    ParseError,
    InvalidEscapeError,
    InvalidKeywordError,
    InvalidParamError,
)
from .writer import StringWriter

_SIMPLE_ESCAPES: t.Dict[str, str] = {
    "'": "'",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "0": "\0",
}
_LINE_BREAKS = "\n\r"
_WHITESPACE = " \t\r\n"
_HEX_REGEX = re.compile(r"[0-9a-fA-F]+")


class Directive(t.NamedTuple):
    delimiter: str
    keyword: str
    offset: int


@dataclass
class ParamState:
    """
    Transient state of one ``{...}`` parameter being parsed.
    """

    value: str | None = None
    close_found: bool = False
    after_value: bool = False
    delimiter: str = ""
    before: t.List[Directive] = field(default_factory=list)
    after: t.List[Directive] = field(default_factory=list)


class ParamOutcome:
    text: str


@dataclass(frozen=True)
class RewriteOutcome(ParamOutcome):
    """ Parameter was rewritten; parsing continues from ``end``. """

    text: str
    end: int


@dataclass(frozen=True)
class LiteralOutcome(ParamOutcome):
    """ Parameter is unterminated; ``text`` is the rest of input as is. """

    text: str


def parse_string(s: str, process_escapes: bool = True) -> str:
    """
    Rewrite styling parameters of ``s`` into SGR escape sequences.

    :param s:               Text to rewrite.
    :param process_escapes: Decode backslash escapes (``\\n``, ``\\x1b``,
                            ``\\u{..}``, line continuation).
    :raises ParseError:     If ``s`` contains invalid escape, invalid keyword
                            or malformed styling parameter.
    """
    return Parser(s, process_escapes).parse()


def try_parse_string(s: str, process_escapes: bool = True) -> str | None:
    """
    Same as `parse_string()`, but returns *None* instead of raising.
    """
    try:
        return parse_string(s, process_escapes)
    except ParseError as e:
        logger.debug(f"Parsing failed: {e}")
        return None


# noinspection PyMethodMayBeStatic
class Parser:
    def __init__(self, s: str, process_escapes: bool = True):
        self._s = s
        self._process_escapes = process_escapes
        self._pos = 0
        self._buf: t.List[str] = []

    def parse(self) -> str:
        s = self._s
        while self._pos < len(s):
            ch = s[self._pos]
            if ch == "\\" and self._process_escapes:
                self._parse_escape()
            elif ch == "{":
                self._parse_brace_open()
            elif ch == "}":
                self._parse_brace_close()
            else:
                self._buf.append(ch)
                self._pos += 1
        return "".join(self._buf)

    def _parse_escape(self):
        s, start = self._s, self._pos
        if start + 1 >= len(s):
            raise InvalidEscapeError("Unterminated escape", start)

        ch = s[start + 1]
        self._pos = start + 2
        if ch in _SIMPLE_ESCAPES:
            self._buf.append(_SIMPLE_ESCAPES[ch])
        elif ch == "x":
            self._buf.append(self._parse_7bit(start))
        elif ch == "u":
            self._buf.append(self._parse_24bit(start))
        elif ch in _LINE_BREAKS:
            self._skip_whitespace()
        else:
            raise InvalidEscapeError(f"Invalid escape: \\{ch}", start)

    def _parse_7bit(self, start: int) -> str:
        digits = self._s[self._pos:self._pos + 2]
        if len(digits) != 2 or not _HEX_REGEX.fullmatch(digits):
            raise InvalidEscapeError(f"Invalid \\x escape: expected 2 hex digits, got {digits!r}", start)
        self._pos += 2
        return chr(int(digits, 16))

    def _parse_24bit(self, start: int) -> str:
        s, pos = self._s, self._pos
        close = s.find("}", pos)
        if not s.startswith("{", pos) or close < 0:
            raise InvalidEscapeError("Invalid \\u escape: expected \\u{...}", start)

        digits = s[pos + 1:close]
        if not 1 <= len(digits) <= 6 or not _HEX_REGEX.fullmatch(digits):
            raise InvalidEscapeError(f"Invalid \\u escape: {digits!r} is not a hex number", start)

        codepoint = int(digits, 16)
        if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
            raise InvalidEscapeError(f"Invalid \\u escape: U+{codepoint:X} is not a valid char", start)
        self._pos = close + 1
        return chr(codepoint)

    def _skip_whitespace(self):
        while self._pos < len(self._s) and self._s[self._pos] in _WHITESPACE:
            self._pos += 1

    def _parse_brace_open(self):
        s, pos = self._s, self._pos
        if pos + 1 >= len(s):
            logger.warning(f"Unclosed bracket at offset {pos}, keeping as is")
            self._buf.append("{")
            self._pos += 1
            return

        ch = s[pos + 1]
        if ch in "{}":
            self._buf.append("{" + ch)
            self._pos += 2
            return

        outcome = parse_param(s, pos + 1)
        self._buf.append(outcome.text)
        if isinstance(outcome, LiteralOutcome):
            self._pos = len(s)
        else:
            self._pos = outcome.end

    def _parse_brace_close(self):
        # unmatched '}' is kept as is, formatting engine will complain
        if self._s.startswith("}}", self._pos):
            self._buf.append("}}")
            self._pos += 2
        else:
            self._buf.append("}")
            self._pos += 1


def parse_param(s: str, start: int) -> ParamOutcome:
    """
    Parse a format parameter, i.e. something within curly braces::

        "{..}"
          ^^

    :param s:     The whole text being parsed.
    :param start: Index of the char following the opening brace.
    """
    return ParamParser(s, start).parse()


class ParamParser:
    def __init__(self, s: str, start: int):
        self._s = s
        self._start = start
        self._state = ParamState()

    def parse(self) -> ParamOutcome:
        s, state = self._s, self._state

        close = s.find(Delimiter.CLOSE, self._start)
        if close < 0:
            logger.warning(f"Unclosed parameter at offset {self._start - 1}, keeping as is")
            return LiteralOutcome(s[self._start - 1:])

        self._tokenize()
        end = close + 1
        if not state.before and not state.after_value:
            return RewriteOutcome("{" + state.value + "}", end)

        text = self._render()
        logger.debug(f"Rewrote parameter {s[self._start - 1:end]!r} -> {text!r}")
        return RewriteOutcome(text, end)

    def _tokenize(self):
        s, state = self._s, self._state

        pos = self._start
        if s[pos] not in DIRECTIVE_CHARS:
            pos = _find_delimiter(s, pos + 1)
            state.value = s[self._start:pos]

        while not state.close_found:
            state.delimiter = s[pos]
            if state.delimiter == Delimiter.CLOSE:
                state.close_found = True
            elif state.delimiter == Delimiter.AFTER_VALUE:
                pos = self._read_after_value(pos)
            else:
                end = _find_delimiter(s, pos + 1)
                directive = Directive(state.delimiter, s[pos + 1:end], pos)
                if state.after_value:
                    state.after.append(directive)
                else:
                    state.before.append(directive)
                pos = end

    def _read_after_value(self, pos: int) -> int:
        s, state = self._s, self._state
        if state.after_value:
            raise InvalidParamError("Duplicate '&' marker", pos)
        state.after_value = True

        pos += 1
        if s[pos] in DELIMITER_CHARS:
            return pos
        if state.value is not None:
            raise InvalidParamError(f"Embedded value is already specified: {state.value!r}", pos)

        end = _find_delimiter(s, pos)
        state.value = s[pos:end]
        return end

    def _render(self) -> str:
        state = self._state
        writer = StringWriter()

        if not state.after_value:
            self._write_escape(writer, state.before)
            if state.value is not None:
                writer.write("{" + state.value + "}")
            return writer.getvalue()

        if state.before:
            self._write_escape(writer, state.before)
        writer.write("{" + (state.value or "") + "}")
        self._write_escape(writer, state.after)
        return writer.getvalue()

    def _write_escape(self, writer: StringWriter, directives: t.List[Directive]):
        codes = [code for directive in directives for code in _resolve(directive)]
        if not codes:
            codes = [IntCodes.RESET]

        writer.escape()
        writer.write_codes(codes)
        writer.end()


def _resolve(directive: Directive) -> t.Tuple[int, ...]:
    codes = resolve_directive(directive.delimiter, directive.keyword)
    if codes is None:
        raise InvalidKeywordError(directive.keyword, directive.delimiter, directive.offset)
    return codes


def _find_delimiter(s: str, pos: int) -> int:
    """
    Return index of the next delimiter char at or after ``pos``. Caller
    guarantees that closing brace is present.
    """
    while s[pos] not in DELIMITER_CHARS:
        pos += 1
    return pos
