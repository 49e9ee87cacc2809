# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import typing as t
from contextlib import contextmanager

from .common import LogicError
from .writer import SgrWriter, StringWriter

if t.TYPE_CHECKING:
    from .discrete import DiscreteSGR


class SgrBuilder:
    """
    Composes SGR escape sequences from typed values or raw integer codes
    and serializes them into a `SgrWriter`.

    Each `open()` must be paired with exactly one `close()`:

    >>> b = SgrBuilder(StringWriter())
    >>> with b.escape():
    ...     b.write_codes([1, 4])
    >>> b.writer.getvalue()
    '\\x1b[1;4m'
    """

    def __init__(self, writer: SgrWriter):
        self._writer = writer
        self._opened = False

    @property
    def writer(self) -> SgrWriter:
        return self._writer

    @property
    def is_open(self) -> bool:
        return self._opened

    def open(self):
        if self._opened:
            raise LogicError("Escape sequence is already open")
        self._opened = True
        self._writer.escape()

    def close(self):
        if not self._opened:
            raise LogicError("Escape sequence is not open")
        self._opened = False
        self._writer.end()

    def write_code(self, code: int):
        self._writer.write_code(code)

    def write_codes(self, codes: t.Iterable[int]):
        self._writer.write_codes(codes)

    def push(self, *items: DiscreteSGR):
        """ Append the codes of each item to the current escape sequence. """
        for item in items:
            item.write(self)

    @contextmanager
    def escape(self) -> t.Iterator[SgrBuilder]:
        self.open()
        try:
            yield self
        finally:
            self.close()

    def inline_sgr(self, *items: DiscreteSGR):
        """ Write one complete escape sequence holding all the ``items``. """
        with self.escape():
            self.push(*items)


def build_sgr(*items: DiscreteSGR) -> str:
    """
    Render ``items`` as one escape sequence.

    >>> from sgrfmt import Style, Color
    >>> build_sgr(Style.BOLD, Color.RED_FG)
    '\\x1b[1;31m'
    """
    builder = SgrBuilder(StringWriter())
    builder.inline_sgr(*items)
    return builder.writer.getvalue()
