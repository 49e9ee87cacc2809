# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Sinks for SGR escape sequences.

Writer knows how to start an escape sequence, how to separate its codes and
how to terminate it; it does not know what the codes mean:

>>> w = StringWriter()
>>> w.escape(); w.write_code(1); w.write_code(4); w.end()
>>> w.getvalue()
'\\x1b[1;4m'

"""
from __future__ import annotations

import io
from abc import ABCMeta, abstractmethod
from typing import Iterable, BinaryIO

ESCAPE = "\x1b["
END = "m"
SEPARATOR = ";"


class SgrWriter(metaclass=ABCMeta):
    """
    Abstract ancestor of all writers.

    Separator is emitted before every code except the first one since the
    last `escape()` call.
    """

    def __init__(self, first_write: bool = True):
        self._first_write = first_write

    def escape(self):
        """ Emit the introducer and start a new code list. """
        self._first_write = True
        self._write_str(ESCAPE)

    def end(self):
        """ Emit the terminator. """
        self._write_str(END)

    def write_code(self, code: int):
        if self._first_write:
            self._first_write = False
        else:
            self._write_str(SEPARATOR)
        self._write_str(str(int(code)))

    def write_codes(self, codes: Iterable[int]):
        for code in codes:
            self.write_code(code)

    def write(self, s: str):
        """ Pass plain text through to the sink. """
        self._write_str(s)

    @abstractmethod
    def _write_str(self, s: str):
        raise NotImplementedError


class StringWriter(SgrWriter):
    """
    Writer for in-memory text buffers. Always starts fresh.
    """

    def __init__(self, buffer: io.StringIO = None):
        super().__init__()
        self._buffer = buffer if buffer is not None else io.StringIO()

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def _write_str(self, s: str):
        self._buffer.write(s)


class StreamWriter(SgrWriter):
    """
    Writer for byte streams. Set ``first_write`` to *False* to continue an
    escape sequence which was opened outside of this writer.
    """

    def __init__(self, stream: BinaryIO, first_write: bool = True, encoding: str = "utf-8"):
        super().__init__(first_write)
        self._stream = stream
        self._encoding = encoding

    def flush(self):
        self._stream.flush()

    def _write_str(self, s: str):
        self._stream.write(s.encode(self._encoding))
