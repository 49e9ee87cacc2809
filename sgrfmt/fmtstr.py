# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Shortcuts for using styling parameters with `str.format()`.

>>> sgr_format('{+Bold}{0}{-Bold} is {value#GreenFg&#DefaultFg}', 'Status', value='OK')
'\\x1b[1mStatus\\x1b[22m is \\x1b[32mOK\\x1b[39m'
"""
from __future__ import annotations

import sys
import typing as t
from functools import lru_cache

from .parse import parse_string


@lru_cache(maxsize=256)
def sgr(template: str, escapes: bool = False) -> str:
    """
    Rewrite ``template`` and cache the result. Backslash escapes are not
    decoded by default, as Python has already done it for regular literals.
    """
    return parse_string(template, process_escapes=escapes)


def sgr_format(template: str, *args: t.Any, **kwargs: t.Any) -> str:
    return sgr(template).format(*args, **kwargs)


def sgr_write(stream: t.IO[str], template: str, *args: t.Any, **kwargs: t.Any):
    stream.write(sgr_format(template, *args, **kwargs))


def sgr_print(
    template: str,
    *args: t.Any,
    file: t.IO[str] = None,
    end: str = "\n",
    flush: bool = False,
    **kwargs: t.Any,
):
    print(sgr_format(template, *args, **kwargs), end=end, file=file or sys.stdout, flush=flush)
