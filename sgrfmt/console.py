# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import sys
import traceback
from typing import Any

from pytermor import SequenceSGR

from .codes import IntCodes
from .common import ArgumentError, logger
from .settings import SettingsManager


class Fmt:
    """
    Wraps text in opening and closing SGRs, unless colors are disabled.
    """

    def __init__(self, opening_code: int, closing_code: int):
        self._opening_seq = SequenceSGR(opening_code)
        self._closing_seq = SequenceSGR(closing_code)

    def __call__(self, text: Any = None) -> str:
        if text is None:
            text = ''
        if SettingsManager.app_settings.no_color:
            return str(text)
        return self._opening_seq.assemble() + str(text) + self._closing_seq.assemble()


class Console:
    FMT_BOLD = Fmt(IntCodes.BOLD, IntCodes.BOLD_DIM_OFF)
    FMT_UNDERLINE = Fmt(IntCodes.UNDERLINE, IntCodes.UNDERLINE_OFF)
    FMT_DEFAULT = Fmt(IntCodes.YELLOW, IntCodes.COLOR_OFF)
    FMT_WARNING = Fmt(IntCodes.YELLOW, IntCodes.COLOR_OFF)
    FMT_ERROR_TRACE = Fmt(IntCodes.RED, IntCodes.COLOR_OFF)
    FMT_ERROR = Fmt(IntCodes.RED, IntCodes.COLOR_OFF)
    FMT_LABEL = Fmt(IntCodes.CYAN, IntCodes.COLOR_OFF)

    LOG_FORMAT = '[%(levelname)5.5s][%(name)s.%(module)s] %(message)s'

    @staticmethod
    def setup_logging():
        app_settings = SettingsManager.app_settings
        if not app_settings.debug:
            return

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(Console.LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(app_settings.log_level)

    @staticmethod
    def on_exception(e: Exception):
        if isinstance(e, ArgumentError):
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info(e.USAGE_MSG, file=sys.stderr)

        elif SettingsManager.app_settings.debug > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            Console.print(Console.FMT_ERROR_TRACE('\n'.join(tb_lines)), file=sys.stderr)
            Console.error(error)

        else:
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info("Run the app with '" + Console.FMT_BOLD('--debug') + "' argument to see the details",
                         file=sys.stderr)

    @staticmethod
    def info(s: str = '', end='\n', **kwargs):
        Console.print(s, end=end, **kwargs)

    @staticmethod
    def warn(s: str = '', end='\n'):
        Console.print(Console.FMT_WARNING(f'WARNING: {s}'), end=end, file=sys.stderr)

    @staticmethod
    def error(s: str = '', end='\n'):
        Console.print(Console.FMT_ERROR(Console.FMT_BOLD('ERROR: ') + s), end=end, file=sys.stderr)

    @staticmethod
    def print(s: str, end='\n', **kwargs):
        print(s, end=end, **kwargs)

    @staticmethod
    def make_visible(s: str) -> str:
        return s.replace('\x1b', Console.FMT_LABEL('\\e'))
