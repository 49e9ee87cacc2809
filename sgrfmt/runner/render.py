# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys

from . import AbstractRunner
from ..common import ArgumentError, logger
from ..console import Console
from ..literal import rewrite_literal
from ..parse import parse_string
from ..settings import SettingsManager


# noinspection PyMethodMayBeStatic
class RenderRunner(AbstractRunner):
    def run(self):
        app_settings = SettingsManager.app_settings
        if app_settings.expression is not None and app_settings.filename:
            raise ArgumentError('Both <file> and --expression are specified')

        result = self._render(self._read())
        if app_settings.visible:
            result = Console.make_visible(result)

        end = '\n'
        if app_settings.no_newline or app_settings.expression is None:
            end = ''
        Console.print(result, end=end)

    def _read(self) -> str:
        app_settings = SettingsManager.app_settings
        if app_settings.expression is not None:
            return app_settings.expression
        if app_settings.reading_stdin:
            logger.info('Reading from stdin')
            return sys.stdin.read()

        logger.info(f'Reading file: {app_settings.filename}')
        with open(app_settings.filename, 'rt', encoding='utf-8') as f:
            return f.read()

    def _render(self, text: str) -> str:
        app_settings = SettingsManager.app_settings
        if app_settings.literal:
            stripped = text.strip()
            return text.replace(stripped, rewrite_literal(stripped), 1)

        result = parse_string(text, process_escapes=app_settings.process_escapes)
        if app_settings.args:
            result = result.format(**app_settings.format_kwargs)
        return result
