# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Dict

from . import AbstractRunner
from ..codes import ADD_STYLE_CODES, REMOVE_STYLE_CODES, COLOR_CODES, resolve_directive
from ..common import Delimiter
from ..console import Console
from ..discrete import Style
from ..parse import parse_string


class LegendRunner(AbstractRunner):
    SAMPLE = 'Sample'
    KEYWORD_WIDTH = 18
    CODES_WIDTH = 16
    PARAMETRIC_COLORS = {
        'f(<n>)': '256-color palette, text',
        'b(<n>)': '256-color palette, background',
        'f(<r>,<g>,<b>)': 'RGB, text',
        'b(<r>,<g>,<b>)': 'RGB, background',
        'f[<xx>]': '256-color palette, hexadecimal',
        'f[<rrggbb>]': 'RGB, hexadecimal',
    }
    PARAMETRIC_EXAMPLES = ['f(208)', 'b(0,128,255)', 'f[ff]', 'f[008000]']

    def run(self):
        self._print_table('Add style', Delimiter.ADD_STYLE, ADD_STYLE_CODES)
        self._print_table('Remove style', Delimiter.REMOVE_STYLE, REMOVE_STYLE_CODES)
        self._print_table('Color', Delimiter.COLOR, COLOR_CODES)

        Console.info(Console.FMT_BOLD('Parametric color'.upper()))
        for keyword, desc in self.PARAMETRIC_COLORS.items():
            Console.info(self._format_row(Delimiter.COLOR + keyword, desc))
        for keyword in self.PARAMETRIC_EXAMPLES:
            self._print_row(Delimiter.COLOR, keyword)

    def _print_table(self, title: str, delimiter: Delimiter, table: Dict[str, int]):
        Console.info(Console.FMT_BOLD(title.upper()))
        for keyword in table.keys():
            self._print_row(delimiter, keyword)
        Console.info()

    def _print_row(self, delimiter: Delimiter, keyword: str):
        codes = resolve_directive(delimiter, keyword)
        sample = parse_string('{' + delimiter + keyword + '}') + self.SAMPLE + str(Style.RESET)
        Console.info(self._format_row(delimiter + keyword, ';'.join(map(str, codes)), sample))

    def _format_row(self, keyword: str, codes: str, sample: str = '') -> str:
        return (''.ljust(2) + Console.FMT_LABEL(keyword.ljust(self.KEYWORD_WIDTH)) +
                codes.ljust(self.CODES_WIDTH) + sample)
