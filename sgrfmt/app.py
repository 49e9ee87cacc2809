# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import List

from .arghelp import AppArgumentParser
from .console import Console
from .runner import RunnerFactory
from .settings import SettingsManager


# noinspection PyMethodMayBeStatic
class App:
    def run(self, argv: List[str] = None):
        try:
            self._parse_args(argv)  # help processing is handled by argparse
            (RunnerFactory.create()).run()
        except Exception as e:
            Console.on_exception(e)
            self._exit(1)
        self._exit(0)

    def _parse_args(self, argv: List[str] = None):
        SettingsManager.init()
        AppArgumentParser().parse_args(argv, namespace=SettingsManager.app_settings)
        Console.setup_logging()

    def _exit(self, code: int):
        sys.exit(code)
