# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import pytermor

from . import AbstractRunner
from .._version import __version__
from ..console import Console


class VersionRunner(AbstractRunner):
    def run(self):
        Console.info("es7s/sgrfmt".ljust(16) + __version__)
        Console.info("pytermor".ljust(16) + pytermor.__version__)
