# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from ._abstract import AbstractRunner

from .render import RenderRunner
from .legend import LegendRunner
from .version import VersionRunner

from .factory import RunnerFactory
