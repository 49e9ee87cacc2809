# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .common import (
    SgrError,
    LogicError,
    ParseError,
    InvalidEscapeError,
    InvalidKeywordError,
    InvalidParamError,
    InvalidLiteralError,
)
from .codes import IntCodes, resolve_add_style, resolve_remove_style, resolve_color
from .writer import SgrWriter, StringWriter, StreamWriter, ESCAPE, END
from .builder import SgrBuilder, build_sgr
from .discrete import DiscreteSGR, Style, Color, ByteColor, RgbColor, color_from_keyword
from .parse import parse_string, try_parse_string
from .literal import UnwrappedLiteral, unwrap_literal, wrap_raw_literal, rewrite_literal
from .fmtstr import sgr, sgr_format, sgr_print, sgr_write
from ._version import __version__
