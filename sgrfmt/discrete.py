# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Typed SGR values for composing escape sequences at run time.

>>> str(Style.BOLD)
'\\x1b[1m'
>>> f'{RgbColor(0, 128, 255, background=True)}'
'\\x1b[48;2;0;128;255m'

"""
from __future__ import annotations

import typing as t
from dataclasses import dataclass
from enum import Enum

from .builder import SgrBuilder, build_sgr
from .codes import IntCodes, ADD_STYLE_CODES, REMOVE_STYLE_CODES, resolve_color
from .common import Delimiter, InvalidKeywordError


class DiscreteSGR:
    """
    Value that maps to one or more SGR codes and can be rendered on its own,
    i.e. without being a part of some styled string.
    """

    def codes(self) -> t.Tuple[int, ...]:
        raise NotImplementedError

    def write(self, builder: SgrBuilder):
        """
        Append own codes to the escape sequence currently open in ``builder``.
        Neither opens nor closes the sequence.
        """
        builder.write_codes(self.codes())

    def __str__(self) -> str:
        return build_sgr(self)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class Style(DiscreteSGR, Enum):
    RESET = IntCodes.RESET
    """ Resets all the attributes and colors to terminal defaults. """
    BOLD = IntCodes.BOLD
    DIM = IntCodes.DIM
    ITALIC = IntCodes.ITALIC
    UNDERLINE = IntCodes.UNDERLINE
    BLINKING = IntCodes.BLINKING
    INVERSE = IntCodes.INVERSE
    HIDDEN = IntCodes.HIDDEN
    STRIKETHROUGH = IntCodes.STRIKETHROUGH
    NOT_BOLD = IntCodes.BOLD_DIM_OFF
    NOT_DIM = IntCodes.BOLD_DIM_OFF
    """ Alias of `NOT_BOLD`, there is no code for disabling DIM alone. """
    NOT_ITALIC = IntCodes.ITALIC_OFF
    NOT_UNDERLINE = IntCodes.UNDERLINE_OFF
    NOT_BLINKING = IntCodes.BLINKING_OFF
    NOT_INVERSE = IntCodes.INVERSE_OFF
    NOT_HIDDEN = IntCodes.HIDDEN_OFF
    NOT_STRIKETHROUGH = IntCodes.STRIKETHROUGH_OFF

    def codes(self) -> t.Tuple[int, ...]:
        return (self.value,)

    @classmethod
    def from_keyword(cls, keyword: str, remove: bool = False) -> Style:
        table = REMOVE_STYLE_CODES if remove else ADD_STYLE_CODES
        if keyword not in table:
            delimiter = Delimiter.REMOVE_STYLE if remove else Delimiter.ADD_STYLE
            raise InvalidKeywordError(keyword, delimiter.value)
        return cls(table[keyword])


class Color(DiscreteSGR, Enum):
    BLACK_FG = IntCodes.BLACK
    RED_FG = IntCodes.RED
    GREEN_FG = IntCodes.GREEN
    YELLOW_FG = IntCodes.YELLOW
    BLUE_FG = IntCodes.BLUE
    MAGENTA_FG = IntCodes.MAGENTA
    CYAN_FG = IntCodes.CYAN
    WHITE_FG = IntCodes.WHITE
    DEFAULT_FG = IntCodes.COLOR_OFF

    BLACK_BG = IntCodes.BG_BLACK
    RED_BG = IntCodes.BG_RED
    GREEN_BG = IntCodes.BG_GREEN
    YELLOW_BG = IntCodes.BG_YELLOW
    BLUE_BG = IntCodes.BG_BLUE
    MAGENTA_BG = IntCodes.BG_MAGENTA
    CYAN_BG = IntCodes.BG_CYAN
    WHITE_BG = IntCodes.BG_WHITE
    DEFAULT_BG = IntCodes.BG_COLOR_OFF

    def codes(self) -> t.Tuple[int, ...]:
        return (self.value,)


def _validate_extended_color(value: int):
    if value < 0 or value > 255:
        raise ValueError(f"Invalid color value: expected range [0-255], got: {value}")


def _target_code(background: bool) -> int:
    return IntCodes.BG_COLOR_EXTENDED if background else IntCodes.COLOR_EXTENDED


@dataclass(frozen=True)
class ByteColor(DiscreteSGR):
    """
    Color from 256-color palette.
    """

    index: int
    background: bool = False

    def __post_init__(self):
        _validate_extended_color(self.index)

    def codes(self) -> t.Tuple[int, ...]:
        return _target_code(self.background), IntCodes.EXTENDED_MODE_256, self.index


@dataclass(frozen=True)
class RgbColor(DiscreteSGR):
    """
    True Color (16M) value; each channel is in [0; 255] range.
    """

    r: int
    g: int
    b: int
    background: bool = False

    def __post_init__(self):
        for value in (self.r, self.g, self.b):
            _validate_extended_color(value)

    def codes(self) -> t.Tuple[int, ...]:
        return _target_code(self.background), IntCodes.EXTENDED_MODE_RGB, self.r, self.g, self.b


def color_from_keyword(keyword: str) -> Color | ByteColor | RgbColor:
    """
    Make a typed color out of a color name or a parametric color literal,
    the same ones that are accepted after ``#`` in a styling parameter.

    >>> color_from_keyword('b[ff]')
    ByteColor(index=255, background=True)
    """
    codes = resolve_color(keyword)
    if codes is None:
        raise InvalidKeywordError(keyword, Delimiter.COLOR.value)

    if len(codes) == 1:
        return Color(codes[0])

    background = codes[0] == IntCodes.BG_COLOR_EXTENDED
    if codes[1] == IntCodes.EXTENDED_MODE_256:
        return ByteColor(codes[2], background)
    return RgbColor(*codes[2:], background=background)
