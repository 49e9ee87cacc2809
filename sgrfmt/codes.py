# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Keyword tables of the styling mini-language and their SGR integer codes.

There are three independent tables: styles that can be *added* (``+Bold``),
styles that can be *removed* (``-Bold``) and colors (``#RedFg``). Colors
can also be specified parametrically, as a palette index or an RGB value,
in decimal or hexadecimal notation:

>>> resolve_color('f(255)')
(38, 5, 255)
>>> resolve_color('b(0,128,255)')
(48, 2, 0, 128, 255)
>>> resolve_color('f[008000]')
(38, 2, 0, 128, 0)

All resolvers return *None* for anything they do not recognize.
"""
from __future__ import annotations

import re
from typing import Dict, Tuple, Optional, List

from .common import Delimiter


class IntCodes:
    """
    SGR param integer codes used by the mini-language.
    """

    RESET = 0  # hard reset code
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINKING = 5
    INVERSE = 7
    HIDDEN = 8
    STRIKETHROUGH = 9
    BOLD_DIM_OFF = 22  # there is no separate sequence for disabling either
    ITALIC_OFF = 23              # of BOLD or DIM while keeping the other
    UNDERLINE_OFF = 24
    BLINKING_OFF = 25
    INVERSE_OFF = 27
    HIDDEN_OFF = 28
    STRIKETHROUGH_OFF = 29

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    COLOR_EXTENDED = 38
    COLOR_OFF = 39

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47
    BG_COLOR_EXTENDED = 48
    BG_COLOR_OFF = 49

    # -- EXTENDED modifiers -------------------------------------------------------

    EXTENDED_MODE_256 = 5
    EXTENDED_MODE_RGB = 2


ADD_STYLE_CODES: Dict[str, int] = {
    "Reset": IntCodes.RESET,
    "Bold": IntCodes.BOLD,
    "Dim": IntCodes.DIM,
    "Italic": IntCodes.ITALIC,
    "Underline": IntCodes.UNDERLINE,
    "Blinking": IntCodes.BLINKING,
    "Inverse": IntCodes.INVERSE,
    "Hidden": IntCodes.HIDDEN,
    "Strikethrough": IntCodes.STRIKETHROUGH,
}

REMOVE_STYLE_CODES: Dict[str, int] = {
    "Bold": IntCodes.BOLD_DIM_OFF,
    "Dim": IntCodes.BOLD_DIM_OFF,
    "Italic": IntCodes.ITALIC_OFF,
    "Underline": IntCodes.UNDERLINE_OFF,
    "Blinking": IntCodes.BLINKING_OFF,
    "Inverse": IntCodes.INVERSE_OFF,
    "Hidden": IntCodes.HIDDEN_OFF,
    "Strikethrough": IntCodes.STRIKETHROUGH_OFF,
}

COLOR_CODES: Dict[str, int] = {
    "BlackFg": IntCodes.BLACK,
    "RedFg": IntCodes.RED,
    "GreenFg": IntCodes.GREEN,
    "YellowFg": IntCodes.YELLOW,
    "BlueFg": IntCodes.BLUE,
    "MagentaFg": IntCodes.MAGENTA,
    "CyanFg": IntCodes.CYAN,
    "WhiteFg": IntCodes.WHITE,
    "DefaultFg": IntCodes.COLOR_OFF,
    "BlackBg": IntCodes.BG_BLACK,
    "RedBg": IntCodes.BG_RED,
    "GreenBg": IntCodes.BG_GREEN,
    "YellowBg": IntCodes.BG_YELLOW,
    "BlueBg": IntCodes.BG_BLUE,
    "MagentaBg": IntCodes.BG_MAGENTA,
    "CyanBg": IntCodes.BG_CYAN,
    "WhiteBg": IntCodes.BG_WHITE,
    "DefaultBg": IntCodes.BG_COLOR_OFF,
}

_TARGET_CODES: Dict[str, int] = {
    "f": IntCodes.COLOR_EXTENDED,
    "b": IntCodes.BG_COLOR_EXTENDED,
}

_DECIMAL_REGEX = re.compile(r"[0-9]+")
_HEX_REGEX = re.compile(r"[0-9a-fA-F]+")


def resolve_add_style(keyword: str) -> Optional[int]:
    return ADD_STYLE_CODES.get(keyword)


def resolve_remove_style(keyword: str) -> Optional[int]:
    return REMOVE_STYLE_CODES.get(keyword)


def resolve_color(keyword: str) -> Optional[Tuple[int, ...]]:
    """
    Resolve a color name or a parametric color literal into SGR codes.

    Parametric literal starts with a target char (``f`` for text color, ``b``
    for background) followed by either a parenthesized list of decimal values
    or a bracketed hexadecimal string. One value selects a color from 256-color
    palette, three values define an RGB color.

    :param keyword: color name (e.g. ``RedFg``) or parametric literal.
    :return:        Tuple of 1, 3 or 5 codes, or *None* if ``keyword`` is
                    invalid.
    """
    if (code := COLOR_CODES.get(keyword)) is not None:
        return (code,)

    if len(keyword) < 3 or (target_code := _TARGET_CODES.get(keyword[0])) is None:
        return None

    left, right, inner = keyword[1], keyword[-1], keyword[2:-1]
    if (left, right) == ("(", ")"):
        values = _parse_decimal_list(inner)
    elif (left, right) == ("[", "]"):
        values = _parse_hex_string(inner)
    else:
        return None

    if values is None:
        return None
    if len(values) == 1:
        return (target_code, IntCodes.EXTENDED_MODE_256, *values)
    return (target_code, IntCodes.EXTENDED_MODE_RGB, *values)


def resolve_directive(delimiter: str, keyword: str) -> Optional[Tuple[int, ...]]:
    """
    Dispatch ``keyword`` to the table selected by the directive ``delimiter``.
    """
    if delimiter == Delimiter.ADD_STYLE:
        code = resolve_add_style(keyword)
    elif delimiter == Delimiter.REMOVE_STYLE:
        code = resolve_remove_style(keyword)
    elif delimiter == Delimiter.COLOR:
        return resolve_color(keyword)
    else:
        raise ValueError(f"Not a directive delimiter: {delimiter!r}")

    if code is None:
        return None
    return (code,)


def _parse_decimal_list(s: str) -> Optional[List[int]]:
    parts = s.split(",")
    if len(parts) not in (1, 3):
        return None

    values = []
    for part in parts:
        if not _DECIMAL_REGEX.fullmatch(part):
            return None
        value = int(part)
        if value > 0xFF:
            return None
        values.append(value)
    return values


def _parse_hex_string(s: str) -> Optional[List[int]]:
    if len(s) not in (2, 6) or not _HEX_REGEX.fullmatch(s):
        return None
    return [int(s[i:i + 2], 16) for i in range(0, len(s), 2)]
