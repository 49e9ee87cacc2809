# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__package__)
logger.addHandler(logging.NullHandler())

### catching library logs "from the outside":
# logger = logging.getLogger('sgrfmt')
# handler = logging.StreamHandler()
# fmt = '[%(levelname)5.5s][%(name)s.%(module)s] %(message)s'
# handler.setFormatter(logging.Formatter(fmt))
# logger.addHandler(handler)
# logger.setLevel(logging.WARNING)
########


class ExtendedEnum(enum.Enum):
    @classmethod
    def list(cls):
        return list(map(lambda c: c.value, cls))

    @classmethod
    def dict(cls):
        return dict(map(lambda c: (c, c.value), cls))


class Delimiter(str, ExtendedEnum):
    """
    Characters with special meaning inside of a styling parameter.
    """

    ADD_STYLE = "+"
    """ """
    REMOVE_STYLE = "-"
    """ """
    COLOR = "#"
    """ """
    AFTER_VALUE = "&"
    """ Directives past this point apply after the embedded value. """
    CLOSE = "}"
    """ """

    @property
    def is_directive(self) -> bool:
        return self in (Delimiter.ADD_STYLE, Delimiter.REMOVE_STYLE, Delimiter.COLOR)


DIRECTIVE_CHARS = frozenset(d.value for d in Delimiter if d.is_directive)
DELIMITER_CHARS = frozenset(Delimiter.list())


class SgrError(Exception):
    pass


class LogicError(SgrError):
    pass


class ParseError(SgrError, ValueError):
    """
    Unrecoverable failure; the whole text being parsed is invalid.
    """

    def __init__(self, msg: str, offset: int = None):
        self.offset = offset
        if offset is not None:
            msg += f" (at offset {offset})"
        super().__init__(msg)


class InvalidEscapeError(ParseError):
    pass


class InvalidKeywordError(ParseError):
    def __init__(self, keyword: str, delimiter: str, offset: int = None):
        self.keyword = keyword
        self.delimiter = delimiter
        super().__init__(f"Invalid keyword: {delimiter}{keyword!r}", offset)


class InvalidParamError(ParseError):
    pass


class InvalidLiteralError(ParseError):
    pass


class ArgumentError(Exception):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"
