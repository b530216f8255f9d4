"""Errors raised while reading HepMC2 records."""

from __future__ import annotations

import enum
from typing import Optional


class ErrorKind(enum.Enum):
    IO = "io"
    PARSE = "parse"
    CONVERT_INT = "convert_int"
    CONVERT_FLOAT = "convert_float"
    BAD_UNIT = "bad_unit"
    BAD_PREFIX = "bad_prefix"
    NO_VERTEX = "no_vertex"


class ParseError(ValueError):
    """Base class for failures while parsing a single record."""

    kind = ErrorKind.PARSE
    label = "Parsing error"

    def __str__(self) -> str:
        detail = super().__str__()
        return f"{self.label}: {detail}" if detail else self.label


class ReadIOError(ParseError):
    kind = ErrorKind.IO
    label = "I/O error"


class GrammarError(ParseError):
    kind = ErrorKind.PARSE
    label = "Parsing error"


class IntConversionError(ParseError):
    kind = ErrorKind.CONVERT_INT
    label = "Integer conversion error"


class FloatConversionError(ParseError):
    kind = ErrorKind.CONVERT_FLOAT
    label = "Float conversion error"


class UnitError(ParseError):
    kind = ErrorKind.BAD_UNIT
    label = "Unknown unit"


class BadPrefixError(ParseError):
    kind = ErrorKind.BAD_PREFIX
    label = "Unrecognized prefix"


class NoVertexError(ParseError):
    kind = ErrorKind.NO_VERTEX
    label = "Tried to add particle without vertex"


class LineParseError(Exception):
    """A ParseError tied to the raw line and 1-based line number it came from.

    ``line`` is the text exactly as read, line terminator included. The
    original ParseError is available as ``error`` and as ``__cause__``.
    """

    def __init__(self, error: ParseError, line: str, line_nr: int):
        super().__init__(error, line, line_nr)
        self.error = error
        self.line = line
        self.line_nr = line_nr

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    def __str__(self) -> str:
        line = self.line.rstrip("\r\n")
        return f"{self.error}\n in line {self.line_nr}:\n{line}"

    @classmethod
    def wrap(cls, error: ParseError, line: Optional[str], line_nr: int) -> "LineParseError":
        exc = cls(error, line or "", line_nr)
        exc.__cause__ = error
        return exc
