"""Token primitives for HepMC2 record lines.

Every field of a record is separated from the previous one by spaces or
tabs. A :class:`LineCursor` consumes fields from left to right and raises a
:class:`~hepmc2io.errors.ParseError` subclass as soon as the line does not
have the expected shape.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from ..errors import FloatConversionError, GrammarError, IntConversionError

_WS = re.compile(r"[ \t]+")
_END = r"(?=[ \t]|$)"
_INT = re.compile(r"-?[0-9]+" + _END)
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)" + _END,
    re.IGNORECASE,
)
_TOKEN = re.compile(r"[^ \t]+")
_STRING = re.compile(r'"([^"]*)"')

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class LineCursor:
    """Left-to-right reader over the fields of one record line.

    ``start`` skips the record prefix, so a cursor over ``"C 1.5 0.2"``
    starts right after the ``C``.
    """

    def __init__(self, line: str, start: int = 1):
        self.line = line.rstrip("\r\n")
        self.pos = start

    def _found(self) -> str:
        m = _TOKEN.match(self.line, self.pos)
        return repr(m.group(0)) if m else "end of line"

    def _separator(self, expected: str) -> None:
        m = _WS.match(self.line, self.pos)
        if m is None:
            if self.pos >= len(self.line):
                raise GrammarError(f"missing field, expected {expected}")
            raise GrammarError(f"expected whitespace before {expected}, found {self._found()}")
        self.pos = m.end()
        if self.pos >= len(self.line):
            raise GrammarError(f"missing field, expected {expected}")

    def _match(self, pattern: re.Pattern, expected: str) -> re.Match:
        self._separator(expected)
        m = pattern.match(self.line, self.pos)
        if m is None:
            raise GrammarError(f"expected {expected}, found {self._found()}")
        self.pos = m.end()
        return m

    # -- scalars -------------------------------------------------------------

    def int(self) -> int:
        text = self._match(_INT, "integer").group(0)
        value = int(text)
        if not INT32_MIN <= value <= INT32_MAX:
            raise IntConversionError(f"{text} does not fit in a 32-bit integer")
        return value

    def count(self) -> int:
        """A non-negative integer announcing the length of a list."""
        text = self._match(_INT, "count").group(0)
        value = int(text)
        if value < 0:
            raise IntConversionError(f"invalid count {text}")
        if value > INT32_MAX:
            raise IntConversionError(f"count {text} is too large")
        return value

    def float(self) -> float:
        text = self._match(_FLOAT, "floating-point number").group(0)
        value = float(text)
        if math.isinf(value) and "inf" not in text.lower():
            raise FloatConversionError(f"{text} is out of range")
        return value

    def token(self) -> str:
        return self._match(_TOKEN, "token").group(0)

    def string(self) -> str:
        return self._match(_STRING, "quoted string").group(1)

    def optional_int(self) -> Optional[int]:
        if self.at_end():
            return None
        return self.int()

    # -- repeated fields -----------------------------------------------------

    def ints(self, n: int) -> list[int]:
        return [self.int() for _ in range(n)]

    def floats(self, n: int) -> list[float]:
        return [self.float() for _ in range(n)]

    def strings(self, n: int) -> list[str]:
        return [self.string() for _ in range(n)]

    def int_list(self) -> list[int]:
        return self.ints(self.count())

    def float_list(self) -> list[float]:
        return self.floats(self.count())

    def string_list(self) -> list[str]:
        return self.strings(self.count())

    # -- end of line ---------------------------------------------------------

    def at_end(self) -> bool:
        return not self.line[self.pos:].strip(" \t")

    def end(self) -> None:
        if not self.at_end():
            m = _WS.match(self.line, self.pos)
            if m is not None:
                self.pos = m.end()
            raise GrammarError(f"unexpected trailing data {self._found()}")
