"""Immutable cursor state for the character-walking lexer, and literal parsing."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass, replace

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class LexState:
    """Position, line/column and error of a lexer walking over ``source``.

    Every mutator returns a new state; the original is left untouched.
    """

    source: str
    i: int = 0
    line: int = 1
    col: int = 1
    err: str = ""

    @classmethod
    def from_source(cls, source: str) -> LexState:
        """Start lexing ``source`` at index 0, line 1, column 1, with no error."""
        return cls(source)

    def __len__(self) -> int:
        return len(self.source)

    @property
    def pos(self) -> tuple[int, int]:
        """The current ``(line, col)``."""
        return self.line, self.col

    @property
    def has_error(self) -> bool:
        """True once an error has been recorded."""
        return bool(self.err)

    def cur(self) -> str:
        """The current character, or '' at or past the end."""
        return self.peek(0)

    def peek(self, offset: int) -> str:
        """The character ``offset`` places from the current one, or '' when out of range."""
        idx = self.i + offset
        if 0 <= idx < len(self.source):
            return self.source[idx]
        return ""

    def advance_col(self, n: int) -> LexState:
        """Move ``n`` characters forward on the same line."""
        return replace(self, i=self.i + n, col=self.col + n)

    def advance_newline(self) -> LexState:
        """Step over a newline: next index, next line, column 1."""
        return replace(self, i=self.i + 1, line=self.line + 1, col=1)

    def advance_i_only(self, n: int) -> LexState:
        """Move the index ``n`` forward without touching line or column."""
        return replace(self, i=self.i + n)

    def with_line_col(self, line: int, col: int) -> LexState:
        """Set line and column directly."""
        return replace(self, line=line, col=col)

    def with_error(self, err: str) -> LexState:
        """Record ``err`` as the lexing error."""
        return replace(self, err=err)

    def substr(self, start: int, end: int) -> str:
        """Characters ``start`` up to ``end`` of the source.

        Raises IndexError if the range is reversed or runs past the source.
        """
        if not 0 <= start <= end <= len(self.source):
            raise IndexError(
                f"range {start}..{end} out of bounds for length {len(self.source)}"
            )
        return self.source[start:end]

    def should_continue(self) -> bool:
        """True while characters remain and no error has been recorded."""
        return self.not_at_end() and not self.err

    def not_at_end(self) -> bool:
        """True while the index is inside the source, regardless of errors."""
        return 0 <= self.i < len(self.source)


def parse_int_literal(s: str) -> int:
    """Parse ``s`` as a 32-bit signed integer.

    Raises ValueError if ``s`` is not an optionally signed run of ASCII
    digits or does not fit in 32 bits.
    """
    if not _INT_RE.fullmatch(s):
        raise ValueError(f"invalid integer literal: {s!r}")
    value = int(s)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"integer literal out of range: {s!r}")
    return value


def _to_single(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_float_literal(s: str) -> float:
    """Parse ``s`` as a single-precision float.

    Raises ValueError if ``s`` is not a decimal, exponent, ``inf`` or
    ``nan`` literal. Values too large for single precision become infinite.
    """
    if not _FLOAT_RE.fullmatch(s):
        raise ValueError(f"invalid float literal: {s!r}")
    return _to_single(float(s))