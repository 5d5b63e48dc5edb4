"""String helpers: repetition, padding, slicing and lenient number parsing."""

import re

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def str_repeat(s: str, n: int) -> str:
    """Repeat ``s`` ``n`` times; empty when ``n`` <= 0."""
    return s * n if n > 0 else ""


def pad_center(s: str, width: int) -> str:
    """Center ``s`` in ``width`` columns; the odd extra space goes on the right."""
    if width <= 0 or len(s) >= width:
        return s
    total = width - len(s)
    left = total // 2
    return " " * left + s + " " * (total - left)


def _padding(length: int, width: int, fill: str) -> str:
    if width < 0:
        raise ValueError(f"width must not be negative: {width}")
    needed = width - length
    if needed <= 0:
        return ""
    if not fill:
        raise ValueError("fill must not be empty")
    return (fill * (needed // len(fill) + 1))[:needed]


def pad_left(s: str, width: int, fill: str) -> str:
    """Pad ``s`` on the left with repetitions of ``fill`` up to ``width``."""
    return _padding(len(s), width, fill) + s


def pad_right(s: str, width: int, fill: str) -> str:
    """Pad ``s`` on the right with repetitions of ``fill`` up to ``width``."""
    return s + _padding(len(s), width, fill)


def _clamp_index(i: int, length: int) -> int:
    return max(length + i, 0) if i < 0 else min(i, length)


def substr(s: str, start: int, end: int) -> str:
    """Return ``s[start:end]`` with negative indices counted from the end and clamped."""
    length = len(s)
    return s[_clamp_index(start, length):_clamp_index(end, length)]


def char_at(s: str, i: int) -> str:
    """Return the character at ``i`` (negative from the end, clamped to 0), or ''."""
    idx = max(len(s) + i, 0) if i < 0 else i
    return s[idx] if idx < len(s) else ""


def find(s: str, sub: str) -> int:
    """Index of the first occurrence of ``sub`` in ``s``, or -1."""
    return s.find(sub)


def parse_int(s: str) -> int:
    """Parse a 32-bit signed integer after trimming; 0 when that fails."""
    text = s.strip()
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else 0


def parse_float(s: str) -> float:
    """Parse a float after trimming; 0.0 when that fails."""
    text = s.strip()
    if not _FLOAT_RE.fullmatch(text):
        return 0.0
    return float(text)