"""Capturing the raw text of an attribute written after ``@`` or ``@!``."""

from __future__ import annotations

_OPENERS = frozenset("([{")
_CLOSERS = frozenset(")]}")


def capture_attr_body(src: str, start: int) -> tuple[str, int]:
    """Capture an attribute body from ``src`` beginning at index ``start``.

    Capture stops at the end of a line when no bracket is open, or once
    every opened ``()``, ``[]`` or ``{}`` has closed. Inside ``"..."``
    brackets are not counted and ``\\"`` does not end the string. A
    closing bracket with nothing open ends the capture without being
    taken.

    Returns the captured text with trailing whitespace removed, and the
    index where scanning stopped. When it stopped at a newline, the index
    points at that newline; when it stopped because the brackets closed,
    a newline that follows directly is consumed.
    """
    length = len(src)
    pos = start
    depth = 0
    in_string = False
    buf: list[str] = []

    while pos < length:
        ch = src[pos]

        if in_string:
            buf.append(ch)
            if ch == "\\" and pos + 1 < length:
                pos += 1
                buf.append(src[pos])
            elif ch == '"':
                in_string = False
            pos += 1
            continue

        if ch == '"':
            in_string = True
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            if depth == 0:
                break
            depth -= 1
            buf.append(ch)
            pos += 1
            if depth == 0:
                if pos < length and src[pos] == "\n":
                    pos += 1
                break
            continue
        elif ch == "\n" and depth == 0:
            break

        buf.append(ch)
        pos += 1

    return "".join(buf).rstrip(), pos