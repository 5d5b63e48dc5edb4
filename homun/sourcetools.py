"""Source-text transformations applied when concatenating generated code."""

from __future__ import annotations

from collections import deque

_CFG_TEST = "#[cfg(test)]"
_MOD_TESTS = "mod tests"


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def _brace_delta(line: str) -> int:
    return line.count("{") - line.count("}")


def strip_test_modules(src: str) -> str:
    """Remove every ``#[cfg(test)]`` attribute directly followed by a ``mod tests`` block.

    The block's end is found by counting braces. Every kept line is
    terminated with a newline; a block left unclosed swallows the rest
    of the text.
    """
    pending = deque(_lines(src))
    out: list[str] = []
    while pending:
        line = pending.popleft()
        if (
            line.strip() == _CFG_TEST
            and pending
            and pending[0].strip().startswith(_MOD_TESTS)
        ):
            depth = _brace_delta(pending.popleft())
            while depth > 0 and pending:
                depth += _brace_delta(pending.popleft())
            continue
        out.append(line + "\n")
    return "".join(out)