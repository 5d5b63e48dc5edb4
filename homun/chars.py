"""Character classification helpers that look at the first character only."""

# Characters Python treats as whitespace but the Unicode White_Space property does not.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _first(c: str) -> str | None:
    return c[0] if c else None


def is_alpha(c: str) -> bool:
    """True if ``c`` starts with an alphabetic character."""
    ch = _first(c)
    return ch is not None and ch.isalpha()


def is_digit(c: str) -> bool:
    """True if ``c`` starts with an ASCII decimal digit."""
    ch = _first(c)
    return ch is not None and "0" <= ch <= "9"


def is_alnum(c: str) -> bool:
    """True if ``c`` starts with an alphanumeric character or an underscore."""
    ch = _first(c)
    return ch is not None and (ch.isalnum() or ch == "_")


def is_whitespace(c: str) -> bool:
    """True if ``c`` starts with a Unicode whitespace character."""
    ch = _first(c)
    return ch is not None and ch.isspace() and ch not in _NOT_WHITESPACE


def is_newline(c: str) -> bool:
    """True if ``c`` is exactly a single newline."""
    return c == "\n"


def is_upper(c: str) -> bool:
    """True if ``c`` starts with an uppercase character."""
    ch = _first(c)
    return ch is not None and ch.isupper()