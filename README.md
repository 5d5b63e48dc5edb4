# homun

Runtime helpers and compiler support utilities for the Homun language
toolchain. The package covers character classification, string and
sequence helpers, containers, path and file helpers, and the small pieces
of state that the lexer, parser and code generator share.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `homun.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_whitespace`,
  `is_newline`, `is_upper`. Each one looks only at the first character
  and returns False for an empty string. `is_alnum` also accepts `_`.
  `is_newline` is true only for exactly `"\n"`.
- `homun.strings`:
  - `str_repeat` returns an empty string when the count is 0 or less.
  - `pad_center` puts the odd extra space on the right.
  - `pad_left` and `pad_right` pad with a fill string.
  - `substr` and `char_at` count negative indices from the end and clamp them.
  - `find` returns -1 when the text is missing.
  - `parse_int` and `parse_float` trim their input and return 0 or 0.0 when parsing fails. `parse_int` also returns 0 for values outside 32 bits.
- `homun.sequences`:
  - `index` accepts negative positions and takes keys for mappings.
  - `slice_of` slices with clamped bounds and handles negative steps.
  - `concat` and `contains` work on the collection types the module accepts.
  - `clamp` limits a value to a range.
- `homun.containers`:
  - `PriorityQueue` is a min-heap of string items keyed by an integer priority. It has `push`, `pop` (returns `None` when empty), `is_empty` and `len()`.
  - `dict_from_pairs` keeps the last value when a key repeats.
  - `dict_zip` ignores surplus items.
  - `set_remove` returns whether the item was present.
  - Also: `unique`, `index_of` (-1 when missing), `remove_at`, `flatten`, `count_if`.
- `homun.paths`:
  - Path helpers: `path_join`, `path_parent`, `path_canonicalize`, `path_strip_prefix`.
  - File helpers: `fs_read`, `fs_write`, `fs_exists`, `fs_is_dir`.
  - Read, write and canonicalize failures raise `OSError`.
- `homun.attributes`: `capture_attr_body` captures the body of an `@`
  attribute from source text. It stops at the end of the line, or once
  every opened bracket has closed, and returns the captured text together
  with the position where scanning stopped.
- `homun.codegen_support`:
  - Functions: `ind`, `generics_str`, `is_homun_macro`, `is_upper_first`.
  - `SignatureRegistry` holds per-function mutability flags and default arguments, and the mutable-reference parameters of the current function.
  - `CodegenState` records self-recursive types, variant field types and thread-local bindings.
- `homun.lexstate`:
  - `LexState` is an immutable lexer cursor, created with `LexState.from_source`. Its mutators return new states.
  - `parse_int_literal` parses a 32-bit integer and raises `ValueError` on bad input.
  - `parse_float_literal` parses a single-precision float and raises `ValueError` on bad input.
- `homun.sourcetools`: `strip_test_modules` removes `#[cfg(test)]` attributes
  that are directly followed by a `mod tests` block, together with that
  block.
- `homun.embedding`: `strip_collections_imports` drops standalone
  `use std::collections::HashMap;` and `use std::collections::HashSet;`
  lines.

## Example

```python
from homun.containers import PriorityQueue
from homun.lexstate import LexState
from homun.strings import pad_center

queue = PriorityQueue()
queue.push(10, "A")
queue.push(3, "D")
assert queue.pop() == (3, "D")

state = LexState.from_source("ab\ncd").advance_col(2).advance_newline()
assert state.cur() == "c" and state.pos == (2, 1)

assert pad_center("hi", 7) == "  hi   "
```

## What this package does not do

This is a library of helpers. It does not contain a compiler, and it
installs no command. It does not tokenise or parse whole Homun programs
or generate code from them. It does not resolve imports between source
files, and it has no regular-expression matching helpers.