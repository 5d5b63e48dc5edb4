"""Code-generation support: indentation, generic clauses, macro names and registries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

HOMUN_MACROS: frozenset[str] = frozenset(
    {"range", "len", "filter", "map", "reduce", "slice", "dict", "set"}
)
"""Builtins emitted as Rust macros (``name!(...)``) rather than function calls."""

INDENT_WIDTH = 4


def ind(n: int) -> str:
    """Return the indentation for nesting level ``n`` (four spaces per level)."""
    if n < 0:
        raise ValueError(f"indentation level must not be negative: {n}")
    return " " * (n * INDENT_WIDTH)


def generics_str(generics: Iterable[str]) -> str:
    """Format a generic parameter clause: ``"<T: Clone, U: Clone>"``, or '' when empty."""
    items = list(generics)
    return f"<{', '.join(items)}>" if items else ""


def is_homun_macro(name: str) -> bool:
    """True if ``name`` is a builtin that is emitted as a macro."""
    return name in HOMUN_MACROS


def is_upper_first(s: str) -> bool:
    """True if ``s`` starts with an uppercase character."""
    return bool(s) and s[0].isupper()


class SignatureRegistry:
    """Function-signature facts gathered while generating code.

    Records which parameters of each function are mutable, each function's
    default argument expressions, and the mutable-reference parameters of
    the function currently being generated.
    """

    def __init__(self) -> None:
        self._mut_params: dict[str, list[bool]] = {}
        self._defaults: dict[str, list[Any]] = {}
        self._current_mut_refs: set[str] = set()

    def set_mut_params(self, name: str, flags: Sequence[bool]) -> None:
        """Record per-parameter mutability flags for function ``name``."""
        self._mut_params[name] = list(flags)

    def set_defaults(self, name: str, defaults: Sequence[Any]) -> None:
        """Record per-parameter default expressions (None where absent) for ``name``."""
        self._defaults[name] = list(defaults)

    def clear_current_mut_refs(self) -> None:
        """Forget the mutable-reference parameters of the current function."""
        self._current_mut_refs.clear()

    def add_current_mut_ref(self, name: str) -> None:
        """Mark ``name`` as a mutable-reference parameter of the current function."""
        self._current_mut_refs.add(name)

    def is_mut_ref_param(self, name: str) -> bool:
        """True if ``name`` is a mutable-reference parameter of the current function."""
        return name in self._current_mut_refs

    def is_param_mutable_in_call(self, fn_name: str, arg_idx: int) -> bool:
        """True if argument ``arg_idx`` of ``fn_name`` is a mutable parameter.

        Unknown functions and out-of-range positions give False.
        """
        flags = self._mut_params.get(fn_name)
        if flags is None or not 0 <= arg_idx < len(flags):
            return False
        return flags[arg_idx]

    def defaults_for(self, fn_name: str) -> list[Any]:
        """Default expressions recorded for ``fn_name``, or an empty list."""
        return list(self._defaults.get(fn_name, ()))


class CodegenState:
    """Registries consulted while emitting types and bindings.

    Tracks self-recursive types (whose fields need boxing), the field
    types of enum variants keyed by ``Enum.Variant``, and names declared
    as thread-local bindings.
    """

    def __init__(self) -> None:
        self._recursive_types: set[str] = set()
        self._variant_fields: dict[str, list[Any]] = {}
        self._thread_local_vars: set[str] = set()

    def register_recursive_type(self, name: str) -> None:
        """Mark ``name`` as a self-recursive type."""
        self._recursive_types.add(name)

    def clear_recursive_types(self) -> None:
        """Forget all self-recursive types."""
        self._recursive_types.clear()

    def is_self_recursive_type(self, name: str) -> bool:
        """True if ``name`` is registered as self-recursive."""
        return name in self._recursive_types

    def register_variant_field_types(self, qual: str, fields: Sequence[Any]) -> None:
        """Record the field types of variant ``qual`` (``Enum.Variant``)."""
        self._variant_fields[qual] = list(fields)

    def variant_field_types(self, qual: str) -> list[Any]:
        """Field types recorded for ``qual``, or an empty list if unknown."""
        return list(self._variant_fields.get(qual, ()))

    def variant_field_types_known(self, qual: str) -> bool:
        """True if field types were recorded for ``qual``."""
        return qual in self._variant_fields

    def register_thread_local_var(self, name: str) -> None:
        """Mark ``name`` as a thread-local binding."""
        self._thread_local_vars.add(name)

    def is_thread_local_var(self, name: str) -> bool:
        """True if ``name`` was declared as a thread-local binding."""
        return name in self._thread_local_vars

    def clear_thread_local_vars(self) -> None:
        """Forget all thread-local bindings."""
        self._thread_local_vars.clear()