"""Runtime helpers and compiler support utilities for the Homun language."""

__version__ = "0.88.0"

__all__ = [
    "attributes",
    "chars",
    "codegen_support",
    "containers",
    "embedding",
    "lexstate",
    "paths",
    "sequences",
    "sourcetools",
    "strings",
]