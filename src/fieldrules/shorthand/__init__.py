"""Shorthand rule syntax: the string parser and the descriptor compiler."""
from __future__ import annotations

from fieldrules.shorthand.compiler import (
    FieldDescriptor,
    compile_shorthand,
    normalize_descriptor,
)
from fieldrules.shorthand.parser import split_shorthand

__all__ = [
    "FieldDescriptor",
    "compile_shorthand",
    "normalize_descriptor",
    "split_shorthand",
]
