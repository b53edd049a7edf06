"""Build a validator from a declarative map of shorthand field descriptors.

Each entry of the field map may take one of three shapes::

    {
        "username": "required|alphaNumeric|minLength:3",
        "email": ["required", "email:Please enter a valid email"],
        "age": {"title": "Your age", "rules": "min:18"},
    }

Every shape is lowered to a :class:`FieldDescriptor` before compiling.
Entries of any other shape are skipped.  A descriptor whose ``rules`` is
neither a string, a list nor a tuple registers the field but adds no rules.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from fieldrules.shorthand.parser import split_shorthand

if TYPE_CHECKING:
    from fieldrules.validator.validator import Validator

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="Validator")


@dataclass(frozen=True)
class FieldDescriptor:
    """Canonical form of one field entry.

    Parameters
    ----------
    title:
        Display title, or ``None`` to fall back to the field key.
    rules:
        A list of shorthand strings, a single ``|``-delimited string, or
        any other value (which compiles to no rules).
    """

    title: Any
    rules: Any


def normalize_descriptor(field: str, descriptor: Any) -> FieldDescriptor | None:
    """Lower a polymorphic field entry to a :class:`FieldDescriptor`.

    Returns ``None`` for shapes that should be skipped.
    """
    if isinstance(descriptor, str):
        return FieldDescriptor(title=None, rules=descriptor)
    if isinstance(descriptor, (list, tuple)):
        return FieldDescriptor(title=None, rules=list(descriptor))
    if isinstance(descriptor, Mapping):
        rules = descriptor.get("rules")
        if isinstance(rules, tuple):
            rules = list(rules)
        return FieldDescriptor(title=descriptor.get("title"), rules=rules)

    logger.debug(
        "Skipping field %r: unsupported descriptor type %s",
        field,
        type(descriptor).__name__,
    )
    return None


def compile_shorthand(
    data: Mapping[str, Any] | None = None,
    fields: Mapping[str, Any] | None = None,
    factory: Callable[[Mapping[str, Any]], V] | None = None,
) -> V:
    """Create a validator and populate it from shorthand descriptors.

    Parameters
    ----------
    data:
        Initial data set passed to ``factory``.
    fields:
        Field key to descriptor (string, list of strings, or mapping with
        ``title`` and ``rules``).  The title falls back to the field key only
        when it is missing or ``None``; any other value, including an empty
        string, is kept and passed through ``str``.
    factory:
        Callable that builds the validator from ``data``.  Defaults to
        :class:`fieldrules.validator.Validator`.

    Returns
    -------
    Validator
        The populated validator returned by ``factory``.
    """
    if factory is None:
        from fieldrules.validator.validator import Validator

        factory = Validator  # type: ignore[assignment]

    validator = factory(dict(data or {}))

    for field, entry in (fields or {}).items():
        descriptor = normalize_descriptor(field, entry)
        if descriptor is None:
            continue

        title = descriptor.title if descriptor.title is not None else field
        rules = descriptor.rules
        if isinstance(rules, str):
            rules = rules.split("|")

        validator.add_field(field, str(title))

        if isinstance(rules, list):
            for shorthand in rules:
                parsed = split_shorthand(shorthand)
                validator.add_rule(field, parsed.rule, parsed.message, parsed.options)
        else:
            logger.debug("Field %r has no usable rules; none were added", field)

    return validator
