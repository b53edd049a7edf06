"""Core value types shared by the registry, compiler, formatter and validator."""
from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

Constraint = Callable[..., Any]
"""A predicate called as ``constraint(value, *options)``; falsy means failure."""

OptionList = tuple[Any, ...]


@dataclass(frozen=True)
class Rule:
    """A single rule attached to a field.

    Parameters
    ----------
    rule:
        The rule name, also used to look up the constraint and the
        default message template.
    message:
        An explicit message template.  Empty means "use the default
        registered for ``rule``".
    options:
        Positional arguments passed to the constraint after the value,
        and exposed to the template as ``{0}``, ``{1}``, ...
    """

    rule: str
    message: str = ""
    options: OptionList = field(default=())


def to_options(options: Any) -> OptionList:
    """Normalize user-supplied rule options into a tuple."""
    if options is None:
        return ()
    if isinstance(options, (list, tuple)):
        return tuple(options)
    return (options,)


class ReadOnlyRules(Mapping[str, Mapping[str, Rule]]):
    """Read-only view over the nested ``field -> rule name -> Rule`` table."""

    def __init__(self, rules: dict[str, dict[str, Rule]]) -> None:
        self._rules = rules

    def __getitem__(self, key: str) -> Mapping[str, Rule]:
        return MappingProxyType(self._rules[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"ReadOnlyRules({self._rules!r})"
