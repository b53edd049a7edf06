"""Built-in constraint library and its default message catalogue.

Every predicate takes the value under validation first, followed by the
rule options.  Options written in shorthand always arrive as strings, so
numeric options are coerced here rather than by the caller.  A value that
cannot be coerced fails the check; a malformed option raises.
"""
from __future__ import annotations

import ipaddress
import operator
import re
import uuid
from collections.abc import Callable, Mapping, Sized
from typing import Any
from urllib.parse import urlparse

from fieldrules.constraints.provider import ConstraintProvider, providers
from fieldrules.schema.types import Constraint

_EMAIL = re.compile(r"[^@\s]+@[^@\s]+\.[A-Za-z0-9-]{2,}")

_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "eq": operator.eq,
    "!=": operator.ne,
    "ne": operator.ne,
    ">": operator.gt,
    "gt": operator.gt,
    ">=": operator.ge,
    "gte": operator.ge,
    "<": operator.lt,
    "lt": operator.lt,
    "<=": operator.le,
    "lte": operator.le,
}

_TRUTHY_STRINGS = {"1", "true", "on", "yes"}
_FALSY_STRINGS = {"0", "false", "off", "no"}


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def alpha(value: Any) -> bool:
    return isinstance(value, str) and value.isalpha()


def alpha_numeric(value: Any) -> bool:
    return isinstance(value, str) and value.isalnum()


def between(value: Any, minimum: Any, maximum: Any) -> bool:
    """Length of ``str(value)`` lies within ``minimum`` and ``maximum`` inclusive."""
    length = len(str(value))
    return int(minimum) <= length <= int(maximum)


def boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    if isinstance(value, str):
        return value.lower() in _TRUTHY_STRINGS | _FALSY_STRINGS
    return False


def comparison(value: Any, other: Any, mode: str = "==") -> bool:
    """Compare ``value`` numerically against ``other`` using ``mode``.

    ``mode`` is one of ``== != > >= < <=`` or ``eq ne gt gte lt lte``.
    """
    compare = _OPERATORS.get(mode)
    left, right = _to_number(value), _to_number(other)
    if compare is None or left is None or right is None:
        return False
    return compare(left, right)


def decimal(value: Any, places: Any = 2) -> bool:
    """Value is a decimal number with exactly ``places`` fractional digits."""
    pattern = rf"[-+]?\d*\.\d{{{int(places)}}}"
    return re.fullmatch(pattern, str(value)) is not None


def email(value: Any) -> bool:
    return isinstance(value, str) and _EMAIL.fullmatch(value) is not None


def equals(value: Any, other: Any) -> bool:
    return str(value) == str(other)


def in_list(value: Any, *choices: Any) -> bool:
    """Value is one of ``choices``; a single list option is expanded."""
    if len(choices) == 1 and isinstance(choices[0], (list, tuple)):
        choices = tuple(choices[0])
    return str(value) in {str(choice) for choice in choices}


def ip(value: Any) -> bool:
    try:
        ipaddress.ip_address(str(value))
    except ValueError:
        return False
    return True


def max_length(value: Any, length: Any) -> bool:
    return len(str(value)) <= int(length)


def min_length(value: Any, length: Any) -> bool:
    return len(str(value)) >= int(length)


def maximum(value: Any, limit: Any) -> bool:
    number, bound = _to_number(value), _to_number(limit)
    return number is not None and bound is not None and number <= bound


def minimum(value: Any, limit: Any) -> bool:
    number, bound = _to_number(value), _to_number(limit)
    return number is not None and bound is not None and number >= bound


def not_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, Sized):
        return len(value) > 0
    return True


def numeric(value: Any) -> bool:
    return _to_number(value) is not None


def regex(value: Any, pattern: str) -> bool:
    return re.search(pattern, str(value)) is not None


def url(value: Any) -> bool:
    parsed = urlparse(str(value))
    return parsed.scheme in ("http", "https", "ftp") and bool(parsed.netloc)


def is_uuid(value: Any) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


DEFAULT_MESSAGES: dict[str, str] = {
    "alpha": "{title} may only contain alphabetical characters",
    "alphaNumeric": "{title} may only contain alpha-numeric characters",
    "between": "{title} must be between {0} and {1} characters in length",
    "boolean": "{title} must be a boolean",
    "comparison": "{title} must be {1} {0}",
    "decimal": "{title} must be a number with {0} decimal place(s)",
    "email": "{title} must be a valid email address",
    "equals": "{title} must match {0}",
    "inList": "{title} must be one of the following: {options}",
    "ip": "{title} must be a valid IP address",
    "maxLength": "{title} must be {0} or less characters in length",
    "minLength": "{title} must be {0} or more characters in length",
    "max": "{title} must be at most {0}",
    "min": "{title} must be at least {0}",
    "notEmpty": "{title} is required",
    "numeric": "{title} must be numeric",
    "regex": "{title} has an invalid format",
    "url": "{title} must be a valid URL",
    "uuid": "{title} must be a valid UUID",
}


@providers.register("builtin")
class BuiltinConstraints(ConstraintProvider):
    """The standard constraint set shipped with fieldrules."""

    def get_constraints(self) -> Mapping[str, Constraint]:
        return {
            "alpha": alpha,
            "alphaNumeric": alpha_numeric,
            "between": between,
            "boolean": boolean,
            "comparison": comparison,
            "decimal": decimal,
            "email": email,
            "equals": equals,
            "inList": in_list,
            "ip": ip,
            "maxLength": max_length,
            "minLength": min_length,
            "max": maximum,
            "min": minimum,
            "notEmpty": not_empty,
            "numeric": numeric,
            "regex": regex,
            "url": url,
            "uuid": is_uuid,
        }
