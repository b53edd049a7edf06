"""fieldrules: schema-driven field validation with shorthand rule strings.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import fieldrules

    validator = fieldrules.StandardValidator.from_shorthand(
        {"username": "ab", "email": "not-an-email"},
        {
            "username": {"title": "Username", "rules": "notEmpty|minLength:3"},
            "email": "email::{title} is not a valid address",
        },
    )

    validator.validate()
    validator.errors
    # {'username': 'Username must be 3 or more characters in length',
    #  'email': 'email is not a valid address'}

    fieldrules.split_shorthand("between:1,10:Value out of range")
    # Rule(rule='between', message='Value out of range', options=('1', '10'))

    fieldrules.__version__
    '0.1.0'
"""
from __future__ import annotations

from fieldrules.constraints import BuiltinConstraints, ConstraintProvider, providers
from fieldrules.errors import (
    FieldRulesError,
    MissingConstraintError,
    MissingMessageError,
    UnknownFieldError,
)
from fieldrules.formatter import format_message, insert
from fieldrules.schema import Constraint, Rule, SchemaRegistry
from fieldrules.shorthand import compile_shorthand, split_shorthand
from fieldrules.validator import StandardValidator, Validator, validate

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    "BuiltinConstraints",
    "Constraint",
    "ConstraintProvider",
    "FieldRulesError",
    "MissingConstraintError",
    "MissingMessageError",
    "Rule",
    "SchemaRegistry",
    "StandardValidator",
    "UnknownFieldError",
    "Validator",
    "compile_shorthand",
    "format_message",
    "insert",
    "providers",
    "split_shorthand",
    "validate",
]
