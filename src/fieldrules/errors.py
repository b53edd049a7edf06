"""Configuration error types for fieldrules.

These signal programmer or configuration mistakes and always propagate to
the caller.  They are distinct from validation failures, which are the
expected outcome of checking real data and are reported through
``Validator.errors`` instead of being raised.
"""
from __future__ import annotations


class FieldRulesError(Exception):
    """Base class for every configuration error raised by fieldrules."""


class UnknownFieldError(FieldRulesError, KeyError):
    """Raised when a rule is attached to a field that was never added."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Field {field!r} does not exist")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MissingConstraintError(FieldRulesError, LookupError):
    """Raised when validation reaches a rule with no registered constraint."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(f"Validation constraint {rule!r} does not exist")


class MissingMessageError(FieldRulesError, LookupError):
    """Raised when neither the rule nor the defaults supply an error message."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(f"Error message for rule {rule!r} does not exist")
